import pytest

from egg.types.errors import EggReferenceError
from egg.types.scope import Scope


def test_define_and_lookup():
    s = Scope()
    s.define("x", 1)
    assert s.lookup("x") == 1


def test_lookup_walks_outward():
    root = Scope()
    root.define("x", 1)
    inner = root.child().child()
    assert inner.lookup("x") == 1
    assert inner.find("x") is root


def test_lookup_unbound_raises():
    with pytest.raises(EggReferenceError, match="Undefined binding: missing"):
        Scope(outer=Scope()).lookup("missing")


def test_define_shadows_without_touching_parent():
    root = Scope()
    root.define("x", 1)
    inner = root.child()
    inner.define("x", 2)
    assert inner.lookup("x") == 2
    assert root.lookup("x") == 1


def test_set_updates_nearest_binding():
    root = Scope()
    root.define("x", 1)
    inner = root.child()
    inner.set("x", 5)
    assert root.lookup("x") == 5
    assert "x" not in inner.vars


def test_set_unbound_raises():
    with pytest.raises(EggReferenceError):
        Scope().set("x", 1)


def test_false_values_are_found():
    s = Scope()
    s.define("f", False)
    s.define("zero", 0)
    assert s.child().lookup("f") is False
    assert s.child().lookup("zero") == 0


def test_contains_and_update():
    root = Scope()
    root.update({"a": 1, "b": 2})
    inner = root.child()
    assert "a" in inner
    assert "c" not in inner
    assert 1 not in inner


def test_chain_order():
    root = Scope()
    mid = root.child()
    leaf = mid.child()
    assert list(leaf.chain()) == [leaf, mid, root]


def test_str_and_repr():
    root = Scope()
    root.define("x", 1)
    inner = root.child()
    inner.define("y", "two")
    assert str(root) == "{x: 1}"
    assert str(inner) == "{y: 'two'} -> ..."
    assert repr(inner) == "<Scope chain: {y: 'two'} -> {x: 1}>"
