import pytest

from egg.builtin.env_builtin import register
from egg.evaluation.special_forms import SpecialForms
from egg.interpreter import Interpreter
from egg.types.scope import Scope


@pytest.fixture
def global_scope():
    """Fresh global scope with the builtins loaded."""
    s = Scope()
    register(s)
    return s


@pytest.fixture
def scope(global_scope):
    """Program scope: a child of the global scope, as `run` uses."""
    return global_scope.child()


@pytest.fixture
def forms():
    return SpecialForms.default()


@pytest.fixture
def interp():
    return Interpreter()
