"""Runtime scopes for Egg.

A Scope stores bindings of names to evaluated values and supports nested
scopes via an `outer` link. Children never own their parent: a closure keeps
its defining scope alive simply by referencing it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from egg import EggValue
from egg.types.errors import EggReferenceError


class Scope:
    """Hierarchical mapping from names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Scope | None = outer

    def child(self) -> Scope:
        """Return a new, empty scope whose parent is this one."""
        return Scope(outer=self)

    def define(self, name: str, value: EggValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that contains `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def set(self, name: str, value: EggValue) -> None:
        """Update an existing binding for `name` wherever it lives in the chain.

        Raises EggReferenceError if the name is not bound.
        """
        scope = self.find(name)
        if scope is None:
            raise EggReferenceError(f"Cannot set undefined binding: {name}")
        scope.vars[name] = value

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, searching outward through parents.

        Raises EggReferenceError if not found.
        """
        scope = self.find(name)
        if scope is None:
            raise EggReferenceError(f"Undefined binding: {name}")
        return scope.vars[name]

    def update(self, mapping: Mapping[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def chain(self) -> Iterator[Scope]:
        scope: Optional[Scope] = self
        while scope is not None:
            yield scope
            scope = scope.outer

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        frames = []
        for scope in self.chain():
            with StringIO() as buffer:
                scope._write_vars(buffer)
                frames.append(buffer.getvalue())
        return f"<Scope chain: {' -> '.join(frames)}>"
