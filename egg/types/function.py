"""Callable runtime values: user closures and host primitives."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional, Sequence

from egg import EggValue
from egg.types.errors import EggTypeError
from egg.types.expression import Expression
from egg.types.scope import Scope


class Closure:
    """A first-class function with parameter names, body, and defining scope."""

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: Sequence[str], body: Expression, scope: Scope):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        # Captured by reference; later defines in the defining scope stay visible
        self.scope: Scope = scope

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_scope(self, args: Sequence[EggValue]) -> Scope:
        """
        Bind the given argument values to this closure's parameters and
        return a new Scope, child of the defining scope, for evaluating the body.
        """
        if len(args) != self.arity:
            raise EggTypeError("Wrong number of arguments")
        local = self.scope.child()
        for name, value in zip(self.params, args):
            local.define(name, value)
        return local

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("func(")
            buffer.write(", ".join(self.params))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self} -> {self.body}>"


HostFn = Callable[[Scope, list], EggValue]


class Primitive:
    """A named host function exposed to Egg programs.

    Host functions follow the builtin calling convention `fn(scope, args)`.
    When `arity` is set, the argument count is checked before the call.
    """

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: HostFn, arity: Optional[int] = None):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, scope: Scope, args: list[EggValue]) -> EggValue:
        if self.arity is not None and len(args) != self.arity:
            raise EggTypeError(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.fn(scope, args)

    def __str__(self) -> str:
        return f"<primitive {self.name}>"

    __repr__ = __str__
