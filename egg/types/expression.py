"""Syntax tree nodes produced by the reader and walked by the evaluator.

An Egg program is a single expression of one of three shapes:

    Value   a string, number or boolean literal
    Word    an identifier
    Apply   an operator expression applied to a tuple of argument expressions

Nodes are frozen, so they compare structurally and can be shared freely
between closures created from the same source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Value:
    value: str | int | float | bool

    def __str__(self) -> str:
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)


@dataclass(frozen=True)
class Word:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Apply:
    operator: Expression
    args: tuple[Expression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of arguments but store an immutable tuple
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(a) for a in self.args)})"


Expression = Union[Value, Word, Apply]
