"""Built-in functions for the Egg global scope.

This module defines the boolean constants, the binary arithmetic and
comparison operators, printing, and the array helpers exposed to Egg code.
Every builtin follows the host calling convention `fn(scope, args)` and checks
the kinds of its operands explicitly.
"""
from __future__ import annotations

import operator
from typing import Callable

from egg import EggValue
from egg.printer import to_string
from egg.types.errors import EggArithmeticError, EggIndexError, EggTypeError
from egg.types.function import Primitive
from egg.types.scope import Scope


def is_number(x: EggValue) -> bool:
    # bool is an int subclass in Python but a separate kind in Egg
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _require_numbers(name: str, args: list[EggValue]) -> None:
    for x in args:
        if not is_number(x):
            raise EggTypeError(f"Arguments to {name} must be numbers, got {to_string(x)!r}")


def _numeric(name: str, op: Callable[[EggValue, EggValue], EggValue]):
    def fn(scope: Scope, args: list[EggValue]) -> EggValue:
        _require_numbers(name, args)
        try:
            return op(args[0], args[1])
        except OverflowError:
            raise EggArithmeticError(f"Result of {name} too large")

    fn.__name__ = f"egg_{op.__name__}"
    return fn


# -------------------------------
# Arithmetic
# -------------------------------
def add(scope: Scope, args: list[EggValue]) -> EggValue:
    """Sum two numbers, or concatenate two strings."""
    a, b = args
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    _require_numbers("+", args)
    return a + b


def div(scope: Scope, args: list[EggValue]) -> EggValue:
    """True division; whole quotients of integers stay integers."""
    _require_numbers("/", args)
    a, b = args
    try:
        if isinstance(a, int) and isinstance(b, int) and a % b == 0:
            return a // b
        return a / b
    except ZeroDivisionError:
        raise EggArithmeticError("Division by zero")
    except OverflowError:
        raise EggArithmeticError("Division result too large")


# -------------------------------
# Comparison
# -------------------------------
def equals(scope: Scope, args: list[EggValue]) -> bool:
    """Equal only when both values are of the same kind and compare equal."""
    a, b = args
    if is_number(a) and is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(equals(scope, [x, y]) for x, y in zip(a, b))
    if isinstance(a, (str, bool)):
        return a == b
    # Functions compare by identity
    return a is b


# -------------------------------
# Output
# -------------------------------
def print_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
    """Write the value to stdout and return it unchanged."""
    value = args[0]
    print(to_string(value))
    return value


# -------------------------------
# Arrays
# -------------------------------
def array(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    return list(args)


def length(scope: Scope, args: list[EggValue]) -> int:
    arr = args[0]
    if not isinstance(arr, list):
        raise EggTypeError("length requires an array")
    return len(arr)


def element(scope: Scope, args: list[EggValue]) -> EggValue:
    """Return arr[i]; negative or too-large indices are errors, not wraparound."""
    arr, i = args
    if not isinstance(arr, list):
        raise EggTypeError("element requires an array")
    if isinstance(i, float) and i.is_integer():
        i = int(i)
    if not is_number(i) or not isinstance(i, int):
        raise EggTypeError("element index must be an integer")
    if not 0 <= i < len(arr):
        raise EggIndexError(f"Index {i} out of range for array of length {len(arr)}")
    return arr[i]


BUILTINS: dict[str, tuple[Callable[[Scope, list[EggValue]], EggValue], int | None]] = {
    "+": (add, 2),
    "-": (_numeric("-", operator.sub), 2),
    "*": (_numeric("*", operator.mul), 2),
    "/": (div, 2),
    "==": (equals, 2),
    "<": (_numeric("<", operator.lt), 2),
    ">": (_numeric(">", operator.gt), 2),
    "print": (print_builtin, 1),
    "array": (array, None),
    "length": (length, 1),
    "element": (element, 2),
}


def register(scope: Scope) -> None:
    """Populate `scope` with the Egg global bindings."""
    scope.define("true", True)
    scope.define("false", False)
    for name, (fn, arity) in BUILTINS.items():
        scope.define(name, Primitive(name, fn, arity))
