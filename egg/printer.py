"""Render Egg runtime values the way `print` and the REPL show them."""

from __future__ import annotations

from egg import EggValue


def to_string(value: EggValue) -> str:
    """Top-level rendering: strings are shown raw."""
    if isinstance(value, str):
        return value
    return to_repr(value)


def to_repr(value: EggValue) -> str:
    """Nested rendering: strings are quoted so array elements stay readable."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return "[" + ", ".join(to_repr(v) for v in value) + "]"
    return str(value)
