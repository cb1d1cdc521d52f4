"""
  Egg Reader

- Recursive descent over the residual source string, no separate lex pass
- Each step returns the parsed node together with the unconsumed text
- Emits the frozen nodes of egg.types.expression:

    - "text"       -> Value(str)     (no escape sequences)
    - 123          -> Value(int)     (decimal digits only, no sign)
    - name         -> Word(name)     (anything but whitespace, parens, comma, quote)
    - f(a, b)      -> Apply(Word(f), (a, b))
    - f(a)(b)      -> Apply(Apply(Word(f), (a,)), (b,))
"""

from __future__ import annotations

import re

from egg.types.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Value, Word


STRING_RE = re.compile(r'"([^"]*)"')
NUMBER_RE = re.compile(r"\d+\b", re.ASCII)
WORD_RE = re.compile(r'[^\s(),"]+')
NON_SPACE_RE = re.compile(r"\S")


def skip_space(text: str) -> str:
    """Drop leading whitespace; returns "" when nothing but whitespace remains."""
    match = NON_SPACE_RE.search(text)
    if match is None:
        return ""
    return text[match.start():]


def parse_expression(text: str) -> tuple[Expression, str]:
    """Parse one expression (with any trailing argument lists) from `text`."""
    text = skip_space(text)
    if match := STRING_RE.match(text):
        expr: Expression = Value(match.group(1))
    elif match := NUMBER_RE.match(text):
        try:
            expr = Value(int(match.group(0)))
        except ValueError:
            # Python caps int() conversion of very long digit strings
            raise EggSyntaxError("Number literal too long") from None
    elif match := WORD_RE.match(text):
        expr = Word(match.group(0))
    else:
        raise EggSyntaxError(f"Unexpected syntax: {text}")
    return parse_apply(expr, text[match.end():])


def parse_apply(expr: Expression, text: str) -> tuple[Expression, str]:
    """Wrap `expr` in Apply nodes for every argument list that follows it."""
    text = skip_space(text)
    if not text.startswith("("):
        return expr, text

    text = skip_space(text[1:])
    args: list[Expression] = []
    if text.startswith(")"):
        return parse_apply(Apply(expr, ()), text[1:])

    while True:
        arg, text = parse_expression(text)
        args.append(arg)
        text = skip_space(text)
        if text.startswith(","):
            text = skip_space(text[1:])
        elif text.startswith(")"):
            break
        else:
            raise EggSyntaxError("Expected ',' or ')'")

    # Application is left-associative: f(x)(y) applies the result of f(x)
    return parse_apply(Apply(expr, tuple(args)), text[1:])


def parse(source: str) -> Expression:
    """Parse a complete program; trailing text is an error."""
    expr, rest = parse_expression(source)
    if skip_space(rest):
        raise EggSyntaxError("Unexpected text after program")
    return expr
