"""Core tree-walking evaluator for the Egg interpreter.

Dispatches on the three expression shapes: literals evaluate to themselves,
words are looked up through the scope chain, and applications either go to a
special form (arguments unevaluated) or are applied as ordinary calls.
"""

from __future__ import annotations

import logging

from egg import EggValue
from egg.evaluation.apply import apply
from egg.evaluation.special_forms import SpecialForms
from egg.types.errors import EggError
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


def evaluate(
    expr: Expression, scope: Scope, forms: SpecialForms | None = None
) -> EggValue:
    """Evaluate `expr` in `scope`, dispatching special forms through `forms`."""
    if forms is None:
        forms = SpecialForms.default()

    match expr:
        case Value(value=value):
            return value

        case Word(name=name):
            return scope.lookup(name)

        case Apply(operator=Word(name=name), args=args) if name in forms:
            logger.debug("Special form %s with %d argument(s)", name, len(args))
            return forms[name](args, scope, forms, evaluate)

        case Apply(operator=operator, args=args):
            head = evaluate(operator, scope, forms)
            values = [evaluate(arg, scope, forms) for arg in args]
            return apply(head, values, scope, forms, evaluate)

    raise EggError(f"Cannot evaluate {expr!r}")
