"""Application engine for Egg.

Function application is a closed choice over the two callable kinds:
- Closure: bind arguments in a fresh child of the defining scope and evaluate
  the body there.
- Primitive: call the host function with the caller's scope and arguments.
Anything else is not callable.
"""

import logging

from egg import EggValue, EvaluatorFn
from egg.types.errors import EggTypeError
from egg.types.function import Closure, Primitive
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


def apply(
    head: EggValue,
    args: list[EggValue],
    scope: Scope,
    forms,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply an evaluated operator to already-evaluated arguments."""
    match head:
        case Closure():
            local = head.extend_scope(args)
            logger.debug("Calling %s with %d argument(s)", head, len(args))
            return evaluate_fn(head.body, local, forms)
        case Primitive():
            return head(scope, args)
        case _:
            raise EggTypeError("Applying a non-function.")
