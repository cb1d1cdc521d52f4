import logging

from egg import EvaluatorFn
from egg import EggValue
from egg.types.errors import EggSyntaxError
from egg.types.expression import Expression, Word
from egg.types.function import Closure
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


def func_form(
    args: tuple[Expression, ...],
    scope: Scope,
    forms,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # func(p1, ..., pn, body): the last argument is always the body
    if not args:
        raise EggSyntaxError("Functions need a body")

    *param_exprs, body = args
    params = []
    for expr in param_exprs:
        if not isinstance(expr, Word):
            raise EggSyntaxError("Parameter names must be words")
        params.append(expr.name)

    closure = Closure(params, body, scope)
    logger.debug("Closure created: %s scope_id=%s", closure, id(scope))
    return closure
