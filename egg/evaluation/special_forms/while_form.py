from egg import EvaluatorFn
from egg import EggValue
from egg.types.errors import EggSyntaxError
from egg.types.expression import Expression
from egg.types.scope import Scope


def while_form(
    args: tuple[Expression, ...],
    scope: Scope,
    forms,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    while(cond, body)
    The body runs in the enclosing scope. Egg has no undefined value, so the
    loop always yields false.
    """
    if len(args) != 2:
        raise EggSyntaxError("Wrong number of args to while")

    cond, body = args
    while evaluate_fn(cond, scope, forms) is not False:
        evaluate_fn(body, scope, forms)
    return False
