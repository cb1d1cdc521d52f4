from egg import EvaluatorFn
from egg import EggValue
from egg.types.errors import EggSyntaxError
from egg.types.expression import Expression
from egg.types.scope import Scope


def if_form(
    args: tuple[Expression, ...],
    scope: Scope,
    forms,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 3:
        raise EggSyntaxError("Wrong number of args to if")

    cond = evaluate_fn(args[0], scope, forms)
    # Only the boolean false selects the else branch; 0, "" and arrays are true
    if cond is not False:
        return evaluate_fn(args[1], scope, forms)
    return evaluate_fn(args[2], scope, forms)
