from egg import EvaluatorFn
from egg import EggValue
from egg.types.errors import EggSyntaxError
from egg.types.expression import Expression, Word
from egg.types.scope import Scope


def define_form(
    args: tuple[Expression, ...],
    scope: Scope,
    forms,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds into the innermost scope only; an outer binding of the same name is
    shadowed, never modified.
    """
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of define")

    name, val_expr = args
    value = evaluate_fn(val_expr, scope, forms)
    scope.define(name.name, value)
    return value
