# Core type aliases for Egg's data model.
# Source text is parsed into the frozen Expression nodes of egg.types.expression;
# runtime values are plain Python objects (int/float, str, bool, list) plus the
# callable kinds in egg.types.function.
#
# Naming guidance:
# - Expression: use in reader/evaluator code to denote syntax (egg.types.expression).
# - EggValue:   use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: Python evaluator handed to special forms
EvaluatorFn = Callable[..., EggValue]

from egg.interpreter import Interpreter, run  # noqa: E402

__all__ = ["EggValue", "EvaluatorFn", "Interpreter", "run"]
