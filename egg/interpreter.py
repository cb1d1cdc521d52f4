"""Interpreter sessions and the `run` entry point."""

from __future__ import annotations

import logging

from egg import EggValue
from egg.builtin.env_builtin import register
from egg.evaluation.evaluator import evaluate
from egg.evaluation.special_forms import SpecialForms
from egg.reader.parser import parse
from egg.types.scope import Scope

logger = logging.getLogger(__name__)


class Interpreter:
    """
    An Egg interpreter owning a global scope and a special-form registry.

    `run` evaluates each program in a fresh child of the global scope, so
    programs cannot see each other's definitions. `eval` evaluates in one
    persistent session scope, which is what the REPL uses.
    """
    def __init__(self, prelude: str | None = None, forms: SpecialForms | None = None):
        self.globals = Scope()
        register(self.globals)
        self.forms = forms if forms is not None else SpecialForms.default()
        self.session = self.globals.child()

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> EggValue:
        """Evaluate Egg code directly in the global scope."""
        logger.debug("Evaluating prelude (%d chars)", len(code))
        return evaluate(parse(code), self.globals, self.forms)

    def run(self, code: str) -> EggValue:
        """Parse and evaluate a program in a fresh child of the global scope."""
        logger.debug("Running program: %.60s", code)
        return evaluate(parse(code), self.globals.child(), self.forms)

    def eval(self, code: str) -> EggValue:
        """Parse and evaluate `code` in the persistent session scope."""
        return evaluate(parse(code), self.session, self.forms)


def run(code: str) -> EggValue:
    """Parse `code` and evaluate it against a fresh global scope."""
    return Interpreter().run(code)
