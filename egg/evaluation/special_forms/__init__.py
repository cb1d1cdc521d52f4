"""Registry of special forms for the Egg evaluator.

Maps reserved words to handler functions that receive their arguments
unevaluated and control their own evaluation order. The evaluator consults the
registry it is given before ordinary function application, so new forms can be
registered without touching the evaluator.

Handlers are called as `handler(args, scope, forms, evaluate_fn)`.
"""

from __future__ import annotations

from typing import Callable, Iterator

from egg import EggValue
from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.func_form import func_form
from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.while_form import while_form

SpecialFormFn = Callable[..., EggValue]


class SpecialForms:
    """A name -> handler table, built once per interpreter and passed to `evaluate`."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: dict[str, SpecialFormFn] | None = None):
        self._handlers: dict[str, SpecialFormFn] = dict(handlers or {})

    @classmethod
    def default(cls) -> SpecialForms:
        return cls(
            {
                "if": if_form,
                "while": while_form,
                "do": do_form,
                "define": define_form,
                "func": func_form,
            }
        )

    def register(self, name: str, handler: SpecialFormFn) -> None:
        self._handlers[name] = handler

    def get(self, name: str) -> SpecialFormFn | None:
        return self._handlers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __getitem__(self, name: str) -> SpecialFormFn:
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
