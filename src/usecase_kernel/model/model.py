from __future__ import annotations

from itertools import count

from usecase_kernel.model.registry import find_element, save_element
from usecase_kernel.model.step import Step
from usecase_kernel.model.use_case import UseCase


class Model:
    # Root namespace of use cases. Append-only while building, read-only afterwards.
    def __init__(self) -> None:
        self._use_cases: dict[str, UseCase] = {}
        # Steps of all use cases in global build order (dispatch tie-break order).
        self._steps: list[Step] = []
        self._order = count()

    def __repr__(self) -> str:
        return f"Model(use_cases={list(self._use_cases)!r})"

    @property
    def use_cases(self) -> tuple[UseCase, ...]:
        return tuple(self._use_cases.values())

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    def new_use_case(self, name: str) -> UseCase:
        return save_element("UseCase", name, UseCase(name, self), self._use_cases)

    def has_use_case(self, name: str) -> bool:
        return name in self._use_cases

    def find_use_case(self, name: str) -> UseCase:
        return find_element("UseCase", name, self._use_cases)

    def _next_order(self) -> int:
        return next(self._order)

    def _register_step(self, step: Step) -> None:
        self._steps.append(step)
