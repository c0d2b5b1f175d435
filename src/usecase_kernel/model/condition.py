from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Condition:
    # Side-effect-free predicate over application state, evaluated at dispatch time.
    predicate: Callable[[], bool]
    label: str = ""

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise TypeError("Condition.predicate must be callable")

    def test(self) -> bool:
        return bool(self.predicate())


def condition_holds(condition: Condition | None) -> bool:
    # Absent condition means "always".
    return condition is None or condition.test()
