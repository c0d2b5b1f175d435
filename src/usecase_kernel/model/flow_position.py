from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from usecase_kernel.model.step import Step


@runtime_checkable
class FlowPosition(Protocol):
    # Predicate over run history: receives the latest completed step (None before any step ran).
    def test(self, latest_step: Step | None) -> bool:
        raise NotImplementedError("FlowPosition.test must be implemented")


@dataclass(frozen=True, slots=True)
class Anytime:
    # Position that holds regardless of run history.
    def test(self, latest_step: Step | None) -> bool:
        return True


ANYTIME = Anytime()


@dataclass(frozen=True, slots=True, eq=False)
class After:
    # Holds when the latest completed step is one of the anchor steps.
    # With no anchors it holds only before any step has run.
    steps: tuple[Step, ...] = ()

    def test(self, latest_step: Step | None) -> bool:
        if not self.steps:
            return latest_step is None
        return any(step is latest_step for step in self.steps)


@dataclass(frozen=True, slots=True, eq=False)
class InsteadOf:
    # Holds exactly where the anchor step would run next in its own flow.
    step: Step

    def __post_init__(self) -> None:
        if getattr(self.step, "flow", None) is None:
            raise ValueError(f"InsteadOf anchor '{self.step.name}' must be a flow step")

    def test(self, latest_step: Step | None) -> bool:
        return getattr(self.step, "previous_step", None) is latest_step


def after(*steps: Step) -> After:
    return After(steps=tuple(steps))


def instead_of(step: Step) -> InsteadOf:
    return InsteadOf(step=step)
