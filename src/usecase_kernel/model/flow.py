from __future__ import annotations

from typing import TYPE_CHECKING

from usecase_kernel.model.step import InterruptingFlowStep

if TYPE_CHECKING:
    from usecase_kernel.model.condition import Condition
    from usecase_kernel.model.flow_position import FlowPosition
    from usecase_kernel.model.step import FlowStep
    from usecase_kernel.model.use_case import UseCase


class Flow:
    # Ordered sequence of steps; one path through its use case.
    def __init__(self, name: str, use_case: UseCase) -> None:
        self.name = name
        self.use_case = use_case
        self._steps: list[FlowStep] = []

    def __repr__(self) -> str:
        return f"Flow(name={self.name!r}, use_case={self.use_case.name!r})"

    @property
    def steps(self) -> tuple[FlowStep, ...]:
        return tuple(self._steps)

    @property
    def first_step(self) -> FlowStep | None:
        return self._steps[0] if self._steps else None

    @property
    def last_step(self) -> FlowStep | None:
        return self._steps[-1] if self._steps else None

    @property
    def flow_position(self) -> FlowPosition | None:
        # Position and condition gate the flow's entry, so they live on the interrupting first step.
        first = self.first_step
        if isinstance(first, InterruptingFlowStep):
            return first.flow_position
        return None

    @property
    def condition(self) -> Condition | None:
        first = self.first_step
        if isinstance(first, InterruptingFlowStep):
            return first.condition
        return None

    def _append(self, step: FlowStep) -> None:
        # Only the owning use case appends; the graph never shrinks.
        self._steps.append(step)
