from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from usecase_kernel.model.condition import Condition
    from usecase_kernel.model.flow import Flow
    from usecase_kernel.model.flow_position import FlowPosition
    from usecase_kernel.model.use_case import UseCase

# A handler consumes the matched message; a non-None return value is published.
# Messages are arbitrary objects, so the handler boundary stays untyped.
Handler = Callable[[Any], object | None]


@dataclass(frozen=True, slots=True, eq=False)
class BaseStep:
    # Fields shared by every step kind. Identity equality: names are only unique per use case.
    name: str
    use_case: UseCase = field(repr=False)
    message_type: type
    handler: Handler = field(repr=False)
    # Global build order within the model; the earliest declared step wins ties.
    order: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Step.name must be a non-empty string")
        if not isinstance(self.message_type, type):
            raise TypeError(f"Step '{self.name}' message_type must be a class")
        if not callable(self.handler):
            raise TypeError(f"Step '{self.name}' handler must be callable")

    def handles(self, message_type: type) -> bool:
        # Assignability check shared by domain messages and raised errors.
        return issubclass(message_type, self.message_type)


@dataclass(frozen=True, slots=True, eq=False)
class FlowlessStep(BaseStep):
    # Independent of any flow; gated only by its optional condition.
    condition: Condition | None = None


@dataclass(frozen=True, slots=True, eq=False)
class InterruptingFlowStep(BaseStep):
    # First step of a flow with an explicit position and/or condition; may preempt other flows.
    flow: Flow = field(repr=False)
    flow_position: FlowPosition | None = None
    condition: Condition | None = None


@dataclass(frozen=True, slots=True, eq=False)
class InterruptableFlowStep(BaseStep):
    # Ordinary sequence step; runs right after previous_step, or anytime when it opens its flow.
    flow: Flow = field(repr=False)
    previous_step: Step | None = field(default=None, repr=False)
    condition: Condition | None = None


Step: TypeAlias = FlowlessStep | InterruptingFlowStep | InterruptableFlowStep
FlowStep: TypeAlias = InterruptingFlowStep | InterruptableFlowStep
