from __future__ import annotations

from typing import TYPE_CHECKING

from usecase_kernel.model.errors import ElementAlreadyInModel
from usecase_kernel.model.flow import Flow
from usecase_kernel.model.registry import find_element, save_element
from usecase_kernel.model.step import (
    FlowlessStep,
    Handler,
    InterruptableFlowStep,
    InterruptingFlowStep,
    Step,
)

if TYPE_CHECKING:
    from usecase_kernel.model.condition import Condition
    from usecase_kernel.model.flow_position import FlowPosition
    from usecase_kernel.model.model import Model

BASIC_FLOW = "Basic flow"


class UseCase:
    """A named unit of interaction, e.g. "Get cash" for an ATM.

    The use case defines no behavior itself. Its steps do, grouped into flows.
    Every use case owns exactly one basic flow (the happy-day scenario), created
    here. Step names are unique across all flows of the use case.
    """

    def __init__(self, name: str, model: Model) -> None:
        self.name = name
        self.model = model
        self._flows: dict[str, Flow] = {}
        self._steps: dict[str, Step] = {}
        self.basic_flow = self.new_flow(BASIC_FLOW)

    def __repr__(self) -> str:
        return f"UseCase(name={self.name!r})"

    @property
    def flows(self) -> tuple[Flow, ...]:
        return tuple(self._flows.values())

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps.values())

    def has_flow(self, name: str) -> bool:
        return name in self._flows

    def has_step(self, name: str) -> bool:
        return name in self._steps

    def find_flow(self, name: str) -> Flow:
        return find_element("Flow", name, self._flows)

    def find_step(self, name: str) -> Step:
        return find_element("Step", name, self._steps)

    def new_flow(self, name: str) -> Flow:
        return save_element("Flow", name, Flow(name, self), self._flows)

    def new_interrupting_flow_step(
        self,
        name: str,
        flow: Flow,
        *,
        message_type: type,
        handler: Handler,
        flow_position: FlowPosition | None = None,
        condition: Condition | None = None,
    ) -> InterruptingFlowStep:
        # Opens a flow whose entry is gated by position (None means anytime) and condition.
        self._check_flow(flow)
        if flow.steps:
            raise ValueError(f"Interrupting step '{name}' must be the first step of flow '{flow.name}'")
        self._check_step_name(name)
        step = InterruptingFlowStep(
            name=name,
            use_case=self,
            message_type=message_type,
            handler=handler,
            order=self.model._next_order(),
            flow=flow,
            flow_position=flow_position,
            condition=condition,
        )
        self._save_flow_step(step)
        return step

    def new_interruptable_flow_step(
        self,
        name: str,
        flow: Flow,
        *,
        message_type: type,
        handler: Handler,
        condition: Condition | None = None,
    ) -> InterruptableFlowStep:
        # Continues the flow after its current last step (or opens it unconditionally).
        self._check_flow(flow)
        self._check_step_name(name)
        step = InterruptableFlowStep(
            name=name,
            use_case=self,
            message_type=message_type,
            handler=handler,
            order=self.model._next_order(),
            flow=flow,
            previous_step=flow.last_step,
            condition=condition,
        )
        self._save_flow_step(step)
        return step

    def new_flowless_step(
        self,
        name: str,
        *,
        message_type: type,
        handler: Handler,
        condition: Condition | None = None,
    ) -> FlowlessStep:
        self._check_step_name(name)
        step = FlowlessStep(
            name=name,
            use_case=self,
            message_type=message_type,
            handler=handler,
            order=self.model._next_order(),
            condition=condition,
        )
        save_element("Step", name, step, self._steps)
        self.model._register_step(step)
        return step

    def _save_flow_step(self, step: InterruptingFlowStep | InterruptableFlowStep) -> None:
        save_element("Step", step.name, step, self._steps)
        step.flow._append(step)
        self.model._register_step(step)

    def _check_step_name(self, name: str) -> None:
        # Fail before a build order index is consumed.
        if self.has_step(name):
            raise ElementAlreadyInModel("Step", name)

    def _check_flow(self, flow: Flow) -> None:
        if flow.use_case is not self:
            raise ValueError(f"Flow '{flow.name}' does not belong to use case '{self.name}'")
