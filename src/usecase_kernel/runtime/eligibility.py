from __future__ import annotations

from usecase_kernel.model.condition import condition_holds
from usecase_kernel.model.flow_position import ANYTIME
from usecase_kernel.model.step import FlowlessStep, InterruptableFlowStep, InterruptingFlowStep, Step
from usecase_kernel.runtime.run_state import RunState


def is_step_eligible(step: Step, state: RunState, message_type: type) -> bool:
    # Pure eligibility over the closed set of step kinds. Assignability is checked separately.
    if isinstance(step, FlowlessStep):
        return condition_holds(step.condition)
    if isinstance(step, InterruptingFlowStep):
        return _interrupting_step_holds(step, state)
    if isinstance(step, InterruptableFlowStep):
        if step.previous_step is not None and step.previous_step is not state.latest_step:
            return False
        if not condition_holds(step.condition):
            return False
        # A sequence step yields when an interrupting step wants the same message.
        return not is_interrupted(state, message_type)
    raise TypeError(f"Unsupported step kind: {type(step).__name__}")


def is_interrupted(state: RunState, message_type: type) -> bool:
    return any(
        isinstance(step, InterruptingFlowStep)
        and step.handles(message_type)
        and _interrupting_step_holds(step, state)
        for step in state.model.steps
    )


def eligible_steps(state: RunState, message_type: type) -> list[Step]:
    # Candidates in build order: assignable first, then eligible.
    return [
        step
        for step in state.model.steps
        if step.handles(message_type) and is_step_eligible(step, state, message_type)
    ]


def _interrupting_step_holds(step: InterruptingFlowStep, state: RunState) -> bool:
    position = step.flow_position if step.flow_position is not None else ANYTIME
    return position.test(state.latest_step) and condition_holds(step.condition)
