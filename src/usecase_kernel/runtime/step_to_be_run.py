from __future__ import annotations

from dataclasses import dataclass

from usecase_kernel.model.step import Step


@dataclass(frozen=True, slots=True)
class StepToBeRun:
    # A matched step and its triggering message, handed to the runner's handle hook.
    step: Step
    message: object

    def run(self) -> object | None:
        return self.step.handler(self.message)


def run_step(step_to_be_run: StepToBeRun) -> object | None:
    # Default handle hook.
    return step_to_be_run.run()
