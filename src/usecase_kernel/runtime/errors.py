from __future__ import annotations

from collections.abc import Sequence

from usecase_kernel.model.step import Step


class AmbiguousStepsError(RuntimeError):
    # Raised in strict ambiguity mode when more than one step can react to a message.
    def __init__(self, message: object, steps: Sequence[Step]) -> None:
        names = [f"{step.use_case.name}/{step.name}" for step in steps]
        super().__init__(f"Ambiguous steps for '{type(message).__name__}': {names}")
        self.message = message
        self.steps = list(steps)
