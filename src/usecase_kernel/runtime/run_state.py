from __future__ import annotations

from dataclasses import dataclass, replace

from usecase_kernel.model.model import Model
from usecase_kernel.model.step import Step


@dataclass(frozen=True, slots=True)
class RunState:
    # Per-run history: the bound model and the latest successfully completed step.
    model: Model
    latest_step: Step | None = None

    def advance(self, step: Step) -> RunState:
        return replace(self, latest_step=step)
