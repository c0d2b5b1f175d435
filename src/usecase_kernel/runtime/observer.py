from __future__ import annotations

from typing import Protocol, runtime_checkable

from usecase_kernel.model.step import Step


@runtime_checkable
class RunnerObserver(Protocol):
    # Dispatch lifecycle observer. before_step returns opaque state passed back on completion.
    def before_step(self, *, step: Step, message: object) -> object | None:
        return None

    def after_step(self, *, step: Step, message: object, published: object | None, state: object | None) -> None:
        return None

    def on_step_error(self, *, step: Step, message: object, error: Exception, state: object | None) -> None:
        return None

    def on_unhandled(self, *, message: object) -> None:
        return None

    def on_run_end(self) -> None:
        return None
