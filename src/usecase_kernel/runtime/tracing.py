from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

from usecase_kernel.model.step import FlowlessStep, Step
from usecase_kernel.observability.adapters.tracing import TraceSink
from usecase_kernel.observability.domain.tracing import ErrorInfo, StepTraceRecord
from usecase_kernel.runtime.observer import RunnerObserver


@dataclass(frozen=True, slots=True)
class _TraceSpan:
    trace_id: str
    t_enter: datetime


class TracingObserver(RunnerObserver):
    # Records one StepTraceRecord per step execution without wrapping user handlers.
    def __init__(self, *, sink: TraceSink) -> None:
        self._sink = sink

    def before_step(self, *, step: Step, message: object) -> object | None:
        return _TraceSpan(trace_id=uuid.uuid4().hex, t_enter=datetime.now(tz=UTC))

    def after_step(self, *, step: Step, message: object, published: object | None, state: object | None) -> None:
        self._sink.emit(
            self._record(
                step,
                message,
                state,
                status="ok",
                published_type=None if published is None else type(published).__name__,
            )
        )

    def on_step_error(self, *, step: Step, message: object, error: Exception, state: object | None) -> None:
        info = ErrorInfo(type=type(error).__name__, message=str(error), where=step.name)
        self._sink.emit(self._record(step, message, state, status="error", error=info))

    def on_run_end(self) -> None:
        self._sink.flush()

    def _record(
        self,
        step: Step,
        message: object,
        state: object | None,
        *,
        status: Literal["ok", "error"],
        published_type: str | None = None,
        error: ErrorInfo | None = None,
    ) -> StepTraceRecord:
        t_exit = datetime.now(tz=UTC)
        span = state if isinstance(state, _TraceSpan) else _TraceSpan(uuid.uuid4().hex, t_exit)
        return StepTraceRecord(
            trace_id=span.trace_id,
            use_case=step.use_case.name,
            flow=None if isinstance(step, FlowlessStep) else step.flow.name,
            step=step.name,
            message_type=type(message).__name__,
            t_enter=span.t_enter,
            t_exit=t_exit,
            duration_ms=(t_exit - span.t_enter).total_seconds() * 1000.0,
            status=status,
            published_type=published_type,
            error=error,
        )
