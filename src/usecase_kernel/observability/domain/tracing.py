from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    # Handler exception summary recorded on failed step executions.
    type: str
    message: str
    where: str


@dataclass(frozen=True, slots=True)
class StepTraceRecord:
    # One record per step execution, including cascaded ones.
    trace_id: str
    use_case: str
    flow: str | None
    step: str
    message_type: str
    t_enter: datetime
    t_exit: datetime
    duration_ms: float
    status: Literal["ok", "error"]
    published_type: str | None = None
    error: ErrorInfo | None = None
