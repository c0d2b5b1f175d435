from usecase_kernel.observability.domain.logging import LogLevel, LogMessage, level_enabled
from usecase_kernel.observability.domain.tracing import ErrorInfo, StepTraceRecord

__all__ = ["ErrorInfo", "LogLevel", "LogMessage", "StepTraceRecord", "level_enabled"]
