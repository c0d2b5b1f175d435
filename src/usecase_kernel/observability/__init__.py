# Observability package: structured log messages, step trace records and their sinks.

from usecase_kernel.observability.adapters import (
    JsonlLogSink,
    JsonlTraceSink,
    LogSink,
    MemoryLogSink,
    MemoryTraceSink,
    StdoutLogSink,
    TraceSink,
)
from usecase_kernel.observability.domain import ErrorInfo, LogLevel, LogMessage, StepTraceRecord, level_enabled

__all__ = [
    "ErrorInfo",
    "JsonlLogSink",
    "JsonlTraceSink",
    "LogLevel",
    "LogMessage",
    "LogSink",
    "MemoryLogSink",
    "MemoryTraceSink",
    "StdoutLogSink",
    "StepTraceRecord",
    "TraceSink",
    "level_enabled",
]
