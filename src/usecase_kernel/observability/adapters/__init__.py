from usecase_kernel.observability.adapters.logging import JsonlLogSink, LogSink, MemoryLogSink, StdoutLogSink
from usecase_kernel.observability.adapters.tracing import JsonlTraceSink, MemoryTraceSink, TraceSink

__all__ = [
    "JsonlLogSink",
    "JsonlTraceSink",
    "LogSink",
    "MemoryLogSink",
    "MemoryTraceSink",
    "StdoutLogSink",
    "TraceSink",
]
