from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Protocol, runtime_checkable

from usecase_kernel.observability.adapters.jsonl import JsonlWriter
from usecase_kernel.observability.domain.tracing import StepTraceRecord


@runtime_checkable
class TraceSink(Protocol):
    # Port for step trace delivery.
    def emit(self, record: StepTraceRecord) -> None:
        raise NotImplementedError("TraceSink.emit must be implemented")

    def flush(self) -> None:
        raise NotImplementedError("TraceSink.flush must be implemented")

    def close(self) -> None:
        raise NotImplementedError("TraceSink.close must be implemented")


class JsonlTraceSink:
    # One StepTraceRecord per line, flushed every `flush_every_n` records.
    def __init__(self, *, path: Path, flush_every_n: int = 1) -> None:
        self._writer = JsonlWriter(path, flush_every_n=flush_every_n)

    def emit(self, record: StepTraceRecord) -> None:
        self._writer.write(asdict(record))

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()


class MemoryTraceSink:
    # In-memory tape of trace records.
    def __init__(self) -> None:
        self.records: list[StepTraceRecord] = []
        self.closed = False

    def emit(self, record: StepTraceRecord) -> None:
        self.records.append(record)

    def flush(self) -> None:
        return None

    def close(self) -> None:
        self.closed = True
