from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol, runtime_checkable

from usecase_kernel.observability.adapters.jsonl import JsonlWriter, dumps_line
from usecase_kernel.observability.domain.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    # Port for structured log delivery.
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink.emit must be implemented")


class StdoutLogSink:
    # Compact JSON line per message on stdout.
    def emit(self, message: LogMessage) -> None:
        sys.stdout.write(dumps_line(_log_payload(message)) + "\n")


class JsonlLogSink:
    # Log messages appended to a JSON lines file; every message is flushed.
    def __init__(self, path: Path) -> None:
        self._writer = JsonlWriter(path)

    def emit(self, message: LogMessage) -> None:
        self._writer.write(_log_payload(message))

    def close(self) -> None:
        self._writer.close()


class MemoryLogSink:
    # Keeps messages in memory; used by tests and embedding applications.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def texts(self, level: str | None = None) -> list[str]:
        return [m.message for m in self.messages if level is None or m.level == level]


def _log_payload(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp,
        "fields": message.fields,
    }
