from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

LogLevel = Literal["debug", "info", "warning", "error"]

_LEVEL_RANK: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}
LOG_LEVELS: tuple[str, ...] = tuple(_LEVEL_RANK)


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload emitted by the runtime to a log sink.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in _LEVEL_RANK:
            raise ValueError(f"LogMessage.level must be one of: {sorted(_LEVEL_RANK)}")


def level_enabled(level: str, threshold: str) -> bool:
    return _LEVEL_RANK[level] >= _LEVEL_RANK[threshold]
