from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path


def dumps_line(payload: dict[str, object]) -> str:
    # Compact, UTF-8 preserving JSON; timestamps as ISO-8601 with a Z suffix.
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _json_default(obj: object) -> str:
    if isinstance(obj, (datetime, date)):
        return obj.isoformat().replace("+00:00", "Z")
    return str(obj)


class JsonlWriter:
    # Append-only JSON lines file shared by the log and trace sinks.
    def __init__(self, path: Path, *, flush_every_n: int = 1) -> None:
        self.path = path
        self._flush_every_n = max(1, flush_every_n)
        self._written = 0
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = path.open("a", encoding="utf-8")

    def write(self, payload: dict[str, object]) -> None:
        self._handle.write(dumps_line(payload) + "\n")
        self._written += 1
        if self._written % self._flush_every_n == 0:
            self.flush()

    def flush(self) -> None:
        if not self._handle.closed:
            self._handle.flush()

    def close(self) -> None:
        if self._handle.closed:
            return
        self._handle.flush()
        self._handle.close()
