from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed runner settings.


class LoggingConfig(BaseModel):
    # Structured log output of the runner.
    model_config = ConfigDict(extra="forbid")
    level: Literal["debug", "info", "warning", "error"] = "info"
    sink: Literal["stdout", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _jsonl_requires_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is 'jsonl'")
        return self


class TracingConfig(BaseModel):
    # Step trace records; written as JSONL when a path is set, kept in memory otherwise.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    path: str | None = None
    flush_every_n: int = Field(default=1, ge=1)


class RunnerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    ambiguity: Literal["first_declared", "error"] = "first_declared"
    recording: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
