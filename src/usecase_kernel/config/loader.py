from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from usecase_kernel.config.errors import ConfigError
from usecase_kernel.config.models import RunnerConfig


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader; returns the raw mapping for validation.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_runner_config(raw: dict[str, object]) -> RunnerConfig:
    # Accepts either a bare runner mapping or one nested under a top-level "runner" key.
    section = raw.get("runner", raw)
    if not isinstance(section, dict):
        raise ConfigError("runner must be a mapping")
    try:
        return RunnerConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid runner config: {exc}") from exc


def load_runner_config(path: Path) -> RunnerConfig:
    return parse_runner_config(load_yaml_config(path))
