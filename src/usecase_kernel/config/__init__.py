from .errors import ConfigError
from .loader import load_runner_config, load_yaml_config, parse_runner_config
from .models import LoggingConfig, RunnerConfig, TracingConfig

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "RunnerConfig",
    "TracingConfig",
    "load_runner_config",
    "load_yaml_config",
    "parse_runner_config",
]
