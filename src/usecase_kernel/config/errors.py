from __future__ import annotations


class ConfigError(ValueError):
    # Raised for invalid runner configuration (fail fast).
    pass
