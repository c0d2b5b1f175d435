from __future__ import annotations


class ModelError(ValueError):
    # Base error for model construction and lookup failures (fail fast on build).
    pass


class ElementAlreadyInModel(ModelError):
    # Raised when a name is already taken within its namespace.
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} '{name}' already exists in model")
        self.kind = kind
        self.name = name


class NoSuchElementInModel(ModelError, KeyError):
    # Raised when a lookup by name finds nothing.
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} '{name}' not found in model")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0])
