"""Shared error types."""

from __future__ import annotations

from typing import Any


class ConfigError(TypeError):
    """Raised when an animator is constructed with an invalid configuration."""

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        self.field = field
        self.value = value
        if message is None:
            message = f"{field} must be a mapping, got {type(value).__name__}"
        super().__init__(message)


class DimensionMismatchError(ValueError):
    """Raised when a value set does not match the animator's dimensions."""

    def __init__(self, expected: tuple[str, ...], actual: tuple[str, ...]) -> None:
        self.expected = expected
        self.actual = actual
        if len(expected) != len(actual):
            message = f"expected {len(expected)} dimensions, got {len(actual)}"
        else:
            message = f"expected keys {list(expected)}, got {list(actual)}"
        super().__init__(message)
