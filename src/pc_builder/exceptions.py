"""Exceptions raised by the configuration engine."""

from __future__ import annotations


class ConfiguratorError(RuntimeError):
    """Base class for configuration engine errors."""


class ComponentIndexError(ConfiguratorError, IndexError):
    """Raised when a store operation references a missing component index."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Component index {index} out of range for {length} component(s)")
        self.index = index
        self.length = length


class UnknownFieldError(ConfiguratorError, KeyError):
    """Raised when an update names a field the component record does not have."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class FieldValueError(ConfiguratorError, ValueError):
    """Raised when a component field rejects the supplied value."""


class NoSubmission(ConfiguratorError):
    """Raised when saving before any configuration was successfully submitted."""


__all__ = [
    "ComponentIndexError",
    "ConfiguratorError",
    "FieldValueError",
    "NoSubmission",
    "UnknownFieldError",
]
