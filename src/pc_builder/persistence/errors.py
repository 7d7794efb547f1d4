"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class PersistenceFailure(RepositoryError):
    """Raised when a snapshot could not be written to or read from storage."""
