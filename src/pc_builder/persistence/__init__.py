"""Persistence collaborators for submitted configurations."""

from .errors import PersistenceFailure, RepositoryError
from .interfaces import KeyValueStore
from .memory import InMemoryKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "PersistenceFailure",
    "RepositoryError",
]
