"""SQLite persistence implementation."""

from .store import SQLiteKeyValueStore, create_sqlite_key_value_store

__all__ = ["SQLiteKeyValueStore", "create_sqlite_key_value_store"]
