"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from pc_builder.submission import DEFAULT_SNAPSHOT_KEY

STORAGE_BACKENDS = ("sqlite", "memory")


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///pc_builder.db"
    storage_backend: str = "sqlite"
    snapshot_key: str = DEFAULT_SNAPSHOT_KEY
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            msg = (
                f"Unsupported storage backend {self.storage_backend!r}; "
                f"expected one of {', '.join(STORAGE_BACKENDS)}"
            )
            raise ValueError(msg)

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("PC_BUILDER_ENV", cls.environment),
            database_url=os.getenv("PC_BUILDER_DATABASE_URL", cls.database_url),
            storage_backend=os.getenv("PC_BUILDER_STORAGE_BACKEND", cls.storage_backend)
            .strip()
            .lower(),
            snapshot_key=os.getenv("PC_BUILDER_SNAPSHOT_KEY") or cls.snapshot_key,
            log_level=os.getenv("PC_BUILDER_LOG_LEVEL", cls.log_level).strip().upper(),
        )


__all__ = ["AppSettings", "STORAGE_BACKENDS"]
