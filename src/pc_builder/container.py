"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pc_builder.config import AppSettings
from pc_builder.configuration import ConfigurationStore
from pc_builder.persistence import InMemoryKeyValueStore, KeyValueStore
from pc_builder.persistence.sqlite import create_sqlite_key_value_store
from pc_builder.submission import ConfiguratorSession, SubmissionPipeline

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Shared configuration and persistence backend; sessions are created per user."""

    settings: AppSettings
    key_value_store: KeyValueStore

    def new_session(self) -> ConfiguratorSession:
        pipeline = SubmissionPipeline(
            self.key_value_store,
            snapshot_key=self.settings.snapshot_key,
        )
        return ConfiguratorSession(pipeline=pipeline, store=ConfigurationStore())


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _build_key_value_store(settings: AppSettings) -> KeyValueStore:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage; saved configurations are not kept")
        return InMemoryKeyValueStore()
    _ensure_sqlite_directory(settings.database_url)
    logger.info("Using SQLite storage at %s", settings.database_url)
    return create_sqlite_key_value_store(settings.database_url)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    return ServiceContainer(
        settings=resolved_settings,
        key_value_store=_build_key_value_store(resolved_settings),
    )


__all__ = ["ServiceContainer", "build_container"]
