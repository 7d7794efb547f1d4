"""Submission pipeline turning a validated configuration into a saved snapshot."""

from __future__ import annotations

import logging

from pc_builder.domain import Configuration, SubmittedSnapshot
from pc_builder.exceptions import NoSubmission
from pc_builder.persistence import KeyValueStore, PersistenceFailure
from pc_builder.validation import ValidationFailed, validate_configuration

from .serialization import deserialize_snapshot, serialize_snapshot

DEFAULT_SNAPSHOT_KEY = "computerConfig"

SubmissionResult = SubmittedSnapshot | ValidationFailed


class SubmissionPipeline:
    """Validates submissions, holds the last snapshot and persists it on request."""

    def __init__(
        self,
        key_value_store: KeyValueStore,
        *,
        snapshot_key: str = DEFAULT_SNAPSHOT_KEY,
        logger: logging.Logger | None = None,
    ) -> None:
        self._store = key_value_store
        self._snapshot_key = snapshot_key
        self._logger = logger or logging.getLogger(__name__)
        self._last_submitted: SubmittedSnapshot | None = None
        self._last_errors: dict[str, str] = {}

    @property
    def snapshot_key(self) -> str:
        return self._snapshot_key

    @property
    def last_submitted(self) -> SubmittedSnapshot | None:
        return self._last_submitted

    @property
    def last_errors(self) -> dict[str, str]:
        """Errors reported by the most recent ``submit`` call."""

        return dict(self._last_errors)

    def submit(self, configuration: Configuration) -> SubmissionResult:
        """Validate a configuration and snapshot it when it passes.

        A rejected submission leaves the previously submitted snapshot in place.
        """

        errors = validate_configuration(configuration)
        self._last_errors = dict(errors)
        if errors:
            self._logger.warning(
                "Configuration rejected with %d error(s): %s",
                len(errors),
                ", ".join(errors),
            )
            return ValidationFailed.from_errors(errors)

        snapshot = SubmittedSnapshot.from_configuration(configuration)
        self._last_submitted = snapshot
        self._logger.info(
            "Configuration %r submitted with %d component(s), total %s",
            snapshot.base_model,
            snapshot.component_count,
            snapshot.total_price,
        )
        return snapshot

    async def save(self, snapshot: SubmittedSnapshot | None = None) -> str:
        """Persist a snapshot (the last submitted one by default) and return the blob."""

        target = snapshot if snapshot is not None else self._last_submitted
        if target is None:
            msg = "No configuration has been submitted yet"
            raise NoSubmission(msg)

        blob = serialize_snapshot(target)
        try:
            await self._store.write(self._snapshot_key, blob)
        except Exception as exc:
            msg = f"Failed to save configuration under {self._snapshot_key!r}"
            raise PersistenceFailure(msg) from exc
        self._logger.info("Saved configuration under %r", self._snapshot_key)
        return blob

    async def load(self) -> SubmittedSnapshot | None:
        """Read back the configuration saved under the snapshot key, if any."""

        try:
            blob = await self._store.read(self._snapshot_key)
        except Exception as exc:
            msg = f"Failed to load configuration under {self._snapshot_key!r}"
            raise PersistenceFailure(msg) from exc
        if blob is None:
            return None
        return deserialize_snapshot(blob)


__all__ = ["DEFAULT_SNAPSHOT_KEY", "SubmissionPipeline", "SubmissionResult"]
