"""Persistence abstractions consumed by the submission pipeline."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Opaque blob storage addressed by string keys.

    ``write`` raises on failure so callers awaiting it can report the error.
    """

    async def write(self, key: str, blob: str) -> None: ...

    async def read(self, key: str) -> str | None: ...
