"""In-memory key-value store for tests and throwaway sessions."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from pc_builder.persistence.interfaces import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    _blobs: dict[str, str] = field(default_factory=dict)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def write(self, key: str, blob: str) -> None:
        async with self._lock:
            self._blobs[key] = blob

    async def read(self, key: str) -> str | None:
        async with self._lock:
            return self._blobs.get(key)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._blobs)
