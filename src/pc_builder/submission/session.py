"""Per-user session pairing one configuration store with one pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from pc_builder.configuration import ConfigurationStore
from pc_builder.domain import SubmittedSnapshot

from .pipeline import SubmissionPipeline, SubmissionResult


@dataclass(slots=True)
class ConfiguratorSession:
    pipeline: SubmissionPipeline
    store: ConfigurationStore = field(default_factory=ConfigurationStore)

    def submit(self) -> SubmissionResult:
        return self.pipeline.submit(self.store.configuration)

    async def save(self) -> str:
        return await self.pipeline.save()

    async def load(self) -> SubmittedSnapshot | None:
        return await self.pipeline.load()


__all__ = ["ConfiguratorSession"]
