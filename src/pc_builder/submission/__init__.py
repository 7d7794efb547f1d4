"""Submission and persistence of finished configurations."""

from .pipeline import DEFAULT_SNAPSHOT_KEY, SubmissionPipeline, SubmissionResult
from .serialization import describe_snapshot, deserialize_snapshot, serialize_snapshot
from .session import ConfiguratorSession

__all__ = [
    "DEFAULT_SNAPSHOT_KEY",
    "ConfiguratorSession",
    "SubmissionPipeline",
    "SubmissionResult",
    "describe_snapshot",
    "deserialize_snapshot",
    "serialize_snapshot",
]
