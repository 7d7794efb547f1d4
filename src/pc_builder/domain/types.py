"""Shared type aliases for the domain layer."""

from __future__ import annotations

Number = int | float

__all__ = ["Number"]
