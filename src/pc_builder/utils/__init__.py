"""Shared utilities."""

from .time import utc_now

__all__ = ["utc_now"]
