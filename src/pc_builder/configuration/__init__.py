"""Mutable configuration state and its derived-field rules."""

from .reconciler import reconcile_record, recompute_total, stale_fields
from .store import ConfigurationStore

__all__ = ["ConfigurationStore", "reconcile_record", "recompute_total", "stale_fields"]
