"""Derived-field rules applied after every store mutation."""

from __future__ import annotations

from collections.abc import Iterable

from pc_builder.domain import FIELD_DEFAULTS, ComponentRecord, Number, derive_total


def stale_fields(previous: ComponentRecord, updated: ComponentRecord) -> frozenset[str]:
    """Fields applicable under the previous type that the new type no longer uses."""

    return previous.applicable_fields - updated.applicable_fields


def reconcile_record(
    previous: ComponentRecord,
    updated: ComponentRecord,
    changed_field: str,
) -> ComponentRecord:
    """Clear fields left stale by a type change.

    Cleared fields are not validated here; missing values only surface
    when the configuration is submitted.
    """

    if changed_field != "type" or previous.type == updated.type:
        return updated
    cleared = stale_fields(previous, updated)
    if not cleared:
        return updated
    return updated.model_copy(update={name: FIELD_DEFAULTS[name] for name in cleared})


def recompute_total(components: Iterable[ComponentRecord]) -> Number:
    """Sum of component prices, counting unparsable or missing prices as 0."""

    return derive_total(components)


__all__ = ["reconcile_record", "recompute_total", "stale_fields"]
