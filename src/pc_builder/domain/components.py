"""Component record model and the per-type applicable field rules."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import Field, field_validator

from pc_builder.exceptions import UnknownFieldError

from .base import MutableDomainModel
from .enums import ComponentType, StorageType
from .types import Number

_COMMON_FIELDS = frozenset({"type", "name", "price"})

APPLICABLE_FIELDS: Mapping[ComponentType | None, frozenset[str]] = {
    None: _COMMON_FIELDS,
    ComponentType.CPU: _COMMON_FIELDS,
    ComponentType.GPU: _COMMON_FIELDS,
    ComponentType.RAM: _COMMON_FIELDS | {"capacity"},
    ComponentType.STORAGE: _COMMON_FIELDS | {"capacity", "storage_type"},
}

# Ordered as they appear in serialized output.
FIELD_DEFAULTS: Mapping[str, Any] = {
    "type": None,
    "name": "",
    "price": 0,
    "capacity": "",
    "storage_type": None,
}

_WIRE_NAMES: Mapping[str, str] = {"storage_type": "storageType"}
_ATTRIBUTE_NAMES: Mapping[str, str] = {wire: attr for attr, wire in _WIRE_NAMES.items()}


def applicable_fields(component_type: ComponentType | str | None) -> frozenset[str]:
    """Return the fields that matter for a component of the given type.

    An unset type only carries the common fields; anything else stays
    out of validation and out of submitted snapshots.
    """

    if component_type is None or component_type == "":
        return APPLICABLE_FIELDS[None]
    return APPLICABLE_FIELDS[ComponentType(component_type)]


def resolve_field_name(name: str) -> str:
    """Map a wire name (``storageType``) or attribute name to the attribute name."""

    if not isinstance(name, str):
        msg = f"Component field names must be strings, got {name!r}"
        raise UnknownFieldError(msg)
    key = name.strip()
    key = _ATTRIBUTE_NAMES.get(key, key)
    if key not in FIELD_DEFAULTS:
        msg = f"Unknown component field: {name!r}"
        raise UnknownFieldError(msg)
    return key


def wire_name(field_name: str) -> str:
    return _WIRE_NAMES.get(field_name, field_name)


def _normalize_number(number: float) -> Number:
    if number.is_integer():
        return int(number)
    return number


def try_parse_number(value: object) -> Number | None:
    """Parse a user supplied price, returning ``None`` when it is not a finite number."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return _normalize_number(number)


def parse_number(value: object) -> Number:
    """Like :func:`try_parse_number` but coerces unparsable input to 0."""

    parsed = try_parse_number(value)
    return 0 if parsed is None else parsed


def derive_total(records: Iterable[ComponentRecord]) -> Number:
    """Sum of record prices, counting unparsable or missing prices as 0."""

    total = sum((parse_number(record.price) for record in records), 0)
    if isinstance(total, float):
        return _normalize_number(total)
    return total


class ComponentRecord(MutableDomainModel):
    """One component entry in a configuration, as edited by the user."""

    type: ComponentType | None = None
    name: str = ""
    price: Number | str | None = 0
    capacity: str = ""
    storage_type: StorageType | None = Field(default=None, alias="storageType")

    @field_validator("type", "storage_type", mode="before")
    @classmethod
    def blank_choice_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().lower()
            return normalized or None
        return value

    @field_validator("capacity", mode="before")
    @classmethod
    def coerce_capacity(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def applicable_fields(self) -> frozenset[str]:
        return applicable_fields(self.type)

    def effective_value(self, field_name: str) -> Any:
        """Current value of a field, or its empty default when not applicable."""

        if field_name in self.applicable_fields:
            return getattr(self, field_name)
        return FIELD_DEFAULTS[field_name]


__all__ = [
    "APPLICABLE_FIELDS",
    "FIELD_DEFAULTS",
    "ComponentRecord",
    "applicable_fields",
    "parse_number",
    "resolve_field_name",
    "derive_total",
    "try_parse_number",
    "wire_name",
]
