"""Domain models for computer configurations."""

from .base import DomainModel, MutableDomainModel
from .components import (
    APPLICABLE_FIELDS,
    FIELD_DEFAULTS,
    ComponentRecord,
    applicable_fields,
    parse_number,
    resolve_field_name,
    derive_total,
    try_parse_number,
    wire_name,
)
from .configuration import Configuration, SubmittedComponent, SubmittedSnapshot
from .enums import ComponentType, StorageType
from .types import Number

__all__ = [
    "APPLICABLE_FIELDS",
    "FIELD_DEFAULTS",
    "ComponentRecord",
    "ComponentType",
    "Configuration",
    "DomainModel",
    "MutableDomainModel",
    "Number",
    "StorageType",
    "SubmittedComponent",
    "SubmittedSnapshot",
    "applicable_fields",
    "parse_number",
    "resolve_field_name",
    "derive_total",
    "try_parse_number",
    "wire_name",
]
