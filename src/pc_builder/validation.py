"""Submit-time validation of a complete configuration."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from pc_builder.domain import (
    FIELD_DEFAULTS,
    ComponentRecord,
    Configuration,
    DomainModel,
    derive_total,
    try_parse_number,
    wire_name,
)

BASE_MODEL_REQUIRED = "Base model is required"
COMPONENTS_REQUIRED = "At least one component is required"
TOTAL_PRICE_POSITIVE = "Total price must be greater than 0"
PRICE_REQUIRED = "Price is required"
PRICE_NOT_A_NUMBER = "Price must be a number"
PRICE_POSITIVE = "Price must be positive"

_REQUIRED_MESSAGES = {
    "type": "Component type is required",
    "name": "Component name is required",
    "capacity": "Capacity is required for RAM and Storage",
    "storage_type": "Storage type is required for Storage components",
}


class ValidationFailed(DomainModel):
    """Result of a rejected submission, keyed by field path."""

    issues: tuple[tuple[str, str], ...]

    @classmethod
    def from_errors(cls, errors: Mapping[str, str]) -> ValidationFailed:
        return cls(issues=tuple(errors.items()))

    @property
    def errors(self) -> dict[str, str]:
        """Fresh copy of the field path to message mapping."""

        return dict(self.issues)

    @property
    def message(self) -> str:
        return "; ".join(f"{path}: {text}" for path, text in self.errors.items())


def field_path(index: int, field_name: str) -> str:
    return f"components[{index}].{wire_name(field_name)}"


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _price_error(value: object) -> str | None:
    if _is_blank(value):
        return PRICE_REQUIRED
    number = try_parse_number(value)
    if number is None:
        return PRICE_NOT_A_NUMBER
    if number <= 0:
        return PRICE_POSITIVE
    return None


def _required_error(field_name: str) -> Callable[[object], str | None]:
    message = _REQUIRED_MESSAGES[field_name]

    def check(value: object) -> str | None:
        return message if _is_blank(value) else None

    return check


_FIELD_CHECKS: dict[str, Callable[[object], str | None]] = {
    "type": _required_error("type"),
    "name": _required_error("name"),
    "price": _price_error,
    "capacity": _required_error("capacity"),
    "storage_type": _required_error("storage_type"),
}


def validate_record(index: int, record: ComponentRecord) -> dict[str, str]:
    """Check every field applicable to the record's current type."""

    errors: dict[str, str] = {}
    applicable = record.applicable_fields
    for field_name in FIELD_DEFAULTS:
        if field_name not in applicable:
            continue
        error = _FIELD_CHECKS[field_name](getattr(record, field_name))
        if error is not None:
            errors[field_path(index, field_name)] = error
    return errors


def validate_configuration(configuration: Configuration) -> dict[str, str]:
    """Collect every validation error for a configuration.

    Returns an empty mapping when the configuration can be submitted. The
    configuration is never modified and the same input always yields the
    same mapping, in the same key order.
    """

    errors: dict[str, str] = {}
    if _is_blank(configuration.base_model):
        errors["baseModel"] = BASE_MODEL_REQUIRED
    if not configuration.components:
        errors["components"] = COMPONENTS_REQUIRED
    for index, record in enumerate(configuration.components):
        errors.update(validate_record(index, record))
    # Uses the derived total, never the stored total_price.
    if derive_total(configuration.components) <= 0:
        errors["totalPrice"] = TOTAL_PRICE_POSITIVE
    return errors


__all__ = [
    "ValidationFailed",
    "field_path",
    "validate_configuration",
    "validate_record",
]
