"""JSON encoding of submitted snapshots and their human-readable summary."""

from __future__ import annotations

import json

from pydantic import ValidationError

from pc_builder.domain import ComponentType, SubmittedSnapshot
from pc_builder.persistence import PersistenceFailure


def serialize_snapshot(snapshot: SubmittedSnapshot) -> str:
    """Encode a snapshot as JSON.

    Keys follow model field order (baseModel, components, totalPrice; each
    component as type, name, price, capacity, storageType). Optional fields
    that do not apply to a component's type are omitted.
    """

    payload = snapshot.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload)


def deserialize_snapshot(blob: str) -> SubmittedSnapshot:
    try:
        return SubmittedSnapshot.model_validate_json(blob)
    except ValidationError as exc:
        msg = "Stored configuration could not be decoded"
        raise PersistenceFailure(msg) from exc


def describe_snapshot(snapshot: SubmittedSnapshot) -> list[str]:
    lines = [f"Base Model: {snapshot.base_model}", "Components:"]
    for component in snapshot.components:
        lines.append(f"  - Type: {component.type.value}")
        lines.append(f"    Name: {component.name}")
        lines.append(f"    Price: ${component.price}")
        if component.type in (ComponentType.RAM, ComponentType.STORAGE):
            lines.append(f"    Capacity: {component.capacity} GB")
        if component.type is ComponentType.STORAGE and component.storage_type is not None:
            lines.append(f"    Storage Type: {component.storage_type.value}")
    lines.append(f"Total Components: {snapshot.component_count}")
    lines.append(f"Total Price: ${snapshot.total_price}")
    return lines


__all__ = ["describe_snapshot", "deserialize_snapshot", "serialize_snapshot"]
