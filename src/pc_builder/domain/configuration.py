"""Configuration and submitted snapshot models."""

from __future__ import annotations

from pydantic import Field

from .base import DomainModel, MutableDomainModel
from .components import ComponentRecord, derive_total, parse_number
from .enums import ComponentType, StorageType
from .types import Number


class Configuration(MutableDomainModel):
    """In-progress configuration owned by a single store.

    ``total_price`` is derived from the component prices; only the store
    writes it.
    """

    base_model: str = Field(default="", alias="baseModel")
    components: list[ComponentRecord] = Field(default_factory=list)
    total_price: Number = Field(default=0, alias="totalPrice")

    @property
    def component_count(self) -> int:
        return len(self.components)


class SubmittedComponent(DomainModel):
    type: ComponentType
    name: str
    price: Number
    capacity: str | None = None
    storage_type: StorageType | None = Field(default=None, alias="storageType")

    @classmethod
    def from_record(cls, record: ComponentRecord) -> SubmittedComponent:
        fields = record.applicable_fields
        return cls(
            type=record.type,
            name=record.name,
            price=parse_number(record.price),
            capacity=record.capacity if "capacity" in fields else None,
            storage_type=record.storage_type if "storage_type" in fields else None,
        )


class SubmittedSnapshot(DomainModel):
    """Immutable copy of a configuration taken at successful submission."""

    base_model: str = Field(alias="baseModel")
    components: tuple[SubmittedComponent, ...]
    total_price: Number = Field(alias="totalPrice")

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> SubmittedSnapshot:
        return cls(
            base_model=configuration.base_model,
            components=tuple(
                SubmittedComponent.from_record(record) for record in configuration.components
            ),
            total_price=derive_total(configuration.components),
        )

    @property
    def component_count(self) -> int:
        return len(self.components)


__all__ = ["Configuration", "SubmittedComponent", "SubmittedSnapshot"]
