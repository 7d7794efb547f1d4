"""Enumerations used across the configurator domain layer."""

from __future__ import annotations

from enum import StrEnum


class ComponentType(StrEnum):
    """Kinds of component that can be added to a configuration."""

    CPU = "cpu"
    GPU = "gpu"
    RAM = "ram"
    STORAGE = "storage"


class StorageType(StrEnum):
    """Storage device technologies."""

    SSD = "ssd"
    HDD = "hdd"
