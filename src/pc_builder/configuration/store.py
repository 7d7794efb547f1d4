"""In-memory configuration store driven by user edits."""

from __future__ import annotations

import logging
import threading

from pydantic import ValidationError

from pc_builder.domain import (
    ComponentRecord,
    Configuration,
    Number,
    resolve_field_name,
    wire_name,
)
from pc_builder.exceptions import ComponentIndexError, FieldValueError

from .reconciler import reconcile_record, recompute_total

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Owns one configuration and keeps its derived fields consistent.

    Every mutating call runs to completion under a re-entrant lock and
    recomputes the total price before returning. A failed call leaves the
    configuration exactly as it was.
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        self._lock = threading.RLock()
        self._configuration = (
            configuration.model_copy(deep=True) if configuration is not None else Configuration()
        )
        self._configuration.total_price = recompute_total(self._configuration.components)

    @property
    def configuration(self) -> Configuration:
        """Deep copy of the current configuration."""

        with self._lock:
            return self._configuration.model_copy(deep=True)

    @property
    def total_price(self) -> Number:
        with self._lock:
            return self._configuration.total_price

    @property
    def component_count(self) -> int:
        with self._lock:
            return self._configuration.component_count

    def component(self, index: int) -> ComponentRecord:
        with self._lock:
            return self._record_at(index).model_copy(deep=True)

    def set_base_model(self, value: str) -> None:
        with self._lock:
            try:
                self._configuration.base_model = value
            except ValidationError as exc:
                msg = f"Invalid value for baseModel: {value!r}"
                raise FieldValueError(msg) from exc
            self._commit(self._configuration.components)

    def append_component(self) -> int:
        """Append an empty component record and return its index."""

        with self._lock:
            components = [*self._configuration.components, ComponentRecord()]
            self._commit(components)
            index = len(components) - 1
            logger.debug("Appended component at index %s", index)
            return index

    def remove_component(self, index: int) -> None:
        with self._lock:
            self._record_at(index)
            components = list(self._configuration.components)
            del components[index]
            self._commit(components)
            logger.debug("Removed component at index %s", index)

    def update_component_field(self, index: int, field_name: str, value: object) -> None:
        """Write one field of a component and reconcile the derived fields.

        Raises ``ComponentIndexError`` for a missing index,
        ``UnknownFieldError`` for a field the record does not have and
        ``FieldValueError`` when the value is rejected.
        """

        attribute = resolve_field_name(field_name)
        with self._lock:
            previous = self._record_at(index)
            candidate = previous.model_copy(deep=True)
            try:
                setattr(candidate, attribute, value)
            except ValidationError as exc:
                msg = f"Invalid value for components[{index}].{wire_name(attribute)}: {value!r}"
                raise FieldValueError(msg) from exc
            candidate = reconcile_record(previous, candidate, attribute)

            components = list(self._configuration.components)
            components[index] = candidate
            self._commit(components)
            logger.debug("Updated components[%s].%s", index, wire_name(attribute))

    def reset(self) -> None:
        with self._lock:
            self._configuration = Configuration()

    def _record_at(self, index: int) -> ComponentRecord:
        components = self._configuration.components
        if not 0 <= index < len(components):
            raise ComponentIndexError(index, len(components))
        return components[index]

    def _commit(self, components: list[ComponentRecord]) -> None:
        self._configuration.components = components
        self._configuration.total_price = recompute_total(components)


__all__ = ["ConfigurationStore"]
