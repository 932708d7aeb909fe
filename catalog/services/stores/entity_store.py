"""Thread-safe in-memory key/value store shared by every catalog entity."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from threading import RLock
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

from catalog.services.errors import CapacityExceededError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class EntityStore(Generic[RecordT]):
    """Process-lifetime map from identifier to frozen pydantic record.

    Every operation runs under ``lock`` so no caller observes a partial write.
    The lock is reentrant, which lets a service hold it around a compound
    read-then-write sequence while still calling the store's own methods.
    When ``soft_deletable`` is set, records carry an ``active`` flag and
    inactive ones are hidden from every read except :meth:`get_raw`.
    """

    def __init__(
        self,
        entity_name: str,
        *,
        max_records: int | None = None,
        soft_deletable: bool = False,
        lock: RLock | None = None,
    ) -> None:
        self.entity_name = entity_name
        self.max_records = max_records
        self.soft_deletable = soft_deletable
        self.lock = lock or RLock()
        self._records: dict[UUID, RecordT] = {}

    @staticmethod
    def next_id() -> UUID:
        return uuid.uuid4()

    def _is_visible(self, record: RecordT) -> bool:
        return not self.soft_deletable or bool(getattr(record, "active", True))

    def _visible(self) -> list[RecordT]:
        """The single active-only view every read goes through."""

        return [record for record in self._records.values() if self._is_visible(record)]

    def create(self, record: RecordT) -> RecordT:
        """Insert ``record`` under its own ``id``."""

        with self.lock:
            if self.max_records is not None and len(self._records) >= self.max_records:
                logger.warning(
                    "Rejected %s creation: store holds %d records (max %d)",
                    self.entity_name,
                    len(self._records),
                    self.max_records,
                )
                raise CapacityExceededError(
                    f"Maximum {self.entity_name} limit reached"
                )
            self._records[record.id] = record
        logger.debug("Stored %s %s", self.entity_name, record.id)
        return record

    def get_by_id(self, record_id: UUID) -> RecordT | None:
        with self.lock:
            record = self._records.get(record_id)
            if record is None or not self._is_visible(record):
                return None
            return record

    def get_raw(self, record_id: UUID) -> RecordT | None:
        """Return the record even when soft-deleted (audit lookups)."""

        with self.lock:
            return self._records.get(record_id)

    def get_all(self) -> list[RecordT]:
        with self.lock:
            return self._visible()

    def filter(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        with self.lock:
            return [record for record in self._visible() if predicate(record)]

    def update(self, record_id: UUID, **fields: Any) -> RecordT | None:
        """Merge ``fields`` into the stored record and return the new value."""

        with self.lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=fields)
            self._records[record_id] = updated
            return updated

    def soft_delete(self, record_id: UUID) -> bool:
        """Flip ``active`` off, keeping the record addressable via :meth:`get_raw`."""

        if not self.soft_deletable:
            raise TypeError(f"{self.entity_name} records do not support soft delete")
        with self.lock:
            existing = self.get_by_id(record_id)
            if existing is None:
                return False
            self._records[record_id] = existing.model_copy(update={"active": False})
            return True

    def delete(self, record_id: UUID) -> RecordT | None:
        """Remove the record from storage and return it."""

        with self.lock:
            return self._records.pop(record_id, None)

    def exists(self, record_id: UUID) -> bool:
        return self.get_by_id(record_id) is not None

    def field_exists(
        self,
        field: str,
        value: Any,
        exclude_id: UUID | None = None,
    ) -> bool:
        """Check whether a visible record other than ``exclude_id`` holds ``value``."""

        with self.lock:
            return any(
                getattr(record, field) == value and record.id != exclude_id
                for record in self._visible()
            )

    def count(self) -> int:
        with self.lock:
            return len(self._visible())

    def clear(self) -> None:
        with self.lock:
            self._records.clear()
