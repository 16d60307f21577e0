"""Generic entity store.

An ``EntityStore`` holds the authoritative in-process copy of one entity
family and keeps it in sync with a ``StorageBackend``. Mutations build
the next collection, persist it, and only then swap it in, so a failed
write leaves memory untouched.

Stores are meant to be driven from a single event loop; callers await
each mutation before issuing the next one on the same store.
"""

from __future__ import annotations

import dataclasses
import functools
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from loguru import logger

from momentum.defaults import coerce_changes
from momentum.errors import NotFoundError, StorageUnavailableError, StoreError, ValidationError
from momentum.lifecycle import can_transition
from momentum.models.base import UpdateInput
from momentum.query import QueryOptions, query
from momentum.storage.base import StorageBackend

R = TypeVar("R")     # record
CI = TypeVar("CI")   # create-input
UI = TypeVar("UI", bound=UpdateInput)   # update-input


def records_errors(method: Callable) -> Callable:
    """Record any StoreError raised by an async store operation before re-raising."""

    @functools.wraps(method)
    async def wrapper(self: "EntityStore", *args: Any, **kwargs: Any) -> Any:
        try:
            return await method(self, *args, **kwargs)
        except StoreError as e:
            self.error = e
            logger.debug(f"{self.entity_name} store: {type(e).__name__}: {e}")
            raise

    return wrapper


def _new_id() -> str:
    return str(uuid.uuid4())


class EntityStore(ABC, Generic[R, CI, UI]):
    """CRUD + query container for one entity family."""

    entity_name: str = "record"
    collection_name: str = "records"
    record_type: Type[Any]
    enum_fields: Dict[str, Type[Enum]] = {}
    read_only_fields = frozenset({"id", "created_at", "updated_at"})

    def __init__(
        self,
        storage: StorageBackend,
        *,
        key_prefix: str = "momentum",
        enforce_transitions: bool = False,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id,
    ):
        self.storage = storage
        self.key = f"{key_prefix}_{self.collection_name}"
        self.enforce_transitions = enforce_transitions
        self._clock = clock
        self._id_factory = id_factory

        self._records: List[R] = []
        self.selected: Optional[R] = None
        self.error: Optional[StoreError] = None
        self.is_loading = False

    # ------------------------------------------------------------------
    # Family-specific hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def apply_defaults(self, data: CI, *, record_id: str, now: datetime) -> R:
        """Build a full record draft from a create-input."""

    @abstractmethod
    def validate(self, record: R) -> None:
        """Raise ValidationError if the record breaks an invariant."""

    def prepare_changes(self, record: R, changes: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        """Adjust an update's changes before they are merged."""
        return changes

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def items(self) -> Tuple[R, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _find_index(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        raise NotFoundError(self.entity_name, record_id)

    def _now(self) -> datetime:
        return self._clock()

    # ------------------------------------------------------------------
    # Persistence boundary
    # ------------------------------------------------------------------

    async def _persist(self, records: List[R]) -> None:
        payload = [r.to_dict() for r in records]
        self.is_loading = True
        try:
            await self.storage.save_collection(self.key, payload)
        except StorageUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Failed to save {self.collection_name}: {e}")
            raise StorageUnavailableError(f"Could not save {self.collection_name}: {e}", key=self.key) from e
        finally:
            self.is_loading = False

    def _decode(self, raw: List[Dict[str, Any]]) -> List[R]:
        records = []
        for item in raw:
            try:
                records.append(self.record_type.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Unreadable {self.entity_name} record in '{self.key}': {e}")
                raise StorageUnavailableError(
                    f"Stored {self.collection_name} are unreadable: {e}", key=self.key
                ) from e
        return records

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @records_errors
    async def load_all(self) -> List[R]:
        """Replace the in-memory collection with the stored one."""
        self.is_loading = True
        try:
            raw = await self.storage.load_collection(self.key)
        except StorageUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Failed to load {self.collection_name}: {e}")
            raise StorageUnavailableError(f"Could not load {self.collection_name}: {e}", key=self.key) from e
        finally:
            self.is_loading = False

        self._records = self._decode(raw)
        logger.debug(f"Loaded {len(self._records)} {self.collection_name}")
        return list(self._records)

    @records_errors
    async def add(self, data: CI) -> R:
        """Create a record from a create-input and persist it."""
        record = self.apply_defaults(data, record_id=self._id_factory(), now=self._now())
        self.validate(record)

        records = [*self._records, record]
        await self._persist(records)
        self._records = records

        logger.debug(f"{self.entity_name} added: {record.id}")
        return record

    @records_errors
    async def update(self, record_id: str, data: UI | Dict[str, Any]) -> R:
        """Merge the provided fields onto an existing record and persist it."""
        index = self._find_index(record_id)
        current = self._records[index]

        changes = data.changes() if isinstance(data, UpdateInput) else dict(data)
        writable = {f.name for f in dataclasses.fields(current)} - self.read_only_fields
        rejected = sorted(set(changes) - writable)
        if rejected:
            raise ValidationError(f"Cannot update fields: {', '.join(rejected)}")
        changes = coerce_changes(changes, self.enum_fields)

        now = self._now()
        changes = self.prepare_changes(current, changes, now)
        if "status" in changes:
            self._check_transition(current, changes["status"])

        updated = dataclasses.replace(current, **changes, updated_at=max(now, current.updated_at))
        self.validate(updated)

        records = list(self._records)
        records[index] = updated
        await self._persist(records)
        self._records = records

        if self.selected is not None and self.selected.id == record_id:
            self.selected = updated

        logger.debug(f"{self.entity_name} updated: {record_id} ({', '.join(changes) or 'no fields'})")
        return updated

    @records_errors
    async def remove(self, record_id: str) -> None:
        """Delete a record and persist the removal."""
        index = self._find_index(record_id)

        records = list(self._records)
        del records[index]
        await self._persist(records)
        self._records = records

        if self.selected is not None and self.selected.id == record_id:
            self.selected = None

        logger.debug(f"{self.entity_name} removed: {record_id}")

    def get(self, record_id: str) -> R:
        """Return the record with ``record_id`` or raise NotFoundError."""
        try:
            return self._records[self._find_index(record_id)]
        except NotFoundError as e:
            self.error = e
            raise

    def set_selected(self, record: Optional[R]) -> None:
        """Set (or clear with None) the record the active screen is showing."""
        self.selected = record

    def clear_error(self) -> None:
        self.error = None

    def query(self, options: Optional[QueryOptions] = None) -> List[R]:
        """Filtered, ordered view over the current collection."""
        return query(self._records, options)

    def _check_transition(self, record: R, target: Enum) -> None:
        current = record.status
        if can_transition(current, target):
            return
        message = f"{self.entity_name} {record.id}: illegal status change {current.value} -> {target.value}"
        if self.enforce_transitions:
            raise ValidationError(message)
        logger.warning(message)
