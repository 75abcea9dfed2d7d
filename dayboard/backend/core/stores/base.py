"""
Owner-Scoped State Store.

One store per table mirrors the signed-in owner's rows into a local
collection. Writes go straight to the remote backend and the returned row is
merged locally; pushed change events are merged the same way, keyed by id, so
an optimistic write and its echo from the change feed converge on one copy
regardless of arrival order.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dayboard.backend.core.errors import AuthError, NotFoundError, RemoteError
from dayboard.backend.core.remote.base import RemoteBackend, Row
from dayboard.backend.core.remote.changes import ChangeEvent, ChangeKind
from dayboard.backend.core.stores.models import Record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class OwnerScopedStore(Generic[T], ABC):
    """
    Base class of all per-table stores.

    Subclasses set ``table`` and implement :meth:`from_row`; they may
    override the ``validate_*`` hooks to reject input before any remote call.

    Attributes:
        backend: Remote backend shared with the other stores
        owner_id: Id of the signed-in user every read and write is scoped by
    """

    table: str = ""
    order_by: str | None = None
    descending: bool = False
    # New rows go to the front for newest-first collections.
    newest_first: bool = False

    def __init__(self, backend: RemoteBackend, owner_id: str) -> None:
        if not owner_id:
            raise AuthError("A signed-in user is required")
        self.backend = backend
        self.owner_id = owner_id
        self._items: list[T] = []
        self._lock = threading.RLock()
        self._unsubscribe: Callable[[], None] | None = None
        self.loaded = False

    # ── Row conversion and validation hooks ────────────────────────────────

    @abstractmethod
    def from_row(self, row: Row) -> T:
        """Build an entity from a remote row."""

    def validate_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return dict(fields)

    def validate_update(self, current: T, fields: dict[str, Any]) -> dict[str, Any]:
        return dict(fields)

    # ── Reads ───────────────────────────────────────────────────────────────

    @property
    def items(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, item_id: str) -> T:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        raise NotFoundError(f"No {self.table} row with id {item_id}")

    def find(self, item_id: str) -> T | None:
        try:
            return self.get(item_id)
        except NotFoundError:
            return None

    def load(self) -> list[T]:
        """Replace the local collection with a full reload of the owner's rows."""
        rows = self.backend.select(
            self.table,
            {"user_id": self.owner_id},
            order_by=self.order_by,
            descending=self.descending,
        )
        entities = [self.from_row(row) for row in rows]
        with self._lock:
            self._items = entities
            self.loaded = True
        logger.debug("Loaded %d %s row(s) for %s", len(entities), self.table, self.owner_id)
        return list(entities)

    # ── Writes ──────────────────────────────────────────────────────────────

    def create(self, fields: dict[str, Any]) -> T:
        values = self.validate_create(fields)
        values["user_id"] = self.owner_id
        rows = self.backend.insert(self.table, [values])
        if not rows:
            raise RemoteError(f"Insert into {self.table} returned no row")
        return self._upsert(rows[0])

    def update(self, item_id: str, fields: dict[str, Any]) -> T:
        current = self.get(item_id)
        values = self.validate_update(current, fields)
        values.pop("id", None)
        values.pop("user_id", None)
        if not values:
            return current
        rows = self.backend.update(self.table, values, {"id": item_id, "user_id": self.owner_id})
        if not rows:
            self._drop(item_id)
            raise NotFoundError(f"No {self.table} row with id {item_id}")
        return self._upsert(rows[0])

    def remove(self, item_id: str) -> None:
        rows = self.backend.delete(self.table, {"id": item_id, "user_id": self.owner_id})
        self._drop(item_id)
        if not rows:
            raise NotFoundError(f"No {self.table} row with id {item_id}")

    # ── Change feed ─────────────────────────────────────────────────────────

    def attach(self) -> None:
        """Subscribe to the backend's change feed for this table."""
        if self._unsubscribe is None:
            self._unsubscribe = self.backend.changes.subscribe(self.table, self.apply_change)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def apply_change(self, event: ChangeEvent) -> None:
        """Merge one pushed change; events of other owners are ignored."""
        if event.table != self.table or event.owner_id != self.owner_id:
            return
        if event.kind is ChangeKind.DELETE:
            row_id = event.row.get("id")
            if row_id is not None:
                self._drop(row_id)
            return
        if event.new is not None:
            self._upsert(event.new)

    # ── Local merge ─────────────────────────────────────────────────────────

    def _upsert(self, row: Row) -> T:
        entity = self.from_row(row)
        with self._lock:
            for i, item in enumerate(self._items):
                if item.id == entity.id:
                    self._items[i] = entity
                    return entity
            if self.newest_first:
                self._items.insert(0, entity)
            else:
                self._items.append(entity)
        return entity

    def _drop(self, item_id: str) -> None:
        with self._lock:
            self._items = [item for item in self._items if item.id != item_id]

    def clear(self) -> None:
        with self._lock:
            self._items = []
            self.loaded = False
