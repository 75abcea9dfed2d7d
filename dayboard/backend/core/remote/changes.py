"""
Table Change Feed.

In-process pub/sub of row-level changes. Backends publish one
:class:`ChangeEvent` after every successful write; stores subscribe per table
and merge the pushed rows into their local collections.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ChangeKind(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ChangeEvent:
    """
    A single row-level change.

    Attributes:
        table: Table the row belongs to
        kind: INSERT, UPDATE or DELETE
        new: Row after the change (None for deletes)
        old: Row before the change (None for inserts)
    """

    table: str
    kind: ChangeKind
    new: dict[str, Any] | None = None
    old: dict[str, Any] | None = None

    @property
    def row(self) -> dict[str, Any]:
        return self.new if self.new is not None else (self.old or {})

    @property
    def owner_id(self) -> str | None:
        return self.row.get("user_id")


ChangeHandler = Callable[[ChangeEvent], Any]


@dataclass
class ChangeFeed:
    """Table-scoped subscriber registry."""

    _handlers: dict[str, list[ChangeHandler]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def subscribe(self, table: str, handler: ChangeHandler) -> Callable[[], None]:
        with self._lock:
            self._handlers.setdefault(table, []).append(handler)

        def _unsubscribe() -> None:
            with self._lock, contextlib.suppress(ValueError):
                self._handlers.get(table, []).remove(handler)

        return _unsubscribe

    def subscriber_count(self, table: str) -> int:
        with self._lock:
            return len(self._handlers.get(table, []))

    def publish(self, event: ChangeEvent) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event.table, []))
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                # One broken subscriber must not stop delivery to the others.
                logger.exception("Change handler failed for %s %s", event.table, event.kind.value)

    def publish_rows(
        self,
        table: str,
        kind: ChangeKind,
        rows: list[dict[str, Any]],
        old_rows: list[dict[str, Any]] | None = None,
    ) -> None:
        """Publish one event per affected row."""
        for i, row in enumerate(rows):
            old = old_rows[i] if old_rows is not None and i < len(old_rows) else None
            if kind is ChangeKind.DELETE:
                self.publish(ChangeEvent(table, kind, new=None, old=row))
            else:
                self.publish(ChangeEvent(table, kind, new=row, old=old))
