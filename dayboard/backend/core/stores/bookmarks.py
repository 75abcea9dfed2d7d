"""
Glossary Bookmark Store.

Uniqueness of (owner, term) is enforced by an explicit pre-check query
against the backend before the insert, not by a database constraint.
"""

from __future__ import annotations

import logging
from typing import Any

from dayboard.backend.core.errors import ConflictError, ValidationError
from dayboard.backend.core.remote.base import BOOKMARKS, Row
from dayboard.backend.core.stores.base import OwnerScopedStore
from dayboard.backend.core.stores.models import Bookmark

logger = logging.getLogger(__name__)


class BookmarkStore(OwnerScopedStore[Bookmark]):
    table = BOOKMARKS
    order_by = "created_at"
    descending = True
    newest_first = True

    def from_row(self, row: Row) -> Bookmark:
        return Bookmark.from_row(row)

    def validate_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        term = str(fields.get("term") or "").strip()
        if not term:
            raise ValidationError("Term is required")
        existing = self.backend.select(self.table, {"user_id": self.owner_id, "term": term})
        if existing:
            raise ConflictError(f"'{term}' is already bookmarked")
        return {"term": term}

    def validate_update(self, current: Bookmark, fields: dict[str, Any]) -> dict[str, Any]:
        raise ValidationError("Bookmarks cannot be edited; remove and add again")

    def add(self, term: str) -> Bookmark:
        bookmark = self.create({"term": term})
        logger.info("Bookmarked %r", bookmark.term)
        return bookmark

    def is_bookmarked(self, term: str) -> bool:
        return any(b.term == term for b in self.items)

    def for_term(self, term: str) -> Bookmark | None:
        for bookmark in self.items:
            if bookmark.term == term:
                return bookmark
        return None

    def toggle(self, term: str) -> bool:
        """Add or remove the bookmark for ``term``; returns the new state."""
        bookmark = self.for_term(term)
        if bookmark is not None:
            self.remove(bookmark.id)
            return False
        self.add(term)
        return True
