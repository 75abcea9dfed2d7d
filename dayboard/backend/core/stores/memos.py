"""
Memo Store.

Memos carry an explicit ``title`` column; nothing is inferred from the first
line of the content.
"""

from __future__ import annotations

from typing import Any

from dayboard.backend.core.errors import ValidationError
from dayboard.backend.core.remote.base import MEMOS, Row
from dayboard.backend.core.stores.base import OwnerScopedStore
from dayboard.backend.core.stores.models import Memo


class MemoStore(OwnerScopedStore[Memo]):
    table = MEMOS
    order_by = "created_at"
    descending = True
    newest_first = True

    def from_row(self, row: Row) -> Memo:
        return Memo.from_row(row)

    def validate_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        title = str(fields.get("title") or "").strip()
        content = str(fields.get("content") or "")
        if not title and not content.strip():
            raise ValidationError("A memo needs a title or some content")
        return {"title": title, "content": content}

    def validate_update(self, current: Memo, fields: dict[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if "title" in fields:
            values["title"] = str(fields["title"] or "").strip()
        if "content" in fields:
            values["content"] = str(fields["content"] or "")
        title = values.get("title", current.title)
        content = values.get("content", current.content)
        if not title and not content.strip():
            raise ValidationError("A memo needs a title or some content")
        return values

    def recent(self, count: int) -> list[Memo]:
        return self.items[: max(count, 0)]
