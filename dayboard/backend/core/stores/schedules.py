"""
Schedule and To-Do Stores.

Both tables share one row shape; the to-do store only differs in its table.
Validation runs before any remote call:

- title is required
- start and end must be parseable timestamps with start <= end
- priority must be HIGH, MEDIUM or LOW (defaults to MEDIUM)
- ``keywords`` (a list) is folded into the newline-delimited ``description``
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any

from dayboard.backend.core.errors import ValidationError
from dayboard.backend.core.planning.dates import parse_timestamp
from dayboard.backend.core.planning.priority import Priority
from dayboard.backend.core.remote.base import SCHEDULES, TODOS, Row
from dayboard.backend.core.stores.base import OwnerScopedStore
from dayboard.backend.core.stores.models import Schedule

STATUS_ALL = "all"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
STATUSES = (STATUS_ALL, STATUS_ACTIVE, STATUS_COMPLETED)

_EDITABLE = {"title", "start_date", "end_date", "category_id", "priority", "description", "completed"}


def _normalise_priority(value: Any) -> str:
    if isinstance(value, Priority):
        return value.value
    text = str(value or "").strip().upper()
    if text not in Priority.__members__:
        raise ValidationError(f"Unknown priority: {value!r}")
    return text


def _normalise_timestamp(value: Any, name: str, tz: tzinfo | None = None) -> str:
    parsed = parse_timestamp(value, tz)
    if parsed is None:
        raise ValidationError(f"{name} is required and must be a valid date")
    return parsed.isoformat()


def _join_keywords(keywords: Any) -> str | None:
    if keywords is None:
        return None
    if isinstance(keywords, str):
        keywords = keywords.split("\n")
    cleaned = [str(k).strip() for k in keywords if str(k).strip()]
    return "\n".join(cleaned) if cleaned else None


def _check_order(start: Any, end: Any, tz: tzinfo | None = None) -> None:
    s, e = parse_timestamp(start, tz), parse_timestamp(end, tz)
    # A stored date that never parsed cannot be ordered against.
    if s is None or e is None:
        return
    if s > e:
        raise ValidationError("Start date must not be after end date")


class ScheduleStore(OwnerScopedStore[Schedule]):
    """
    Schedules of the signed-in owner.

    Naive timestamps in the input are wall time in ``tz`` and are stored as
    absolute instants.
    """

    table = SCHEDULES

    def __init__(self, backend, owner_id: str, tz: tzinfo | None = None) -> None:
        super().__init__(backend, owner_id)
        self.tz = tz

    def from_row(self, row: Row) -> Schedule:
        return Schedule.from_row(row)

    def validate_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        title = str(fields.get("title") or "").strip()
        if not title:
            raise ValidationError("Title is required")
        start = _normalise_timestamp(fields.get("start_date"), "Start date", self.tz)
        end = _normalise_timestamp(fields.get("end_date"), "End date", self.tz)
        _check_order(start, end, self.tz)

        values: dict[str, Any] = {
            "title": title,
            "start_date": start,
            "end_date": end,
            "category_id": fields.get("category_id") or None,
            "priority": _normalise_priority(fields.get("priority") or Priority.MEDIUM),
            "completed": bool(fields.get("completed", False)),
        }
        description = fields.get("description")
        if "keywords" in fields:
            description = _join_keywords(fields["keywords"])
        if description:
            values["description"] = description
        return values

    def validate_update(self, current: Schedule, fields: dict[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if "keywords" in fields:
            values["description"] = _join_keywords(fields["keywords"])
        for key, value in fields.items():
            if key not in _EDITABLE:
                continue
            if key == "title":
                value = str(value or "").strip()
                if not value:
                    raise ValidationError("Title is required")
            elif key in ("start_date", "end_date"):
                value = _normalise_timestamp(value, key.replace("_", " ").capitalize(), self.tz)
            elif key == "priority":
                value = _normalise_priority(value)
            elif key == "completed":
                value = bool(value)
            values[key] = value
        if "start_date" in values or "end_date" in values:
            _check_order(
                values.get("start_date", current.start_date),
                values.get("end_date", current.end_date),
                self.tz,
            )
        return values

    # ── Convenience operations ──────────────────────────────────────────────

    def toggle_completed(self, item_id: str) -> Schedule:
        current = self.get(item_id)
        return self.update(item_id, {"completed": not current.completed})

    def add_keyword(self, item_id: str, keyword: str) -> Schedule:
        keyword = keyword.strip()
        if not keyword:
            raise ValidationError("Keyword must not be empty")
        current = self.get(item_id)
        if keyword in current.keywords:
            return current
        return self.update(item_id, {"keywords": [*current.keywords, keyword]})

    def remove_keyword(self, item_id: str, keyword: str) -> Schedule:
        current = self.get(item_id)
        return self.update(item_id, {"keywords": [k for k in current.keywords if k != keyword]})

    def filter(
        self,
        status: str = STATUS_ALL,
        category_id: str | None = None,
        search: str | None = None,
    ) -> list[Schedule]:
        """
        Filter the local collection the way the to-do list view does.

        Args:
            status: ``all``, ``active`` or ``completed``
            category_id: Only items in this category (None for any)
            search: Case-insensitive substring of title or keywords

        Returns:
            Matching items in collection order
        """
        if status not in STATUSES:
            raise ValidationError(f"Unknown status filter: {status!r}")
        needle = (search or "").strip().lower()
        result = []
        for item in self.items:
            if status == STATUS_ACTIVE and item.completed:
                continue
            if status == STATUS_COMPLETED and not item.completed:
                continue
            if category_id and item.category_id != category_id:
                continue
            if needle and needle not in item.title.lower() and needle not in (item.description or "").lower():
                continue
            result.append(item)
        return result


class TodoStore(ScheduleStore):
    """Generic to-do items; same row shape as schedules."""

    table = TODOS
