"""
Entity Records.

Flat, owner-scoped records mirroring the remote table rows. Timestamps stay
in their stored ISO-8601 form; the planning helpers parse them on demand.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from dayboard.backend.core.planning.priority import Priority

UNCATEGORIZED_NAME = "미분류"
UNCATEGORIZED_COLOR = "#808080"


def _known(cls: type, row: dict[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in row.items() if k in names}


class Record:
    """Row conversion shared by every entity."""

    id: str

    @classmethod
    def from_row(cls, row: dict[str, Any]):
        return cls(**_known(cls, row))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Schedule(Record):
    """
    A schedule or to-do item.

    Attributes:
        id: Row id
        title: Display title
        start_date: Start timestamp (ISO-8601)
        end_date: End timestamp (ISO-8601)
        category_id: Referenced category, may dangle
        priority: HIGH, MEDIUM or LOW
        user_id: Owner id
        description: Newline-delimited keyword list
        completed: Completion flag
        created_at: Creation timestamp
    """

    id: str
    title: str
    start_date: str
    end_date: str
    user_id: str
    category_id: str | None = None
    priority: str = Priority.MEDIUM.value
    description: str | None = None
    completed: bool = False
    created_at: str | None = None

    @property
    def keywords(self) -> list[str]:
        if not self.description:
            return []
        return [k for k in self.description.split("\n") if k.strip()]


@dataclass
class Category(Record):
    id: str
    name: str
    color: str
    user_id: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.id == ""


UNCATEGORIZED = Category(id="", name=UNCATEGORIZED_NAME, color=UNCATEGORIZED_COLOR)


@dataclass
class Memo(Record):
    id: str
    user_id: str
    title: str = ""
    content: str = ""
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class Bookmark(Record):
    id: str
    user_id: str
    term: str
    created_at: str | None = None


@dataclass
class Profile(Record):
    id: str
    username: str = ""
    full_name: str = ""
    avatar_url: str = ""
    updated_at: str | None = None
