"""Stores subpackage – one owner-scoped state store per remote table."""

from __future__ import annotations

from dayboard.backend.core.stores.base import OwnerScopedStore
from dayboard.backend.core.stores.bookmarks import BookmarkStore
from dayboard.backend.core.stores.categories import DEFAULT_CATEGORIES, DEFAULT_COLORS, CategoryStore
from dayboard.backend.core.stores.memos import MemoStore
from dayboard.backend.core.stores.models import (
    UNCATEGORIZED,
    Bookmark,
    Category,
    Memo,
    Profile,
    Schedule,
)
from dayboard.backend.core.stores.schedules import ScheduleStore, TodoStore

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_COLORS",
    "UNCATEGORIZED",
    "Bookmark",
    "BookmarkStore",
    "Category",
    "CategoryStore",
    "Memo",
    "MemoStore",
    "OwnerScopedStore",
    "Profile",
    "Schedule",
    "ScheduleStore",
    "TodoStore",
]
