"""
Priority Ordering and Labeling.

Three ordinal levels mapped to display labels and color classes through
static lookup tables, plus the stable sort helpers used by the list views.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


PRIORITY_WEIGHTS: dict[str, int] = {
    Priority.HIGH.value: 3,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 1,
}

PRIORITY_LABELS: dict[str, str] = {
    Priority.HIGH.value: "중요",
    Priority.MEDIUM.value: "보통",
    Priority.LOW.value: "안중요",
}

PRIORITY_COLORS: dict[str, str] = {
    Priority.HIGH.value: "bg-red-500 text-white",
    Priority.MEDIUM.value: "bg-gray-400 text-white",
    Priority.LOW.value: "bg-green-500 text-white",
}


def _key(priority: Any) -> str:
    if isinstance(priority, Priority):
        return priority.value
    return str(priority).upper() if priority is not None else ""


def priority_label(priority: Any) -> str:
    return PRIORITY_LABELS.get(_key(priority), PRIORITY_LABELS[Priority.MEDIUM.value])


def priority_color(priority: Any) -> str:
    return PRIORITY_COLORS.get(_key(priority), PRIORITY_COLORS[Priority.MEDIUM.value])


def priority_weight(priority: Any) -> int:
    """Numeric weight; unrecognised values weigh 0 and sort after LOW."""
    return PRIORITY_WEIGHTS.get(_key(priority), 0)


def _get(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def sort_by_priority(items: Iterable[Any]) -> list[Any]:
    """Most important first; ties keep their input order."""
    return sorted(items, key=lambda item: priority_weight(_get(item, "priority")), reverse=True)


def sort_by_completion(items: Iterable[Any]) -> list[Any]:
    """Unfinished items first; ties keep their input order."""
    return sorted(items, key=lambda item: bool(_get(item, "completed")))
