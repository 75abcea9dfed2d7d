"""Planning subpackage – pure progress, priority and date-range helpers."""

from __future__ import annotations

from dayboard.backend.core.planning.dates import (
    day_window,
    in_day,
    in_month,
    in_week,
    is_overdue,
    is_single_day,
    local_today,
    month_window,
    occurs_on,
    overlaps,
    parse_timestamp,
    resolve_timezone,
    schedules_on,
    week_window,
)
from dayboard.backend.core.planning.priority import (
    PRIORITY_WEIGHTS,
    Priority,
    priority_color,
    priority_label,
    sort_by_completion,
    sort_by_priority,
)
from dayboard.backend.core.planning.progress import (
    aggregate_progress,
    completion_ratio,
    progress_message,
    schedule_progress,
)

__all__ = [
    "PRIORITY_WEIGHTS",
    "Priority",
    "aggregate_progress",
    "completion_ratio",
    "day_window",
    "in_day",
    "in_month",
    "in_week",
    "is_overdue",
    "is_single_day",
    "local_today",
    "month_window",
    "occurs_on",
    "overlaps",
    "parse_timestamp",
    "priority_color",
    "priority_label",
    "progress_message",
    "resolve_timezone",
    "schedule_progress",
    "schedules_on",
    "sort_by_completion",
    "sort_by_priority",
    "week_window",
]
