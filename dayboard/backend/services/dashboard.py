"""Dashboard service – turns store contents into the API's view models.

Translates between the owner-scoped stores and the response schemas, applying
the planning helpers (progress, priority ordering, day / week / month windows)
on the way. Nothing here talks to the backend.
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from dayboard.backend.core.planning import (
    aggregate_progress,
    completion_ratio,
    in_day,
    in_month,
    in_week,
    priority_color,
    priority_label,
    progress_message,
    schedule_progress,
    schedules_on,
    sort_by_completion,
    sort_by_priority,
)
from dayboard.backend.core.stores import Category, CategoryStore, Memo, Schedule
from dayboard.backend.schemas import (
    CategoryOut,
    DayOut,
    HomeSummaryOut,
    MemoOut,
    ProgressOut,
    ScheduleOut,
)
from dayboard.backend.services.workspace import OwnerStores

RECENT_MEMOS = 3


def category_out(category: Category) -> CategoryOut:
    return CategoryOut(id=category.id, name=category.name, color=category.color)


def schedule_out(
    item: Schedule,
    categories: CategoryStore,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> ScheduleOut:
    return ScheduleOut(
        id=item.id,
        title=item.title,
        start_date=item.start_date,
        end_date=item.end_date,
        category_id=item.category_id,
        category=category_out(categories.lookup(item.category_id)),
        priority=item.priority,
        priority_label=priority_label(item.priority),
        priority_color=priority_color(item.priority),
        keywords=item.keywords,
        completed=item.completed,
        progress=schedule_progress(item, now, tz),
        created_at=item.created_at,
    )


def memo_out(memo: Memo) -> MemoOut:
    return MemoOut(
        id=memo.id,
        title=memo.title,
        content=memo.content,
        created_at=memo.created_at,
        updated_at=memo.updated_at,
    )


def progress_out(items: list[Schedule], now: datetime | None = None, tz: tzinfo | None = None) -> ProgressOut:
    percent = aggregate_progress(items, now, tz)
    return ProgressOut(percent=percent, message=progress_message(percent))


def day_view(stores: OwnerStores, day: date, now: datetime | None = None, tz: tzinfo | None = None) -> DayOut:
    """Schedules occurring on ``day`` (calendar cell order) and their mean progress."""
    items = schedules_on(stores.schedules.items, day, tz)
    return DayOut(
        day=day,
        schedules=[schedule_out(item, stores.categories, now, tz) for item in items],
        progress=progress_out(items, now, tz),
    )


def home_summary(
    stores: OwnerStores,
    today: date,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> HomeSummaryOut:
    """
    Build the home dashboard.

    Args:
        stores: The signed-in owner's stores
        today: Calendar day the dashboard is rendered for
        now: Reference instant for progress (defaults to current UTC time)
        tz: Display timezone the day, week and month windows are taken in

    Returns:
        Today's items (incomplete first), this week's items (most important
        first), today / month completion ratios, overall progress of today's
        items and the most recent memos.
    """
    schedules = stores.schedules.items
    today_items = [item for item in schedules if in_day(item, today, tz=tz)]
    week_items = [item for item in schedules if in_week(item, today, tz=tz)]
    month_items = [item for item in schedules if in_month(item, today, tz=tz)]
    return HomeSummaryOut(
        day=today,
        today=[schedule_out(item, stores.categories, now, tz) for item in sort_by_completion(today_items)],
        week=[schedule_out(item, stores.categories, now, tz) for item in sort_by_priority(week_items)],
        today_completion=completion_ratio(today_items),
        month_completion=completion_ratio(month_items),
        progress=progress_out(today_items, now, tz),
        recent_memos=[memo_out(memo) for memo in stores.memos.recent(RECENT_MEMOS)],
    )
