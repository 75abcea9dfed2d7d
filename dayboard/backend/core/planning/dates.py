"""
Date-Range Membership Filters.

Pure functions over intervals used by the calendar and home views:

- occurs_on    : inclusive day membership after truncating to midnight
- overlaps     : half-open overlap of an item interval with a viewing window
- day / week / month windows and the in_day / in_week / in_month shortcuts
- is_single_day, is_overdue, schedules_on

Items are anything with ``start_date`` / ``end_date`` attributes (or mapping
keys) holding datetimes, dates or ISO-8601 strings.

Calendar days are those of a display timezone (``tz``, UTC when omitted).
Stored rows are absolute instants, so a row written as ``23:00Z`` falls on the
next day in Asia/Seoul. Naive timestamps are wall-clock times in the display
timezone.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dayboard.backend.core.planning.priority import sort_by_priority

SUNDAY = 6
MONDAY = 0

UTC = timezone.utc

Window = tuple[datetime, datetime]


def resolve_timezone(name: str | None) -> tzinfo:
    """
    Resolve a configured timezone name.

    Args:
        name: IANA name such as ``"Asia/Seoul"``; empty or ``"UTC"`` gives UTC

    Raises:
        ValueError: Unknown timezone identifier
    """
    text = str(name or "").strip()
    if not text or text.upper() in ("UTC", "Z", "GMT"):
        return UTC
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone identifier: {text!r}") from exc


def _zone(tz: tzinfo | None) -> tzinfo:
    return tz if tz is not None else UTC


def parse_timestamp(value: Any, tz: tzinfo | None = None) -> datetime | None:
    """
    Coerce a stored timestamp into an aware datetime.

    Accepts datetimes, dates (midnight) and ISO-8601 strings, including the
    trailing ``Z`` the hosted backend emits. Naive values are taken as wall
    time in ``tz``. Returns None for anything that cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=_zone(tz))
    return parsed


def local_today(tz: tzinfo | None = None) -> date:
    """Current calendar day in the display timezone."""
    return datetime.now(_zone(tz)).date()


def field(item: Any, name: str) -> Any:
    """Read ``name`` from a model instance or a raw row dict."""
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def align_timezones(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    # Naive timestamps are taken as UTC so stored rows and local windows compare.
    if (a.tzinfo is None) != (b.tzinfo is None):
        if a.tzinfo is None:
            a = a.replace(tzinfo=UTC)
        else:
            b = b.replace(tzinfo=UTC)
    return a, b


def _as_day(value: Any, tz: tzinfo | None = None) -> date | None:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = parse_timestamp(value, tz)
    return parsed.astimezone(_zone(tz)).date() if parsed is not None else None


def occurs_on(item: Any, day: date | datetime, tz: tzinfo | None = None) -> bool:
    """
    True if ``day`` falls within the item's [start, end] days.

    Boundaries are truncated to midnight in ``tz``; time-of-day components on
    either boundary and on ``day`` are ignored.
    """
    start = _as_day(field(item, "start_date"), tz)
    end = _as_day(field(item, "end_date"), tz)
    target = _as_day(day, tz)
    if start is None or end is None or target is None:
        return False
    return start <= target <= end


def overlaps(
    start: datetime,
    end: datetime,
    window_start: datetime,
    window_end: datetime,
) -> bool:
    """Half-open overlap: starts before the window ends, ends at or after its start."""
    start, window_end = align_timezones(start, window_end)
    end, window_start = align_timezones(end, window_start)
    return start < window_end and end >= window_start


def _midnight(day: date, tz: tzinfo | None) -> datetime:
    return datetime.combine(day, time.min, tzinfo=_zone(tz))


def day_window(day: date | datetime, tz: tzinfo | None = None) -> Window:
    start = _midnight(_as_day(day, tz), tz)
    return start, _midnight(start.date() + timedelta(days=1), tz)


def week_window(day: date | datetime, week_start: int = SUNDAY, tz: tzinfo | None = None) -> Window:
    """
    Window covering the week containing ``day``.

    Args:
        day: Any day inside the week
        week_start: Weekday the week starts on (``date.weekday()`` numbering)
        tz: Display timezone the midnights are taken in

    Returns:
        (start, end) with ``end`` exclusive
    """
    d = _as_day(day, tz)
    first = d - timedelta(days=(d.weekday() - week_start) % 7)
    return _midnight(first, tz), _midnight(first + timedelta(days=7), tz)


def month_window(day: date | datetime, tz: tzinfo | None = None) -> Window:
    d = _as_day(day, tz)
    first = date(d.year, d.month, 1)
    following = date(d.year + 1, 1, 1) if d.month == 12 else date(d.year, d.month + 1, 1)
    return _midnight(first, tz), _midnight(following, tz)


def in_window(item: Any, window: Window, tz: tzinfo | None = None) -> bool:
    start = parse_timestamp(field(item, "start_date"), tz)
    end = parse_timestamp(field(item, "end_date"), tz)
    if start is None or end is None:
        return False
    return overlaps(start, end, window[0], window[1])


def in_day(item: Any, day: date | datetime, tz: tzinfo | None = None) -> bool:
    return in_window(item, day_window(day, tz), tz)


def in_week(item: Any, day: date | datetime, week_start: int = SUNDAY, tz: tzinfo | None = None) -> bool:
    return in_window(item, week_window(day, week_start, tz), tz)


def in_month(item: Any, day: date | datetime, tz: tzinfo | None = None) -> bool:
    return in_window(item, month_window(day, tz), tz)


def is_single_day(item: Any, tz: tzinfo | None = None) -> bool:
    start = _as_day(field(item, "start_date"), tz)
    end = _as_day(field(item, "end_date"), tz)
    return start is not None and start == end


def is_overdue(item: Any, today: date | datetime, tz: tzinfo | None = None) -> bool:
    """An unfinished item whose end day is before ``today``."""
    if field(item, "completed"):
        return False
    end = _as_day(field(item, "end_date"), tz)
    target = _as_day(today, tz)
    return end is not None and target is not None and end < target


def schedules_on(items: Iterable[Any], day: date | datetime, tz: tzinfo | None = None) -> list[Any]:
    """Items occurring on ``day``, most important first (calendar cell order)."""
    return sort_by_priority(item for item in items if occurs_on(item, day, tz))
