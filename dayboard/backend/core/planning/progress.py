"""
Schedule Progress Calculations.

- schedule_progress : linear interpolation of ``now`` between start and end
- aggregate_progress: mean of the per-item percentages
- completion_ratio  : share of completed items (today / this month meters)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone, tzinfo
from typing import Any

from dayboard.backend.core.planning.dates import field, parse_timestamp


def _round_half_up(value: float) -> int:
    # Percentages are never negative here, so int(x + 0.5) matches the UI rounding.
    return int(value + 0.5)


def schedule_progress(item: Any, now: datetime | None = None, tz: tzinfo | None = None) -> int:
    """
    Percent of the schedule's interval that has elapsed at ``now``.

    Args:
        item: Schedule with ``start_date`` and ``end_date``
        now: Reference instant (defaults to the current UTC time)
        tz: Timezone naive timestamps are read in (UTC when omitted)

    Returns:
        Integer in [0, 100]. Invalid dates and empty or inverted intervals
        yield 0.
    """
    start = parse_timestamp(field(item, "start_date"), tz)
    end = parse_timestamp(field(item, "end_date"), tz)
    if start is None or end is None:
        return 0
    now = parse_timestamp(now, tz) if now is not None else datetime.now(timezone.utc)

    total = (end - start).total_seconds()
    if total <= 0:
        return 0
    elapsed = (now - start).total_seconds()
    fraction = min(max(elapsed / total, 0.0), 1.0)
    return _round_half_up(fraction * 100)


def aggregate_progress(items: Iterable[Any], now: datetime | None = None, tz: tzinfo | None = None) -> int:
    """Arithmetic mean of per-item progress, 0 for an empty set."""
    if now is None:
        now = datetime.now(timezone.utc)
    values = [schedule_progress(item, now, tz) for item in items]
    if not values:
        return 0
    return _round_half_up(sum(values) / len(values))


def completion_ratio(items: Sequence[Any]) -> int:
    """Percent of items marked completed, 0 for an empty set."""
    if not items:
        return 0
    done = sum(1 for item in items if field(item, "completed"))
    return _round_half_up(done / len(items) * 100)


def progress_message(percent: int) -> str | None:
    if percent >= 80:
        return "Almost there, keep going!"
    if percent <= 30:
        return "Let's get started on today's tasks."
    return None
