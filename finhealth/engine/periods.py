"""Time-window filtering.

Selects records whose date falls on or after the start of a named period
(day/week/month/quarter/year) containing "now". There is no upper bound:
future-dated records after the window start are kept.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import TypeVar

from finhealth.core.dates import (
    as_date,
    day_start,
    month_start,
    quarter_start,
    week_start,
    year_start,
)
from finhealth.core.models import TimePeriod

T = TypeVar("T")

_WINDOW_STARTS: dict[TimePeriod, Callable[[date | datetime], date]] = {
    TimePeriod.DAY: day_start,
    TimePeriod.WEEK: week_start,
    TimePeriod.MONTH: month_start,
    TimePeriod.QUARTER: quarter_start,
    TimePeriod.YEAR: year_start,
}


def record_date(record: object) -> date:
    """Default key: the record's ``date`` attribute at day granularity."""
    return as_date(record.date)  # type: ignore[attr-defined]


def get_window_start(period: TimePeriod, now: date | datetime) -> date | None:
    """Get the first day of the window for a period.

    Args:
        period: Named period.
        now: Reference moment.

    Returns:
        First calendar day of the window, or None for ``TimePeriod.ALL``.
    """
    if period == TimePeriod.ALL:
        return None
    return _WINDOW_STARTS[period](now)


def filter_by_period(
    records: Iterable[T],
    period: TimePeriod,
    now: date | datetime | None = None,
    key: Callable[[T], date] = record_date,
) -> list[T]:
    """Filter records to those dated on or after the window start.

    Order is preserved. A record dated exactly on the window start is
    included.

    Args:
        records: Records to filter.
        period: Named period.
        now: Reference moment (default: current time).
        key: Extracts the calendar date of a record.

    Returns:
        List of matching records in original order.
    """
    start = get_window_start(period, now or datetime.now())
    if start is None:
        return list(records)
    return [r for r in records if as_date(key(r)) >= start]


def filter_by_range(
    records: Iterable[T],
    start: date,
    end: date,
    key: Callable[[T], date] = record_date,
) -> list[T]:
    """Filter records to those dated within [start, end] (both inclusive)."""
    return [r for r in records if start <= as_date(key(r)) <= end]
