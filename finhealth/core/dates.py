"""Calendar arithmetic shared by models and the period engine.

Everything here works at calendar-day granularity. Datetimes are reduced
to their date before any comparison.
"""

import calendar
from datetime import date, datetime, timedelta


def as_date(value: date | datetime) -> date:
    """Reduce a datetime to its calendar day (dates pass through)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length.

    Example: 2024-01-31 + 1 month = 2024-02-29.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def add_weeks(value: date, weeks: int) -> date:
    return value + timedelta(weeks=weeks)


def add_years(value: date, years: int) -> date:
    """Add calendar years (Feb 29 maps to Feb 28 in non-leap years)."""
    return add_months(value, years * 12)


def day_start(value: date | datetime) -> date:
    return as_date(value)


def week_start(value: date | datetime) -> date:
    """Monday of the ISO week containing value."""
    d = as_date(value)
    return d - timedelta(days=d.weekday())


def month_start(value: date | datetime) -> date:
    return as_date(value).replace(day=1)


def quarter_start(value: date | datetime) -> date:
    d = as_date(value)
    first_month = (d.month - 1) // 3 * 3 + 1
    return date(d.year, first_month, 1)


def year_start(value: date | datetime) -> date:
    return date(as_date(value).year, 1, 1)


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole calendar days from start to end (negative if end is earlier)."""
    return (as_date(end) - as_date(start)).days


def previous_month_start(value: date | datetime) -> date:
    """First day of the calendar month before the one containing value."""
    return add_months(month_start(value), -1)
