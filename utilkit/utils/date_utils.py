"""Pure functions for date arithmetic and formatting.

Functions accept ``datetime.date`` or ``datetime.datetime`` values and never
mutate their arguments. Plain dates are treated as midnight wherever a
time-of-day is needed.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_FORMAT_TOKENS = re.compile(r"YYYY|MM|DD|HH|mm|ss")

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 60 * _SECONDS_PER_MINUTE
_SECONDS_PER_DAY = 24 * _SECONDS_PER_HOUR


@dataclass(frozen=True)
class DateDiff:
    """Absolute difference between two moments, split into units."""

    days: int
    hours: int
    minutes: int
    seconds: int


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def format_date(value: date, fmt: str) -> str:
    """Format a date using YYYY, MM, DD, HH, mm and ss tokens.

    Every other character of the format string is copied verbatim.

    Args:
        value: Date or datetime to format
        fmt: Format string, e.g. 'YYYY-MM-DD HH:mm:ss'

    Returns:
        Formatted string with zero-padded fields

    Examples:
        >>> format_date(datetime(2023, 1, 1, 14, 30, 0), "YYYY-MM-DD HH:mm:ss")
        '2023-01-01 14:30:00'
        >>> format_date(date(2023, 1, 1), "YYYY年MM月DD日")
        '2023年01月01日'
    """
    moment = _as_datetime(value)
    replacements = {
        "YYYY": str(moment.year),
        "MM": f"{moment.month:02d}",
        "DD": f"{moment.day:02d}",
        "HH": f"{moment.hour:02d}",
        "mm": f"{moment.minute:02d}",
        "ss": f"{moment.second:02d}",
    }
    return _FORMAT_TOKENS.sub(lambda match: replacements[match.group(0)], fmt)


def date_diff(first: date, second: date) -> DateDiff:
    """Compute the absolute difference between two dates.

    Sub-second precision is discarded.

    Examples:
        >>> date_diff(datetime(2023, 1, 1), datetime(2023, 1, 5, 12, 30, 45))
        DateDiff(days=4, hours=12, minutes=30, seconds=45)
    """
    delta = abs(_as_datetime(first) - _as_datetime(second))
    total_seconds = int(delta.total_seconds())
    days, remainder = divmod(total_seconds, _SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, _SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, _SECONDS_PER_MINUTE)
    return DateDiff(days=days, hours=hours, minutes=minutes, seconds=seconds)


def is_leap_year(value: date) -> bool:
    """Check if the year of the given date is a leap year.

    Examples:
        >>> is_leap_year(date(2020, 1, 1))
        True
        >>> is_leap_year(date(1900, 1, 1))
        False
    """
    return calendar.isleap(value.year)


def get_days_in_month(value: date) -> int:
    """Number of days in the month of the given date.

    Examples:
        >>> get_days_in_month(date(2023, 2, 1))
        28
        >>> get_days_in_month(date(2024, 2, 1))
        29
    """
    return calendar.monthrange(value.year, value.month)[1]


def add_days(value: date, days: int) -> date:
    """Return a new date shifted by a (possibly negative) number of days.

    Examples:
        >>> add_days(date(2023, 1, 1), -1)
        datetime.date(2022, 12, 31)
    """
    return value + timedelta(days=days)


def get_dates_between(start: date, end: date) -> list[date]:
    """List every day from start to end, both inclusive.

    Each element keeps the time-of-day of start. An empty list is returned
    when start is after end.

    Examples:
        >>> len(get_dates_between(date(2023, 1, 1), date(2023, 1, 5)))
        5
    """
    if isinstance(start, datetime) != isinstance(end, datetime):
        start, end = _as_datetime(start), _as_datetime(end)

    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current = current + timedelta(days=1)
    return dates


def is_same_day(first: date, second: date) -> bool:
    """Check if two dates fall on the same calendar day.

    Examples:
        >>> is_same_day(datetime(2023, 1, 1, 10, 30), datetime(2023, 1, 1, 15, 45))
        True
    """
    return (first.year, first.month, first.day) == (second.year, second.month, second.day)
