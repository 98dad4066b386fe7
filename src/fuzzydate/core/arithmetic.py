"""Calendar arithmetic over timezone-aware datetimes.

Pure functions used by the pattern rules. Every function keeps the UTC offset
of its input, except date_stamp() which always produces UTC.

Month and year stepping clamp the day of month to the length of the target
month, so stepping from a month end never produces an invalid date:

    2024-01-31 + 1 month  -> 2024-02-29
    2024-02-29 - 1 year   -> 2023-02-28

Setters that receive caller-supplied values (date_ymd, time_hms) raise
ValueError for out-of-range input; callers treat that as a failed conversion.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import calendar
from datetime import UTC, datetime, timedelta

from fuzzydate.enums import Change

__all__ = [
    "date_stamp",
    "date_ymd",
    "into_month_day",
    "offset_months",
    "offset_range_month",
    "offset_weekday",
    "offset_weeks",
    "offset_years",
    "time_hms",
    "time_reset",
]

# Start-of-week codes, matching Weekday token values
_MONDAY = 1
_SUNDAY = 7

_MONTHS_PER_YEAR = 12
_MAX_MILLISECONDS = 999


def into_month_day(year: int, month: int, day: int) -> int:
    """Clamp a day of month to the length of the given month.

    Args:
        year: Calendar year (leap years give February 29 days)
        month: Month 1-12
        day: Requested day of month

    Returns:
        ``day`` when the month is long enough, otherwise its last day.

    Example:
        >>> into_month_day(2024, 2, 30)
        29
        >>> into_month_day(2023, 2, 29)
        28
    """
    if day <= 28:
        return day
    return min(day, calendar.monthrange(year, month)[1])


def date_stamp(seconds: int, milliseconds: int = 0) -> datetime:
    """Build a UTC datetime from a Unix timestamp.

    Args:
        seconds: Seconds since the Unix epoch (may be negative)
        milliseconds: Millisecond fraction, 0-999

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If milliseconds is out of range.
        OverflowError: If the timestamp is outside the supported range.
    """
    if not 0 <= milliseconds <= _MAX_MILLISECONDS:
        msg = f"Milliseconds must be within 0-{_MAX_MILLISECONDS}, got {milliseconds}"
        raise ValueError(msg)

    epoch = datetime(1970, 1, 1, tzinfo=UTC)
    return epoch + timedelta(seconds=seconds, milliseconds=milliseconds)


def date_ymd(from_time: datetime, year: int, month: int, day: int) -> datetime:
    """Move a datetime into the given year, month and day, keeping the time.

    Raises:
        ValueError: If the year, month or day is not a valid calendar date.
    """
    return from_time.replace(year=year, month=month, day=day)


def offset_months(from_time: datetime, amount: int) -> datetime:
    """Move a datetime by whole months, clamping the day of month.

    Months carry into years with floor division, so negative amounts cross
    year boundaries the same way positive ones do.

    Args:
        from_time: Starting datetime
        amount: Signed number of months

    Returns:
        Datetime with the same time of day in the target month.
    """
    year, month_index = divmod(
        from_time.year * _MONTHS_PER_YEAR + from_time.month - 1 + amount,
        _MONTHS_PER_YEAR,
    )
    month = month_index + 1
    day = into_month_day(year, month, from_time.day)
    return from_time.replace(year=year, month=month, day=day)


def offset_years(from_time: datetime, amount: int) -> datetime:
    """Move a datetime by whole years; February 29 becomes February 28 when needed."""
    year = from_time.year + amount
    day = into_month_day(year, from_time.month, from_time.day)
    return from_time.replace(year=year, day=day)


def offset_range_month(from_time: datetime, month: int, change: Change) -> datetime:
    """Move a datetime to the first or last day of a month in its current year.

    Args:
        from_time: Starting datetime
        month: Target month 1-12
        change: Change.FIRST or Change.LAST; any other value returns
            ``from_time`` unchanged

    Returns:
        Datetime on the first or last day of ``month``, same time of day.

    Raises:
        ValueError: If month is not within 1-12.
    """
    match change:
        case Change.FIRST:
            return date_ymd(from_time, from_time.year, month, 1)
        case Change.LAST:
            if not 1 <= month <= _MONTHS_PER_YEAR:
                msg = f"Month must be within 1-12, got {month}"
                raise ValueError(msg)
            last_day = calendar.monthrange(from_time.year, month)[1]
            return date_ymd(from_time, from_time.year, month, last_day)
        case _:
            return from_time


def offset_weekday(from_time: datetime, new_weekday: int, change: Change) -> datetime:
    """Move a datetime to a weekday relative to its current week.

    Weekdays are numbered 1 (Monday) through 7 (Sunday).

    Args:
        from_time: Starting datetime
        new_weekday: Target weekday 1-7
        change: Change.PREV for the most recent occurrence strictly before
            the current weekday, Change.NEXT for the soonest occurrence
            strictly after it, anything else for the occurrence within the
            current Monday-based week

    Returns:
        Datetime on the target weekday, same time of day.

    Example:
        >>> wed = datetime(2022, 2, 23, tzinfo=UTC)
        >>> offset_weekday(wed, 3, Change.PREV).day
        16
        >>> offset_weekday(wed, 4, Change.NEXT).day
        24
    """
    current_weekday = from_time.isoweekday()
    offset_weeks_count = 0

    if change is Change.PREV and current_weekday <= new_weekday:
        offset_weeks_count = -1
    elif change is Change.NEXT and current_weekday >= new_weekday:
        offset_weeks_count = 1

    return from_time + timedelta(
        weeks=offset_weeks_count, days=new_weekday - current_weekday
    )


def offset_weeks(from_time: datetime, amount: int, start_day: int) -> datetime:
    """Move a datetime to the start of its week, then by whole weeks.

    Args:
        from_time: Starting datetime
        amount: Signed number of weeks; 0 only moves to the start of the week
        start_day: 1 when weeks start on Monday, 7 when they start on Sunday

    Returns:
        Datetime on the first day of the target week, same time of day.
    """
    if start_day == _SUNDAY:
        days_since_start = from_time.isoweekday() % 7
    else:
        days_since_start = from_time.isoweekday() - _MONDAY

    return from_time - timedelta(days=days_since_start) + timedelta(weeks=amount)


def time_hms(from_time: datetime, hour: int, minute: int, second: int) -> datetime:
    """Set the time of day, dropping any sub-second part.

    Raises:
        ValueError: If hour is not 0-23, or minute or second is not 0-59.
    """
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        msg = f"Invalid time of day {hour:02d}:{minute:02d}:{second:02d}"
        raise ValueError(msg)

    return from_time.replace(hour=hour, minute=minute, second=second, microsecond=0)


def time_reset(from_time: datetime) -> datetime:
    """Move a datetime to midnight of the same day."""
    return from_time.replace(hour=0, minute=0, second=0, microsecond=0)
