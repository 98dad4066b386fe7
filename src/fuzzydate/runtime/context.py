"""Conversion context threaded through pattern rules.

Every rule receives a FuzzyContext and returns the next one; contexts are
immutable, so a failed conversion never leaves partial state behind. Calendar
failures surface as ValueError (invalid date or time) or OverflowError (outside
the datetime range), which the engine turns into a failed conversion.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta
from typing import TYPE_CHECKING

from fuzzydate.core import (
    date_stamp,
    date_ymd,
    offset_months,
    offset_range_month,
    offset_weekday,
    offset_weeks,
    offset_years,
    time_hms,
    time_reset,
)
from fuzzydate.enums import Change, TimeUnit

if TYPE_CHECKING:
    from datetime import datetime

__all__ = ["FuzzyContext", "Rules"]

_MONDAY = 1
_SUNDAY = 7


@dataclass(frozen=True, slots=True)
class Rules:
    """Conventions applied while converting.

    Attributes:
        week_start_mon: True when weeks start on Monday, False for Sunday
    """

    week_start_mon: bool = True

    @property
    def week_start_day(self) -> int:
        """Weekday number (1 = Monday, 7 = Sunday) that starts a week."""
        return _MONDAY if self.week_start_mon else _SUNDAY


@dataclass(frozen=True, slots=True)
class FuzzyContext:
    """Datetime being transformed, with one method per rule primitive."""

    time: datetime

    def _with(self, time: datetime) -> FuzzyContext:
        return replace(self, time=time)

    def date_stamp(self, seconds: int, milliseconds: int = 0) -> FuzzyContext:
        """Replace the time with a Unix timestamp in UTC."""
        return self._with(date_stamp(seconds, milliseconds))

    def date_ymd(self, year: int, month: int, day: int) -> FuzzyContext:
        """Move to the given date, keeping the time of day."""
        return self._with(date_ymd(self.time, year, month, day))

    def date_md(self, month: int, day: int) -> FuzzyContext:
        """Move to the given month and day of the current year."""
        return self._with(date_ymd(self.time, self.time.year, month, day))

    def offset_weekday(self, weekday: int, change: Change) -> FuzzyContext:
        """Move to a weekday relative to the current week."""
        return self._with(offset_weekday(self.time, weekday, change))

    def offset_range_month(self, month: int, change: Change) -> FuzzyContext:
        """Move to the first or last day of a month in the current year."""
        return self._with(offset_range_month(self.time, month, change))

    def offset_range_unit(self, target: TimeUnit, unit: TimeUnit, change: Change) -> FuzzyContext:
        """Move to the first or last ``target`` within the current ``unit``.

        Only days within a month are supported.

        Raises:
            ValueError: For any other combination of units.
        """
        if target is not TimeUnit.DAYS or unit is not TimeUnit.MONTHS:
            msg = f"Unsupported range: {target.name.lower()} of {unit.name.lower()}"
            raise ValueError(msg)
        return self.offset_range_month(self.time.month, change)

    def offset_unit(self, unit: TimeUnit | None, amount: int, rules: Rules) -> FuzzyContext:
        """Move by a signed amount of a unit.

        Weeks move to the start of the current week first; months and years
        clamp the day of month. Unknown units leave the time unchanged.
        """
        match unit:
            case TimeUnit.SECONDS:
                time = self.time + timedelta(seconds=amount)
            case TimeUnit.MINUTES:
                time = self.time + timedelta(minutes=amount)
            case TimeUnit.HOURS:
                time = self.time + timedelta(hours=amount)
            case TimeUnit.DAYS:
                time = self.time + timedelta(days=amount)
            case TimeUnit.WEEKS:
                time = offset_weeks(self.time, amount, rules.week_start_day)
            case TimeUnit.MONTHS:
                time = offset_months(self.time, amount)
            case TimeUnit.YEARS:
                time = offset_years(self.time, amount)
            case _:
                time = self.time
        return self._with(time)

    def time_hms(self, hour: int, minute: int, second: int) -> FuzzyContext:
        """Set the time of day."""
        return self._with(time_hms(self.time, hour, minute, second))

    def time_reset(self) -> FuzzyContext:
        """Move to midnight of the current day."""
        return self._with(time_reset(self.time))
