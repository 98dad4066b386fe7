"""Enumerations for fuzzydate type-safe constants.

Uses StrEnum for direction markers and IntEnum for calendar units, so members
compare equal to the raw values carried by tokens.

Python 3.13+.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Change(StrEnum):
    """Direction applied by weekday and range offsets.

    StrEnum provides automatic string conversion: str(Change.NEXT) == "next"
    """

    NONE = "none"
    """No weekly correction: the occurrence within the current week."""

    FIRST = "first"
    """First day of a range."""

    LAST = "last"
    """Last day of a range."""

    PREV = "prev"
    """Most recent occurrence strictly before the current one."""

    NEXT = "next"
    """Soonest occurrence strictly after the current one."""


class TimeUnit(IntEnum):
    """Calendar unit codes shared by [unit], [short_unit] and [long_unit] tokens.

    The integer values match token values, so ``TimeUnit(token.value)``
    converts directly.
    """

    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAYS = 4
    WEEKS = 5
    MONTHS = 6
    YEARS = 7

    @classmethod
    def from_value(cls, value: int) -> TimeUnit | None:
        """Return the unit for a token value, or None when unassigned."""
        try:
            return cls(value)
        except ValueError:
            return None


__all__ = [
    "Change",
    "TimeUnit",
]
