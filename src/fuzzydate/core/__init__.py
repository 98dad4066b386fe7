"""Core calendar utilities shared by the syntax and runtime layers.

This package has no knowledge of tokens or patterns; it only moves
timezone-aware datetimes around the calendar:

    core <- syntax <- runtime

Python 3.13+.
"""

from .arithmetic import (
    date_stamp,
    date_ymd,
    into_month_day,
    offset_months,
    offset_range_month,
    offset_weekday,
    offset_weeks,
    offset_years,
    time_hms,
    time_reset,
)

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
