"""Hypothesis strategies for fuzzydate property-based testing.

Usage:
    from tests.strategies import reference_datetimes, month_end_datetimes
"""

from .dates import (
    FIXED_SHORT_UNITS,
    duration_parts,
    fixed_offsets,
    month_end_datetimes,
    month_steps,
    reference_datetimes,
    weekday_numbers,
    year_steps,
)

__all__ = [
    "FIXED_SHORT_UNITS",
    "duration_parts",
    "fixed_offsets",
    "month_end_datetimes",
    "month_steps",
    "reference_datetimes",
    "weekday_numbers",
    "year_steps",
]
