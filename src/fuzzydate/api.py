"""Module-level entry points bound to a process-wide default FuzzyConfig.

Convenience wrappers for callers that do not need separate vocabularies:

    >>> from fuzzydate import to_datetime
    >>> to_datetime("yesterday", now).isoformat()
    '2024-01-11T00:00:00+02:00'

Registrations made through add_tokens() / add_patterns() / add_locale()
affect every later call in the process. Create a FuzzyConfig for scoped
vocabularies.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from fuzzydate.runtime import FuzzyConfig

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date, datetime

__all__ = [
    "add_locale",
    "add_patterns",
    "add_tokens",
    "get_default_config",
    "to_date",
    "to_datetime",
    "to_seconds",
]


@functools.cache
def get_default_config() -> FuzzyConfig:
    """Return the shared FuzzyConfig used by the module-level functions."""
    return FuzzyConfig()


def to_datetime(
    source: str,
    now: datetime | None = None,
    *,
    week_start_mon: bool | None = None,
) -> datetime:
    """Convert an expression into a datetime. See FuzzyConfig.to_datetime()."""
    return get_default_config().to_datetime(source, now, week_start_mon=week_start_mon)


def to_date(
    source: str,
    today: date | None = None,
    *,
    week_start_mon: bool | None = None,
) -> date:
    """Convert an expression into a date. See FuzzyConfig.to_date()."""
    return get_default_config().to_date(source, today, week_start_mon=week_start_mon)


def to_seconds(source: str) -> float:
    """Convert an exact duration into seconds. See FuzzyConfig.to_seconds()."""
    return get_default_config().to_seconds(source)


def add_tokens(tokens: Mapping[str, int]) -> None:
    get_default_config().add_tokens(tokens)


def add_patterns(patterns: Mapping[str, str]) -> None:
    get_default_config().add_patterns(patterns)


def add_locale(locale_code: str) -> None:
    get_default_config().add_locale(locale_code)
