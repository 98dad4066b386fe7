"""Locale vocabulary from Babel CLDR data.

Derives custom token keywords (month and weekday names) and the week-start
convention for a locale, so expressions can be written in the caller's
language without registering every name by hand.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from fuzzydate.constants import BOUNDARY_CHARS, TOKEN_MONTH_JAN, TOKEN_WDAY_MON
from fuzzydate.syntax.token import STANDARD_TOKENS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_calendar_tokens",
    "locale_week_starts_monday",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

_NAME_CONTEXTS = ("format", "stand-alone")
_NAME_WIDTHS = ("wide", "abbreviated")

# CLDR first_week_day is 0-based from Monday
_CLDR_MONDAY = 0


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("fi-FI")
        'fi_FI'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def get_calendar_tokens(locale_code: str) -> Mapping[str, int]:
    """Month and weekday names of a locale, mapped to token identifiers.

    Wide and abbreviated names are taken from both the "format" and
    "stand-alone" CLDR contexts, lowercased, with a trailing abbreviation
    dot removed. Names are skipped when they:

    - contain a tokenizer boundary character (they could never match)
    - are already a built-in keyword
    - name two different tokens within the locale

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Read-only mapping of keyword to token identifier, suitable for
        FuzzyConfig.add_tokens().

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_calendar_tokens("de_DE")["montag"]
        101
    """
    locale = get_babel_locale(locale_code)

    candidates: list[tuple[str, int]] = []
    for context in _NAME_CONTEXTS:
        for width in _NAME_WIDTHS:
            months = locale.months[context][width]
            candidates.extend(
                (name, TOKEN_MONTH_JAN - 1 + number) for number, name in months.items()
            )
            days = locale.days[context][width]
            candidates.extend(
                (name, TOKEN_WDAY_MON + number) for number, name in days.items()
            )

    tokens = _collect_keywords(candidates)
    logger.debug("Derived %d calendar keywords for locale %s", len(tokens), locale_code)
    return MappingProxyType(tokens)


def locale_week_starts_monday(locale_code: str) -> bool:
    """Whether weeks start on Monday in the given locale.

    Locales whose weeks start on any other day are treated as Sunday-first.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return get_babel_locale(locale_code).first_week_day == _CLDR_MONDAY


def _collect_keywords(candidates: Iterable[tuple[str, int]]) -> dict[str, int]:
    keywords: dict[str, int] = {}
    ambiguous: set[str] = set()

    for name, gid in candidates:
        keyword = name.lower().rstrip(".")
        if not keyword or keyword in STANDARD_TOKENS:
            continue
        if any(char in BOUNDARY_CHARS for char in keyword):
            continue
        if keywords.get(keyword, gid) != gid:
            ambiguous.add(keyword)
        keywords[keyword] = gid

    for keyword in ambiguous:
        del keywords[keyword]
    return keywords
