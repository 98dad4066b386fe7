"""Shared constants for fuzzydate.

This module provides the token identifiers accepted by custom token
registration, the character classes used by the tokenizer, and the numeric
thresholds used to classify bare integer literals.

Constants are grouped by domain:
- Token identifiers: Values accepted by FuzzyConfig.add_tokens()
- Character classes: Chunk boundaries and prefixes recognized by the tokenizer
- Numeric thresholds: Integer/Year/Timestamp classification

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Weekday tokens
    "TOKEN_WDAY_MON",
    "TOKEN_WDAY_TUE",
    "TOKEN_WDAY_WED",
    "TOKEN_WDAY_THU",
    "TOKEN_WDAY_FRI",
    "TOKEN_WDAY_SAT",
    "TOKEN_WDAY_SUN",
    # Month tokens
    "TOKEN_MONTH_JAN",
    "TOKEN_MONTH_FEB",
    "TOKEN_MONTH_MAR",
    "TOKEN_MONTH_APR",
    "TOKEN_MONTH_MAY",
    "TOKEN_MONTH_JUN",
    "TOKEN_MONTH_JUL",
    "TOKEN_MONTH_AUG",
    "TOKEN_MONTH_SEP",
    "TOKEN_MONTH_OCT",
    "TOKEN_MONTH_NOV",
    "TOKEN_MONTH_DEC",
    # Unit tokens
    "TOKEN_UNIT_SEC",
    "TOKEN_UNIT_MIN",
    "TOKEN_UNIT_HRS",
    "TOKEN_SHORT_UNIT_SEC",
    "TOKEN_SHORT_UNIT_HRS",
    "TOKEN_SHORT_UNIT_DAY",
    "TOKEN_SHORT_UNIT_WEEK",
    "TOKEN_SHORT_UNIT_MONTH",
    "TOKEN_SHORT_UNIT_YEAR",
    "TOKEN_LONG_UNIT_SEC",
    "TOKEN_LONG_UNIT_MIN",
    "TOKEN_LONG_UNIT_HRS",
    "TOKEN_LONG_UNIT_DAY",
    "TOKEN_LONG_UNIT_WEEK",
    "TOKEN_LONG_UNIT_MONTH",
    "TOKEN_LONG_UNIT_YEAR",
    "TOKEN_GID_BASE",
    # Character classes
    "BOUNDARY_CHARS",
    "IGNORED_CHARS",
    "PREFIX_CHARS",
    # Numeric thresholds
    "YEAR_THRESHOLD",
    "TIMESTAMP_THRESHOLD",
]

# ============================================================================
# TOKEN IDENTIFIERS
# ============================================================================
#
# A token identifier (gid) encodes a token kind and its value as
# kind_group * TOKEN_GID_BASE + value. The kind groups are:
#
#   1xx: Weekday      (101 = Monday .. 107 = Sunday)
#   2xx: Month        (201 = January .. 212 = December)
#   3xx: Unit         (301 = sec, 302 = min, 303 = hr)
#   4xx: Short unit   (401 = s, 403 = h, 404 = d, 405 = w, 406 = m, 407 = y)
#   5xx: Long unit    (501 = second .. 507 = year)
#
# Short unit value 2 is unassigned; "m" already means month.

TOKEN_GID_BASE: int = 100

TOKEN_WDAY_MON: int = 101
TOKEN_WDAY_TUE: int = 102
TOKEN_WDAY_WED: int = 103
TOKEN_WDAY_THU: int = 104
TOKEN_WDAY_FRI: int = 105
TOKEN_WDAY_SAT: int = 106
TOKEN_WDAY_SUN: int = 107

TOKEN_MONTH_JAN: int = 201
TOKEN_MONTH_FEB: int = 202
TOKEN_MONTH_MAR: int = 203
TOKEN_MONTH_APR: int = 204
TOKEN_MONTH_MAY: int = 205
TOKEN_MONTH_JUN: int = 206
TOKEN_MONTH_JUL: int = 207
TOKEN_MONTH_AUG: int = 208
TOKEN_MONTH_SEP: int = 209
TOKEN_MONTH_OCT: int = 210
TOKEN_MONTH_NOV: int = 211
TOKEN_MONTH_DEC: int = 212

TOKEN_UNIT_SEC: int = 301
TOKEN_UNIT_MIN: int = 302
TOKEN_UNIT_HRS: int = 303

TOKEN_SHORT_UNIT_SEC: int = 401
TOKEN_SHORT_UNIT_HRS: int = 403
TOKEN_SHORT_UNIT_DAY: int = 404
TOKEN_SHORT_UNIT_WEEK: int = 405
TOKEN_SHORT_UNIT_MONTH: int = 406
TOKEN_SHORT_UNIT_YEAR: int = 407

TOKEN_LONG_UNIT_SEC: int = 501
TOKEN_LONG_UNIT_MIN: int = 502
TOKEN_LONG_UNIT_HRS: int = 503
TOKEN_LONG_UNIT_DAY: int = 504
TOKEN_LONG_UNIT_WEEK: int = 505
TOKEN_LONG_UNIT_MONTH: int = 506
TOKEN_LONG_UNIT_YEAR: int = 507

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Characters that terminate a chunk. Each one is copied into the pattern
# string as a literal separator.
BOUNDARY_CHARS: frozenset[str] = frozenset({" ", "-", "/", "+", ":", ".", ","})

# Boundary characters written to the pattern string as a space.
IGNORED_CHARS: frozenset[str] = frozenset({","})

# Chunk prefixes that introduce a number with trailing content ("@1705072948").
PREFIX_CHARS: frozenset[str] = frozenset({"@"})

# ============================================================================
# NUMERIC THRESHOLDS
# ============================================================================

# Bare integers at or above these values classify as Year / Timestamp.
YEAR_THRESHOLD: int = 1000
TIMESTAMP_THRESHOLD: int = 10000
