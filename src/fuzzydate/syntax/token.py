"""Token model and the built-in token vocabulary.

A token is a typed value recognized in the input: a number, a weekday, a
month, an ordinal day or a time unit. The tokenizer replaces every token
with the placeholder of its kind, producing the pattern string the
conversion engine matches against.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from fuzzydate.constants import (
    TIMESTAMP_THRESHOLD,
    TOKEN_GID_BASE,
    YEAR_THRESHOLD,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "STANDARD_TOKENS",
    "Token",
    "TokenKind",
    "classify_number",
    "token_from_gid",
]


class TokenKind(StrEnum):
    """Kind of a recognized token.

    The value of each member is its placeholder in the pattern string:
    str(TokenKind.WEEKDAY) == "[wday]"
    """

    INTEGER = "[int]"
    """Bare integer below 1000."""

    YEAR = "[year]"
    """Bare integer within 1000-9999."""

    TIMESTAMP = "[timestamp]"
    """Bare integer of 10000 or more, read as Unix seconds."""

    WEEKDAY = "[wday]"
    """Weekday name, 1 (Monday) to 7 (Sunday)."""

    MONTH = "[month]"
    """Month name, 1 (January) to 12 (December)."""

    NTH = "[nth]"
    """Ordinal day of month, 1st to 31st."""

    UNIT = "[unit]"
    """Abbreviated unit: 1 sec, 2 min, 3 hr."""

    SHORT_UNIT = "[short_unit]"
    """Single-letter unit: 1 s, 3 h, 4 d, 5 w, 6 m, 7 y."""

    LONG_UNIT = "[long_unit]"
    """Spelled-out unit: 1 second to 7 year."""

    @property
    def placeholder(self) -> str:
        """Placeholder written to the pattern string."""
        return self.value


# Kinds registrable through token gids, with the values each one accepts.
# Index is the gid hundreds group (gid // TOKEN_GID_BASE).
_GID_KINDS: Mapping[int, tuple[TokenKind, frozenset[int]]] = MappingProxyType({
    1: (TokenKind.WEEKDAY, frozenset(range(1, 8))),
    2: (TokenKind.MONTH, frozenset(range(1, 13))),
    3: (TokenKind.UNIT, frozenset({1, 2, 3})),
    4: (TokenKind.SHORT_UNIT, frozenset({1, 3, 4, 5, 6, 7})),
    5: (TokenKind.LONG_UNIT, frozenset(range(1, 8))),
})


@dataclass(frozen=True, slots=True)
class Token:
    """Recognized token.

    Attributes:
        kind: Token kind, which decides the pattern placeholder
        value: Kind-specific value (weekday number, month number, unit code,
            or the literal integer)
    """

    kind: TokenKind
    value: int

    @property
    def placeholder(self) -> str:
        """Placeholder written to the pattern string for this token."""
        return self.kind.value


def classify_number(value: int) -> Token:
    """Classify a bare non-negative integer literal.

    Example:
        >>> classify_number(999).kind
        <TokenKind.INTEGER: '[int]'>
        >>> classify_number(2024).kind
        <TokenKind.YEAR: '[year]'>
        >>> classify_number(1705072948).kind
        <TokenKind.TIMESTAMP: '[timestamp]'>
    """
    if value >= TIMESTAMP_THRESHOLD:
        return Token(TokenKind.TIMESTAMP, value)
    if value >= YEAR_THRESHOLD:
        return Token(TokenKind.YEAR, value)
    return Token(TokenKind.INTEGER, value)


def token_from_gid(gid: int) -> Token | None:
    """Decode a registrable token identifier.

    Args:
        gid: Token identifier from fuzzydate.constants (e.g. TOKEN_WDAY_MON)

    Returns:
        Token for the identifier, or None when the identifier does not name
        a registrable kind and value.

    Example:
        >>> token_from_gid(101)
        Token(kind=<TokenKind.WEEKDAY: '[wday]'>, value=1)
        >>> token_from_gid(402) is None
        True
    """
    if isinstance(gid, bool) or not isinstance(gid, int):
        return None

    group, value = divmod(gid, TOKEN_GID_BASE)
    entry = _GID_KINDS.get(group)
    if entry is None:
        return None

    kind, allowed = entry
    if value not in allowed:
        return None
    return Token(kind, value)


def _build_standard_tokens() -> Mapping[str, Token]:
    """Build the built-in English vocabulary, keyed by lowercase keyword."""
    table: dict[str, Token] = {}

    weekdays = (
        ("mon", "monday"),
        ("tue", "tuesday"),
        ("wed", "wednesday"),
        ("thu", "thursday"),
        ("fri", "friday"),
        ("sat", "saturday"),
        ("sun", "sunday"),
    )
    for number, names in enumerate(weekdays, start=1):
        for name in names:
            table[name] = Token(TokenKind.WEEKDAY, number)

    months = (
        ("jan", "january"),
        ("feb", "february"),
        ("mar", "march"),
        ("apr", "april"),
        ("may",),
        ("jun", "june"),
        ("jul", "july"),
        ("aug", "august"),
        ("sep", "september"),
        ("oct", "october"),
        ("nov", "november"),
        ("dec", "december"),
    )
    for number, names in enumerate(months, start=1):
        for name in names:
            table[name] = Token(TokenKind.MONTH, number)

    for day in range(1, 32):
        match day % 10:
            case 1 if day != 11:
                suffix = "st"
            case 2 if day != 12:
                suffix = "nd"
            case 3 if day != 13:
                suffix = "rd"
            case _:
                suffix = "th"
        table[f"{day}{suffix}"] = Token(TokenKind.NTH, day)

    units = {
        "sec": 1,
        "min": 2,
        "mins": 2,
        "hr": 3,
        "hrs": 3,
    }
    for name, code in units.items():
        table[name] = Token(TokenKind.UNIT, code)

    short_units = {"s": 1, "h": 3, "d": 4, "w": 5, "m": 6, "y": 7}
    for name, code in short_units.items():
        table[name] = Token(TokenKind.SHORT_UNIT, code)

    long_units = ("second", "minute", "hour", "day", "week", "month", "year")
    for code, name in enumerate(long_units, start=1):
        table[name] = Token(TokenKind.LONG_UNIT, code)
        table[f"{name}s"] = Token(TokenKind.LONG_UNIT, code)

    return MappingProxyType(table)


STANDARD_TOKENS: Mapping[str, Token] = _build_standard_tokens()
