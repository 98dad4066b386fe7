"""Tokenizer producing the pattern string matched by the conversion engine.

The input is split into chunks at boundary characters (space, "-", "/", "+",
":", ".", ","). Each chunk is replaced by the placeholder of the token it
represents, or kept verbatim when it is not recognized; the boundary
character itself is copied as a literal separator (a comma becomes a space):

    "Feb 7th, 2023"        -> "[month] [nth] [year]"
    "2023-12-07 15:02:01"  -> "[year]-[int]-[int] [int]:[int]:[int]"
    "+1d -2h"              -> "+[int][short_unit] -[int][short_unit]"
    "next Monday"          -> "next [wday]"

The tokenizer never fails: unrecognized input passes through literally and
simply does not match any pattern later on.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuzzydate.constants import BOUNDARY_CHARS, IGNORED_CHARS, PREFIX_CHARS

from .token import STANDARD_TOKENS, Token, TokenKind, classify_number

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["is_time_duration", "tokenize"]

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")

_DURATION_UNIT_PLACEHOLDERS = (
    TokenKind.UNIT.placeholder,
    TokenKind.SHORT_UNIT.placeholder,
    TokenKind.LONG_UNIT.placeholder,
)


def tokenize(
    source: str,
    custom_tokens: Mapping[str, Token] | None = None,
) -> tuple[str, list[Token]]:
    """Convert an input string into a pattern string and its token values.

    Args:
        source: Raw date/time expression
        custom_tokens: Additional keywords (lowercase) mapped to tokens.
            They take precedence over built-in keywords of the same name.

    Returns:
        Tuple of (pattern, tokens). The tokens appear in the same order as
        their placeholders in the pattern.

    Example:
        >>> tokenize("next Monday midnight")
        ('next [wday] midnight', [Token(kind=<TokenKind.WEEKDAY: '[wday]'>, value=1)])
        >>> tokenize("")
        ('', [])
    """
    if not source:
        return "", []

    vocabulary = _merge_vocabulary(custom_tokens)
    pattern: list[str] = []
    tokens: list[Token] = []

    chunk_start = 0
    last_index = len(source) - 1

    for index, char in enumerate(source):
        if char in BOUNDARY_CHARS:
            chunk = source[chunk_start:index]
            separator = " " if char in IGNORED_CHARS else char
            chunk_start = index + 1
        elif index == last_index:
            chunk = source[chunk_start:]
            separator = ""
        else:
            continue

        if not chunk:
            # A space directly after another separator collapses into it
            if separator != " " or not pattern:
                pattern.append(separator)
            continue

        pattern.append(_chunk_pattern(chunk, vocabulary, tokens))
        pattern.append(separator)

    result = "".join(pattern).strip()
    logger.debug("Tokenized %r into %r (%d tokens)", source, result, len(tokens))
    return result, tokens


def is_time_duration(pattern: str) -> bool:
    """Check whether a pattern describes an exact duration.

    A duration pattern holds at least one [int] and at least one unit
    placeholder, and nothing besides those placeholders, "+", "-" and spaces.

    Example:
        >>> is_time_duration("[int][short_unit] [int][short_unit]")
        True
        >>> is_time_duration("[int] [long_unit] ago")
        False
    """
    without_numbers = pattern.replace(TokenKind.INTEGER.placeholder, "")
    if without_numbers == pattern:
        return False

    without_units = without_numbers
    for placeholder in _DURATION_UNIT_PLACEHOLDERS:
        without_units = without_units.replace(placeholder, "")
    if without_units == without_numbers:
        return False

    remainder = without_units.replace("+", "").replace("-", "").replace(" ", "")
    return not remainder


def _merge_vocabulary(custom_tokens: Mapping[str, Token] | None) -> Mapping[str, Token]:
    if not custom_tokens:
        return STANDARD_TOKENS
    merged = dict(STANDARD_TOKENS)
    merged.update((keyword.lower(), token) for keyword, token in custom_tokens.items())
    return merged


def _chunk_pattern(chunk: str, vocabulary: Mapping[str, Token], tokens: list[Token]) -> str:
    """Return the pattern text for one chunk, appending recognized tokens."""
    token = vocabulary.get(chunk.lower())
    if token is not None:
        tokens.append(token)
        return token.placeholder

    word, digits = _split_word_and_number(chunk)
    if not digits:
        return _literal(chunk)

    number = _parse_number(digits)
    if not word:
        if number is None:
            return _literal(chunk)
        tokens.append(number)
        return number.placeholder

    parts: list[str] = []
    if number is not None:
        tokens.append(number)
        parts.append(number.placeholder)
    else:
        parts.append(digits)

    word_token = vocabulary.get(word.lower())
    if word_token is not None:
        tokens.append(word_token)
        parts.append(word_token.placeholder)
    else:
        parts.append(_literal(word))

    return "".join(parts)


def _literal(text: str) -> str:
    """Escape brackets in unrecognized text so it never reads as a placeholder."""
    return text.replace("[", "\\[")


def _split_word_and_number(chunk: str) -> tuple[str, str]:
    """Split a chunk into its word part and its number part.

    Plain chunks take their leading digit run as the number ("2hrs" ->
    ("hrs", "2")). Prefixed chunks take everything from the first digit
    on as the number, and drop a bare prefix ("@1705072948" -> ("", "1705072948")).
    """
    prefixed = chunk[0] in PREFIX_CHARS
    word: list[str] = []
    digits: list[str] = []

    for char in chunk:
        if prefixed:
            if digits or char in _ASCII_DIGITS:
                digits.append(char)
                continue
        elif not word and char in _ASCII_DIGITS:
            digits.append(char)
            continue
        word.append(char)

    word_text = "".join(word)
    if prefixed and digits and word_text in PREFIX_CHARS:
        word_text = ""
    return word_text, "".join(digits)


def _parse_number(digits: str) -> Token | None:
    if not digits or not all(char in _ASCII_DIGITS for char in digits):
        return None
    try:
        value = int(digits)
    except ValueError:
        # Digit run beyond the interpreter's integer conversion limit
        return None
    return classify_number(value)
