"""Tokenizer and token model.

Turns raw input into a pattern string plus typed token values. Independent of
the runtime package so the pattern of any expression can be inspected without
converting it.

Python 3.13+.
"""

from .token import STANDARD_TOKENS, Token, TokenKind, classify_number, token_from_gid
from .tokenizer import is_time_duration, tokenize

__all__ = [
    "STANDARD_TOKENS",
    "Token",
    "TokenKind",
    "classify_number",
    "is_time_duration",
    "token_from_gid",
    "tokenize",
]
