"""Shared text normalization for the indexer, stop-word loader and searcher.

All three must normalize words identically, otherwise a query term could
never match the token that was indexed for it.
"""

from __future__ import annotations

import string

PUNCTUATION = string.punctuation
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LETTERS = frozenset(string.ascii_letters)


def normalize(word: str) -> str:
    """Strip edge punctuation → lowercase → "" if no letter is left."""
    token = word.lstrip(PUNCTUATION).rstrip(PUNCTUATION)
    if not any(c in _LETTERS for c in token):
        return ""
    return token.translate(_LOWER)


def tokenize(text: str) -> list[str]:
    """Split on whitespace and keep the non-empty normalized words."""
    tokens = []
    for word in text.split():
        token = normalize(word)
        if token:
            tokens.append(token)
    return tokens
