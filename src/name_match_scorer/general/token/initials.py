"""
initials.py

Does: Detect initial-like tokens (2–4 consonant-only letters such as "kr" or "jrr")
      and build their order-insensitive canonical form.
Returns: is_initial_token(), canonical_initials(), canonical_token_key().
Used by: The swapped-order / merged-initials cascade rule.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "is_initial_token",
    "canonical_initials",
    "canonical_token_key",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
INITIAL_CLUSTER_MIN_LEN = 2
INITIAL_CLUSTER_MAX_LEN = 4
VOWELS = frozenset("aeiou")

_LETTERS_RE = re.compile(r"[a-z]+")


def is_initial_token(token: str) -> bool:
    """
    Does: True for a lowercase ASCII token of 2–4 letters without vowels.
          Single letters are plain initials, not clusters.
    """
    if not isinstance(token, str):
        return False
    return (
        INITIAL_CLUSTER_MIN_LEN <= len(token) <= INITIAL_CLUSTER_MAX_LEN
        and _LETTERS_RE.fullmatch(token) is not None
        and not VOWELS.intersection(token)
    )


def canonical_initials(token: str) -> str:
    """
    Does: Sort the letters of an initial cluster ("rk" → "kr"); other tokens pass through.
    Returns: Canonical token.
    """
    if is_initial_token(token):
        return "".join(sorted(token))
    return token


def canonical_token_key(tokens: Iterable[str]) -> tuple[str, ...]:
    """Does: Canonicalize every token and sort, for order-insensitive comparison."""
    return tuple(sorted(canonical_initials(t) for t in tokens))
