from __future__ import annotations

"""
scoring.py

Does: Similarity primitives for name tokens: Levenshtein edit distance, the
      normalized similarity ratio derived from it, and the initial-prefix predicate.
Returns: edit_distance, similarity_ratio, is_initial_match, round_half_up.
Used by: Cascade rules (whole-string / per-position similarity) and the fallback scorer.
"""

import math

from rapidfuzz.distance import Levenshtein

__all__ = [
    "edit_distance",
    "similarity_ratio",
    "is_initial_match",
    "round_half_up",
]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# 1) Edit distance
# ─────────────────────────────────────────────────────────────────────────────

def edit_distance(a: str, b: str) -> int:
    """
    Does: Unit-cost Levenshtein distance (insert/delete/substitute).
    Returns: Non-negative int.
    """
    return Levenshtein.distance(a or "", b or "")


def similarity_ratio(a: str, b: str) -> float:
    """
    Does: 1 − distance / max(len(a), len(b)).
    Returns: Float in [0, 1]; 1.0 when both strings are empty.
    """
    return Levenshtein.normalized_similarity(a or "", b or "")


# ─────────────────────────────────────────────────────────────────────────────
# 2) Initials
# ─────────────────────────────────────────────────────────────────────────────

def is_initial_match(a: str, b: str) -> bool:
    """
    Does: True if one token is a single letter and the other starts with it
          ("j" vs "john", in either order).
    """
    if not a or not b:
        return False
    if len(a) == 1 and b.startswith(a):
        return True
    if len(b) == 1 and a.startswith(b):
        return True
    return False


# ─────────────────────────────────────────────────────────────────────────────
# 3) Percent rounding
# ─────────────────────────────────────────────────────────────────────────────

def round_half_up(value: float) -> int:
    """Does: Round .5 away from zero on the positive side (92.5 → 93), unlike round()."""
    return int(math.floor(value + 0.5))
