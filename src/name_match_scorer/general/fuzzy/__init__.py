"""
fuzzy.

Does: Facade exposing the similarity primitives used by the name matcher.

Returns: Public API for edit distance, similarity ratio and initial matching.
Used by: Matching cascade and fallback scorer.
"""

from __future__ import annotations

from .scoring import (
    edit_distance,
    is_initial_match,
    round_half_up,
    similarity_ratio,
)

__all__ = [
    "edit_distance",
    "similarity_ratio",
    "is_initial_match",
    "round_half_up",
]

__docformat__ = "google"
