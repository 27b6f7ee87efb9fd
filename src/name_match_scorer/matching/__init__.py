"""
matching.
========

Does: Facade for the name matcher: entry point, result types, cascade and fallback.
Used by: Callers verifying a submitted name against a name on record.
"""

from __future__ import annotations

from .cascade import CASCADE_RULES, classify
from .fallback import align_tokens, fallback_score, penalty_for
from .orchestrator import match_names, prepare_names
from .types import (
    EXACT_MATCH,
    HIGH_SIMILARITY,
    LOW_MATCH,
    POSSIBLE_MATCH,
    REMARKS,
    MatchResult,
    PreparedNames,
    Remark,
    remark_for_score,
)

__all__ = [
    # Entry point
    "match_names",
    "prepare_names",
    # Types
    "MatchResult",
    "PreparedNames",
    "Remark",
    "REMARKS",
    "EXACT_MATCH",
    "HIGH_SIMILARITY",
    "POSSIBLE_MATCH",
    "LOW_MATCH",
    "remark_for_score",
    # Stages
    "CASCADE_RULES",
    "classify",
    "align_tokens",
    "penalty_for",
    "fallback_score",
]

__docformat__ = "google"
