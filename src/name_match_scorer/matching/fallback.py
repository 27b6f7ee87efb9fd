from __future__ import annotations

"""
fallback.py

Does: Score name pairs no cascade rule recognised: greedy token alignment
      (edit-distance similarity with an initial-prefix bonus), a coverage /
      precision blend, and a length-tiered whole-string distance penalty.
Returns: align_tokens(), penalty_for(), fallback_score() → (percentage, remark).
Used by: matching.orchestrator.match_names as the last step.
"""

import logging
from collections.abc import Sequence

from name_match_scorer.general.fuzzy import (
    is_initial_match,
    round_half_up,
    similarity_ratio,
)

from .types import PreparedNames, Verdict, remark_for_score

__all__ = [
    "align_tokens",
    "penalty_for",
    "fallback_score",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
INITIAL_MATCH_SIMILARITY = 0.9
COVERAGE_WEIGHT = 0.7
PRECISION_WEIGHT = 0.6
PENALTY_SIMILARITY_CEILING = 0.6  # penalty applies strictly below this
# (max space-free input length, points per edit) checked in order
PENALTY_TIERS: tuple[tuple[int, int], ...] = ((6, 4), (12, 2))
PENALTY_DEFAULT_PER_EDIT = 1
SCORE_FLOOR = 0
SCORE_CEILING = 99


def align_tokens(input_tokens: Sequence[str], given_tokens: Sequence[str]) -> float:
    """
    Does: For each given token (in order) pick the best unused input token and consume it.
          An initial-prefix pair counts as INITIAL_MATCH_SIMILARITY when that beats
          the plain similarity seen so far. Greedy, not an optimal assignment.
    Returns: Sum of the chosen similarities.
    """
    used: set[int] = set()
    matched = 0.0
    for g in given_tokens:
        best = 0.0
        best_idx = -1
        for idx, i in enumerate(input_tokens):
            if idx in used:
                continue
            sim = similarity_ratio(i, g)
            if sim > best:
                best, best_idx = sim, idx
            if is_initial_match(i, g) and INITIAL_MATCH_SIMILARITY > best:
                best, best_idx = INITIAL_MATCH_SIMILARITY, idx
        if best_idx != -1:
            used.add(best_idx)
            matched += best
    return matched


def penalty_for(input_no_space: str, merge_distance: int) -> int:
    """Does: Points to subtract for a dissimilar pair: shorter names pay more per edit."""
    length = len(input_no_space)
    for max_len, per_edit in PENALTY_TIERS:
        if length <= max_len:
            return merge_distance * per_edit
    return merge_distance * PENALTY_DEFAULT_PER_EDIT


def fallback_score(names: PreparedNames) -> Verdict:
    """
    Does: Blend coverage (matched / input tokens) and precision (matched / given tokens),
          penalize when whole-string similarity is low, clamp to [0, 99].
    Returns: (percentage, remark) with the remark taken from the score band.
    """
    n_input = len(names.input_tokens)
    n_given = len(names.given_tokens)
    if not n_input or not n_given:
        return SCORE_FLOOR, remark_for_score(SCORE_FLOOR)

    matched = align_tokens(names.input_tokens, names.given_tokens)
    coverage = matched / n_input
    precision = matched / n_given
    score = round_half_up((coverage * COVERAGE_WEIGHT + precision * PRECISION_WEIGHT) * 100)

    penalty = 0
    if names.merge_similarity < PENALTY_SIMILARITY_CEILING:
        penalty = penalty_for(names.input_no_space, names.merge_distance)
    score = max(SCORE_FLOOR, min(SCORE_CEILING, score - penalty))

    log.debug(
        "fallback: matched=%.3f coverage=%.3f precision=%.3f penalty=%d → %d",
        matched, coverage, precision, penalty, score,
    )
    return score, remark_for_score(score)
