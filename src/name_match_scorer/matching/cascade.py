from __future__ import annotations

"""
cascade.py

Does: Ordered special-case detectors for name pairs (exact, swapped initials,
      degenerate single letter, reordering, spacing, near-identical spelling,
      partial name, shared anchor token, per-position similarity).
      The first rule that fires decides the verdict; order is significant.
Returns: classify(names) → (rule_name, (percentage, remark)) or None.
Used by: matching.orchestrator.match_names before falling back to alignment scoring.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from name_match_scorer.general.fuzzy import (
    is_initial_match,
    round_half_up,
    similarity_ratio,
)
from name_match_scorer.general.token import canonical_token_key

from .types import (
    EXACT_MATCH,
    HIGH_SIMILARITY,
    LOW_MATCH,
    POSSIBLE_MATCH,
    PreparedNames,
    Verdict,
)

__all__ = [
    "CascadeRule",
    "CASCADE_RULES",
    "classify",
    "rule_exact",
    "rule_swapped_initials",
    "rule_single_letter",
    "rule_reordered",
    "rule_spacing_only",
    "rule_near_identical",
    "rule_partial_name",
    "rule_shared_first_token",
    "rule_shared_last_token",
    "rule_positional_similarity",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
NEAR_IDENTICAL_THRESHOLD = 0.88
NEAR_IDENTICAL_CAP = 99
POSITIONAL_TOKEN_THRESHOLD = 0.85

CascadeRule = Callable[[PreparedNames], Optional[Verdict]]


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class _SharedAnchor:
    token: str
    is_first: bool
    is_last: bool
    full_word_hits: int
    initial_hits: int


def _shared_anchor(names: PreparedNames) -> _SharedAnchor | None:
    """
    Does: Find the single token present on both sides (input needs ≥2 tokens) and
          count supporting evidence among the remaining tokens: exact full words and
          single-letter initials that prefix a word on the other side.
    Returns: _SharedAnchor, or None unless exactly one token is shared.
    """
    inp, given = names.input_tokens, names.given_tokens
    if len(inp) < 2:
        return None
    input_set = set(inp)
    shared = [g for g in given if g in input_set]
    if len(shared) != 1:
        return None
    token = shared[0]

    rest_input = [t for t in inp if t != token]
    rest_given = [t for t in given if t != token]
    # initial hits: a single letter on either side prefixing a word on the other, shared token excluded
    full_word_hits = 0
    initial_hits = 0
    for g in rest_given:
        for i in rest_input:
            if len(g) > 1 and g == i:
                full_word_hits += 1
            if is_initial_match(i, g):
                initial_hits += 1

    return _SharedAnchor(
        token=token,
        is_first=inp[0] == token or given[0] == token,
        is_last=inp[-1] == token or given[-1] == token,
        full_word_hits=full_word_hits,
        initial_hits=initial_hits,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Rules (in cascade order)
# ─────────────────────────────────────────────────────────────────────────────

def rule_exact(names: PreparedNames) -> Verdict | None:
    if names.input_joined == names.given_joined:
        return 100, EXACT_MATCH
    return None


def rule_swapped_initials(names: PreparedNames) -> Verdict | None:
    """Does: Same tokens in any order, initial clusters compared letter-sorted ("kr" ≡ "rk")."""
    if len(names.input_tokens) != len(names.given_tokens):
        return None
    if canonical_token_key(names.input_tokens) == canonical_token_key(names.given_tokens):
        return 99, HIGH_SIMILARITY
    return None


def rule_single_letter(names: PreparedNames) -> Verdict | None:
    """Does: A side that is just one letter carries too little signal."""
    for tokens in (names.input_tokens, names.given_tokens):
        if len(tokens) == 1 and len(tokens[0]) == 1:
            return 40, LOW_MATCH
    return None


def rule_reordered(names: PreparedNames) -> Verdict | None:
    if len(names.input_tokens) != len(names.given_tokens):
        return None
    if sorted(names.input_tokens) == sorted(names.given_tokens):
        return 99, HIGH_SIMILARITY
    return None


def rule_spacing_only(names: PreparedNames) -> Verdict | None:
    """Does: "mary ann" vs "maryann"."""
    if names.input_no_space == names.given_no_space:
        return 96, HIGH_SIMILARITY
    return None


def rule_near_identical(names: PreparedNames) -> Verdict | None:
    """Does: Whole-string spelling closeness on the space-free forms."""
    if names.merge_similarity >= NEAR_IDENTICAL_THRESHOLD:
        pct = min(NEAR_IDENTICAL_CAP, round_half_up(names.merge_similarity * 100))
        return pct, HIGH_SIMILARITY
    return None


def rule_partial_name(names: PreparedNames) -> Verdict | None:
    """Does: One-token name contained in a two-token name ("smith" vs "john smith")."""
    inp, given = names.input_tokens, names.given_tokens
    if sorted((len(inp), len(given))) != [1, 2]:
        return None
    shorter, longer = (inp, given) if len(inp) == 1 else (given, inp)
    if shorter[0] in longer:
        return 85, HIGH_SIMILARITY
    return None


def rule_shared_first_token(names: PreparedNames) -> Verdict | None:
    """Does: One shared leading token, escalated by support among the other tokens."""
    anchor = _shared_anchor(names)
    if anchor is None or not anchor.is_first or anchor.is_last:
        return None
    if anchor.full_word_hits >= 2:
        return 92, HIGH_SIMILARITY
    if anchor.initial_hits >= 2:
        return 88, HIGH_SIMILARITY
    if anchor.initial_hits == 1:
        return 82, HIGH_SIMILARITY
    return 75, POSSIBLE_MATCH


def rule_shared_last_token(names: PreparedNames) -> Verdict | None:
    """Does: One shared trailing token (usually a surname); initials lift it to possible."""
    anchor = _shared_anchor(names)
    if anchor is None or not anchor.is_last:
        return None
    if anchor.initial_hits >= 1:
        return 70, POSSIBLE_MATCH
    return 55, LOW_MATCH


def rule_positional_similarity(names: PreparedNames) -> Verdict | None:
    """Does: Same token count and every sorted pair is a close spelling."""
    inp, given = names.input_tokens, names.given_tokens
    if len(inp) != len(given):
        return None
    if all(
        similarity_ratio(a, b) >= POSITIONAL_TOKEN_THRESHOLD
        for a, b in zip(sorted(inp), sorted(given))
    ):
        return 92, HIGH_SIMILARITY
    return None


CASCADE_RULES: tuple[tuple[str, CascadeRule], ...] = (
    ("exact", rule_exact),
    ("swapped_initials", rule_swapped_initials),
    ("single_letter", rule_single_letter),
    ("reordered", rule_reordered),
    ("spacing_only", rule_spacing_only),
    ("near_identical", rule_near_identical),
    ("partial_name", rule_partial_name),
    ("shared_first_token", rule_shared_first_token),
    ("shared_last_token", rule_shared_last_token),
    ("positional_similarity", rule_positional_similarity),
)


def classify(names: PreparedNames) -> tuple[str, Verdict] | None:
    """
    Does: Run CASCADE_RULES in order and stop at the first verdict.
    Returns: (rule_name, verdict), or None when the fallback scorer must decide.
    """
    for rule_name, rule in CASCADE_RULES:
        verdict = rule(names)
        if verdict is not None:
            log.debug(
                "cascade rule %s fired: %r vs %r → %d %s",
                rule_name, names.input_joined, names.given_joined, *verdict,
            )
            return rule_name, verdict
    return None
