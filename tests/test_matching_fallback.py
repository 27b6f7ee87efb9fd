# tests/test_matching_fallback.py
from __future__ import annotations

import pytest

from name_match_scorer.matching import fallback as F
from name_match_scorer.matching import prepare_names
from name_match_scorer.matching.types import HIGH_SIMILARITY, LOW_MATCH, PreparedNames


# ─────────────────────────────────────────────────────────────────────────────
# align_tokens
# ─────────────────────────────────────────────────────────────────────────────

def test_align_tokens_prefers_best_unused_token():
    assert F.align_tokens(["jon", "john"], ["john"]) == pytest.approx(1.0)


def test_align_tokens_initial_bonus():
    # "j" vs "john": plain similarity 0.25, initial prefix lifts it to 0.9
    assert F.align_tokens(["j", "smith"], ["john", "smith"]) == pytest.approx(1.9)


def test_align_tokens_is_greedy_in_given_order():
    # "anna" takes the only input token before the exact "ann" gets a chance
    assert F.align_tokens(["ann"], ["anna", "ann"]) == pytest.approx(0.75)
    assert F.align_tokens(["ann"], ["ann", "anna"]) == pytest.approx(1.0)


def test_align_tokens_zero_similarity_consumes_nothing():
    # "rajesh" shares no alignable letters with "kumar", so "kumar" stays free
    assert F.align_tokens(["kumar"], ["rajesh", "kumar", "sharma"]) == pytest.approx(1.0)


# ─────────────────────────────────────────────────────────────────────────────
# penalty_for
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text, distance, expected",
    [
        ("kumar", 12, 48),
        ("abcdef", 3, 12),
        ("abcdefg", 3, 6),
        ("abcdefghijkl", 3, 6),
        ("abcdefghijklm", 3, 3),
    ],
)
def test_penalty_tiers(text, distance, expected):
    assert F.penalty_for(text, distance) == expected


# ─────────────────────────────────────────────────────────────────────────────
# fallback_score
# ─────────────────────────────────────────────────────────────────────────────

def test_fallback_score_clamps_to_99():
    # matched 0.75 + 0.8 → (0.775 * 0.7 + 0.775 * 0.6) * 100 ≈ 101, no penalty
    assert F.fallback_score(prepare_names("Jon Smyth", "John Smith")) == (99, HIGH_SIMILARITY)


def test_fallback_score_applies_short_name_penalty():
    # 90 from alignment, whole-string distance 12 on a 5-letter input → −48
    assert F.fallback_score(prepare_names("Kumar", "Rajesh Kumar Sharma")) == (42, LOW_MATCH)


def test_fallback_score_never_negative():
    names = PreparedNames(("zz",), ("qqqqqq", "wwwwww"), 12, 0.0)
    assert F.fallback_score(names) == (0, LOW_MATCH)


def test_fallback_score_handles_empty_tokens():
    assert F.fallback_score(PreparedNames((), ("john",), 4, 0.0)) == (0, LOW_MATCH)
