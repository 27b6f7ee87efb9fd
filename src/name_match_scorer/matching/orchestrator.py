# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry point comparing a submitted name with the name on record:
      cleanup (honorifics, dotted initials, spacing, duplicates), the special-case
      cascade, then the alignment fallback.
Returns:
  - match_names(input_name, given_name) -> MatchResult(input_name, given_name, percentage, remark)
  - prepare_names(input_name, given_name) -> PreparedNames
Used by: Identity/KYC verification flows, the CLI demo, and tests.
"""

import logging
from typing import Any

from name_match_scorer.general.fuzzy import edit_distance, similarity_ratio
from name_match_scorer.general.token import dedupe_tokens, normalize_name, tokenize

from .cascade import classify
from .fallback import fallback_score
from .types import LOW_MATCH, MatchResult, PreparedNames

__all__ = ["match_names", "prepare_names"]

logger = logging.getLogger(__name__)


def _clean_tokens(name: Any) -> tuple[str, ...]:
    """Does: normalize (with dotted-initial merging) → tokenize → dedupe."""
    text = normalize_name(name, merge_dotted_initials=True)
    return tuple(dedupe_tokens(tokenize(text)))


def _is_blank(name: Any) -> bool:
    return not isinstance(name, str) or not name.strip()


def prepare_names(input_name: Any, given_name: Any) -> PreparedNames:
    """
    Does: Build the cleaned token view of both names plus the whole-string
          (space-free) edit distance and similarity used by several rules.
    Returns: PreparedNames.
    """
    input_tokens = _clean_tokens(input_name)
    given_tokens = _clean_tokens(given_name)
    input_no_space = "".join(input_tokens)
    given_no_space = "".join(given_tokens)
    return PreparedNames(
        input_tokens=input_tokens,
        given_tokens=given_tokens,
        merge_distance=edit_distance(input_no_space, given_no_space),
        merge_similarity=similarity_ratio(input_no_space, given_no_space),
    )


def match_names(input_name: Any, given_name: Any, *, debug: bool = False) -> MatchResult:
    """
    Does: Score how likely `input_name` and `given_name` denote the same person.
          Never raises on odd input: None, non-strings and blanks give 0 / "Low Match".
    Returns: MatchResult carrying the caller's original strings ("" for non-strings).
    """
    original_input = input_name if isinstance(input_name, str) else ""
    original_given = given_name if isinstance(given_name, str) else ""

    if _is_blank(input_name) or _is_blank(given_name):
        if debug:
            logger.info("blank side: %r vs %r → 0 %s", input_name, given_name, LOW_MATCH)
        return MatchResult(original_input, original_given, 0, LOW_MATCH)

    names = prepare_names(input_name, given_name)
    if debug:
        logger.info(
            "prepared: %s vs %s (merge distance=%d, similarity=%.3f)",
            names.input_tokens, names.given_tokens, names.merge_distance, names.merge_similarity,
        )

    outcome = classify(names)
    if outcome is not None:
        rule_name, (percentage, remark) = outcome
    else:
        rule_name = "fallback"
        percentage, remark = fallback_score(names)

    if debug:
        logger.info("%s → %d %s", rule_name, percentage, remark)
    logger.debug("match_names(%r, %r) → %s %d %s", input_name, given_name, rule_name, percentage, remark)

    return MatchResult(original_input, original_given, percentage, remark)
