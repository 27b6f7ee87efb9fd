# name_match_scorer/matching/types.py
from __future__ import annotations

"""
types.py.

Does: Define the result record returned to callers, the per-call prepared-names
snapshot shared by cascade and fallback, and the remark labels and bands.
"""

from dataclasses import dataclass
from typing import Literal

__all__ = [
    "EXACT_MATCH",
    "HIGH_SIMILARITY",
    "POSSIBLE_MATCH",
    "LOW_MATCH",
    "REMARKS",
    "Remark",
    "Verdict",
    "MatchResult",
    "PreparedNames",
    "remark_for_score",
]

__docformat__ = "google"

Remark = Literal["Exact Match", "High Similarity", "Possible Match", "Low Match"]

EXACT_MATCH: Remark = "Exact Match"
HIGH_SIMILARITY: Remark = "High Similarity"
POSSIBLE_MATCH: Remark = "Possible Match"
LOW_MATCH: Remark = "Low Match"
REMARKS: tuple[Remark, ...] = (EXACT_MATCH, HIGH_SIMILARITY, POSSIBLE_MATCH, LOW_MATCH)

# ── Remark bands ─────────────────────────────────────────────────────────────
HIGH_SIMILARITY_MIN = 80
POSSIBLE_MATCH_MIN = 70

# (percentage, remark) produced by a cascade rule or the fallback scorer
Verdict = tuple[int, Remark]


def remark_for_score(score: int) -> Remark:
    """Does: Map a percentage to its band: 100 exact, ≥80 high, ≥70 possible, else low."""
    if score == 100:
        return EXACT_MATCH
    if score >= HIGH_SIMILARITY_MIN:
        return HIGH_SIMILARITY
    if score >= POSSIBLE_MATCH_MIN:
        return POSSIBLE_MATCH
    return LOW_MATCH


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one comparison; names are the caller's originals, never cleaned."""

    input_name: str
    given_name: str
    percentage: int
    remark: Remark

    def as_dict(self) -> dict[str, str | int]:
        """Does: Serialize with the public field names (inputName, givenName, ...)."""
        return {
            "inputName": self.input_name,
            "givenName": self.given_name,
            "percentage": self.percentage,
            "remark": self.remark,
        }


@dataclass(frozen=True)
class PreparedNames:
    """Normalized, initial-merged, deduplicated view of both names."""

    input_tokens: tuple[str, ...]
    given_tokens: tuple[str, ...]
    merge_distance: int
    merge_similarity: float

    @property
    def input_joined(self) -> str:
        return " ".join(self.input_tokens)

    @property
    def given_joined(self) -> str:
        return " ".join(self.given_tokens)

    @property
    def input_no_space(self) -> str:
        return "".join(self.input_tokens)

    @property
    def given_no_space(self) -> str:
        return "".join(self.given_tokens)
