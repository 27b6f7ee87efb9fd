# name_match_scorer/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for name normalization and tokenization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic name cleanup (lowercase, period removal, whitespace
      collapsing, honorific stripping), dotted-initial merging, tokenization
      and order-preserving token deduplication.
Returns: normalize_name(), merge_initials(), tokenize(), dedupe_tokens().
Used by: The matching orchestrator before the cascade runs.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from name_match_scorer.general.vocab.honorifics import HONORIFICS

__all__ = [
    "normalize_name",
    "merge_initials",
    "tokenize",
    "dedupe_tokens",
]

_WHITESPACE_RE = re.compile(r"\s+")

# "j. k." / "j.k." → "jk" (first letter must start a word)
_DOTTED_INITIALS_RE = re.compile(r"\b([a-z])\.\s*([a-z])\.")
# a whole token that is a compact dotted pair ("m.s.")
_COMPACT_PAIR_RE = re.compile(r"[a-z]\.[a-z]\.")


def _is_honorific(word: str, keep_compact_pairs: bool) -> bool:
    if keep_compact_pairs and _COMPACT_PAIR_RE.fullmatch(word):
        return False
    return word.replace(".", "") in HONORIFICS


# ──────────────────────────────────────────────────────────────
# 1) NAME NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_name(name: str | None, *, merge_dotted_initials: bool = False) -> str:
    """
    Does: Normalize `name`:
          - lowercase, collapse whitespace runs to one space, trim
          - drop tokens that are a known honorific once periods are ignored ("Mr.", "dr")
          - optionally merge dotted initial pairs ("m. r." → "mr"); done after the
            honorific pass so merged initials are never mistaken for a title;
            with merging on, a compact pair like "m.s." is kept as initials too
          - drop every '.', re-collapse spacing
    Returns: Normalized name; "" for None, non-strings, or blank input.
    """
    if not isinstance(name, str) or not name:
        return ""
    s = _WHITESPACE_RE.sub(" ", name.lower()).strip()

    s = " ".join(w for w in s.split(" ") if not _is_honorific(w, merge_dotted_initials))

    if merge_dotted_initials:
        s = merge_initials(s)
    s = s.replace(".", "")
    return _WHITESPACE_RE.sub(" ", s).strip()


def merge_initials(name: str) -> str:
    """
    Does: Collapse two dotted single-letter initials ("x. y." or "x.y.") into "xy".
          One left-to-right pass over non-overlapping matches: "a. b. c." → "ab c.".
    Returns: String with merged initial pairs (expects lowercase input).
    """
    if not isinstance(name, str):
        return ""
    return _DOTTED_INITIALS_RE.sub(r"\1\2", name)


# ──────────────────────────────────────────────────────────────
# 2) TOKENIZATION
# ──────────────────────────────────────────────────────────────


def tokenize(name: str) -> list[str]:
    """Does: Split on single spaces and drop empty tokens."""
    if not isinstance(name, str):
        return []
    return [t for t in name.split(" ") if t]


def dedupe_tokens(tokens: Iterable[str]) -> list[str]:
    """
    Does: Keep the first occurrence of each token, preserving order.
    Returns: New list; later repeats are dropped.
    """
    seen: set[str] = set()
    result: list[str] = []
    for token in tokens:
        if token not in seen:
            seen.add(token)
            result.append(token)
    return result
