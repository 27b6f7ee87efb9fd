# name_match_scorer/general/token/__init__.py
"""
token.
=====

Does: Provide name normalization, tokenization and initial-cluster utilities.
Exports: normalize_name, merge_initials, tokenize, dedupe_tokens,
         is_initial_token, canonical_initials, canonical_token_key
Used by: The matching orchestrator and cascade rules.
"""

from __future__ import annotations

from .initials import (
    canonical_initials,
    canonical_token_key,
    is_initial_token,
)
from .normalize import (
    dedupe_tokens,
    merge_initials,
    normalize_name,
    tokenize,
)

__all__ = [
    # normalize
    "normalize_name",
    "merge_initials",
    "tokenize",
    "dedupe_tokens",
    # initials
    "is_initial_token",
    "canonical_initials",
    "canonical_token_key",
]
