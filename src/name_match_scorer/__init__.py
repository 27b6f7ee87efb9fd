"""
name_match_scorer
=================

Does: Root package initializer for the personal-name match scorer.
Returns: Exposes match_names and MatchResult; subpackages `matching` and `general`.
Used by: All higher-level imports starting from `name_match_scorer.*`.
"""

from .matching import MatchResult, match_names

__all__: list[str] = ["match_names", "MatchResult"]
__docformat__ = "google"
