"""
vocab.
=====

Does: Expose the small configurable vocabularies used by name normalization.
"""

from .honorifics import HONORIFICS, get_honorifics

__all__ = ["HONORIFICS", "get_honorifics"]
