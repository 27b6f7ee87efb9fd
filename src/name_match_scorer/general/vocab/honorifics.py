"""
honorifics.py.
=============

Does: Load the honorific/title tokens stripped from names before comparison
(`data/honorifics.json`), lowercased and period-free.
Returns: HONORIFICS → frozenset[str] loaded once at import; get_honorifics() to reload.
"""

from __future__ import annotations

import logging
from pathlib import Path

from name_match_scorer.general.utils.load_config import load_config

__all__ = ["HONORIFICS_FILE", "HONORIFICS", "get_honorifics"]

log = logging.getLogger(__name__)

HONORIFICS_FILE = "honorifics"


def get_honorifics(base_dir: Path | str | None = None) -> frozenset[str]:
    """Does: Read the honorific tokens from disk (lowercase, period-free)."""
    raw = load_config(HONORIFICS_FILE, base_dir=base_dir)
    return frozenset(t.lower().replace(".", "").strip() for t in raw if t.strip())


# ── Config snapshot ──────────────────────────────────────────────────────────
HONORIFICS: frozenset[str] = get_honorifics()
