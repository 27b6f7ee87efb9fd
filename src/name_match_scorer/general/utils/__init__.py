# name_match_scorer/general/utils/__init__.py
"""

Does: Provide vocabulary loading from the package data directory.
Returns: Public API via load_config and its typed errors.
Used by: Honorific vocabulary, CLI demo, and tests.
"""

from __future__ import annotations

from .load_config import (
    DATA_DIR_ENV,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    load_config,
)

__all__ = [
    "DATA_DIR_ENV",
    "load_config",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
