# src/name_match_scorer/general/utils/load_config.py

"""Load list-shaped JSON vocabularies from the package <data/> directory.

`load_config(file)` reads <data>/<file>.json (a JSON list of scalars) and
returns it as a frozenset[str]. The data dir is the explicit `base_dir`, else
$NAME_MATCH_DATA_DIR, else the first 'data' directory found walking up from
this module (the package ships `name_match_scorer/data/`).

Used by the honorific vocabulary, once at import time.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

__all__ = [
    "DATA_DIR_ENV",
    "load_config",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "NAME_MATCH_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not a flat list of scalars."""


log = logging.getLogger(__name__)


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the nearest existing 'data' directory above `start`, or raise."""
    start = (start or Path(__file__)).resolve()
    tried = [(p / "data") for p in start.parents]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried))
    )


def _resolve_data_dir(base_dir: Path | str | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return _default_data_dir()


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | str | None = None,
    encoding: str = "utf-8",
) -> frozenset[str]:
    """Load <data>/<file>.json (list of scalars) as a frozenset of strings."""
    data_dir = _resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        with path.open("r", encoding=encoding) as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        # JSONDecodeError and bad encodings
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigTypeError(f"{path.name}: expected a JSON list, got {type(data).__name__}")
    bad = [x for x in data if x is not None and not isinstance(x, (str, int, float, bool))]
    if bad:
        preview = ", ".join(type(x).__name__ for x in bad[:3])
        raise ConfigTypeError(f"{path.name}: list must contain only scalars (first bad types: {preview})")

    log.debug("Loaded %s (%d entries)", path.name, len(data))
    return frozenset(map(str, data))
