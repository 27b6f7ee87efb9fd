# tests/test_general_utils.py
"""Tests for load_config and the honorific vocabulary it feeds."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

from name_match_scorer.general.vocab import HONORIFICS, get_honorifics

# the package re-exports the load_config *function*; fetch the module itself
LC = import_module("name_match_scorer.general.utils.load_config")

PACKAGED = frozenset({"mr", "mrs", "ms", "miss", "shri", "smt", "dr"})


def _write(path, payload) -> None:
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")


# ─────────────────────────────────────────────────────────────────────────────
# load_config
# ─────────────────────────────────────────────────────────────────────────────

def test_load_config_coerces_scalars(tmp_path):
    _write(tmp_path / "words.json", ["a", 1, True])
    assert LC.load_config("words", base_dir=tmp_path) == frozenset({"a", "1", "True"})
    assert LC.load_config("words.json", base_dir=tmp_path) == frozenset({"a", "1", "True"})


def test_load_config_rejects_non_list(tmp_path):
    _write(tmp_path / "words.json", {"a": 1})
    with pytest.raises(LC.ConfigTypeError):
        LC.load_config("words", base_dir=tmp_path)


def test_load_config_rejects_nested_values(tmp_path):
    _write(tmp_path / "words.json", ["a", ["b"]])
    with pytest.raises(LC.ConfigTypeError):
        LC.load_config("words", base_dir=tmp_path)


def test_invalid_json_raises_parse_error(tmp_path):
    _write(tmp_path / "broken.json", "[1, 2,")
    with pytest.raises(LC.ConfigParseError):
        LC.load_config("broken", base_dir=tmp_path)


def test_missing_file_and_escape_attempts(tmp_path):
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config("nope", base_dir=tmp_path)
    _write(tmp_path.parent / "outside.json", [])
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config("../outside", base_dir=tmp_path)


def test_env_override_and_generic_data_dir_ignored(tmp_path, monkeypatch):
    _write(tmp_path / "honorifics.json", ["Sir"])
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert get_honorifics() == PACKAGED

    monkeypatch.setenv(LC.DATA_DIR_ENV, str(tmp_path))
    assert get_honorifics() == frozenset({"sir"})


def test_missing_data_dir_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(LC.DATA_DIR_ENV, str(tmp_path / "absent"))
    with pytest.raises(LC.ConfigFileNotFound):
        get_honorifics()


# ─────────────────────────────────────────────────────────────────────────────
# honorifics
# ─────────────────────────────────────────────────────────────────────────────

def test_packaged_honorifics():
    assert HONORIFICS == PACKAGED
    assert get_honorifics() == PACKAGED


def test_get_honorifics_from_base_dir(tmp_path):
    _write(tmp_path / "honorifics.json", ["Sir", "Mr.", " "])
    assert get_honorifics(base_dir=tmp_path) == frozenset({"sir", "mr"})
