from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from mintsync.adapters.cache_files import load_cache_snapshot, save_cache_snapshot
from mintsync.domain.errors import CacheFileError

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_and_save_preserve_unknown_fields(tmp_path: Path) -> None:
    payload = {
        "program": {"uuid": "abc", "candyMachine": "cm"},
        "authority": "auth",
        "items": {
            "0": {"link": "a", "name": "One", "onChain": True},
            "1": {"link": "b", "name": "Two", "onChain": True, "imageLink": "img"},
        },
    }
    path = _write(tmp_path / "cache.json", payload)

    snapshot = load_cache_snapshot(path)
    snapshot.item(0).link = "refreshed"
    save_cache_snapshot(snapshot, path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["program"] == payload["program"]
    assert saved["authority"] == "auth"
    assert saved["items"]["0"] == {"link": "refreshed", "name": "One", "onChain": True}
    assert saved["items"]["1"]["imageLink"] == "img"


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(CacheFileError, match="Cannot read"):
        load_cache_snapshot(tmp_path / "missing.json")


def test_load_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CacheFileError, match="Invalid cache file"):
        load_cache_snapshot(path)


def test_load_sparse_items_raises(tmp_path: Path) -> None:
    path = _write(tmp_path / "cache.json", {"items": {"0": {"link": "a"}, "5": {"link": "b"}}})

    with pytest.raises(CacheFileError, match="dense"):
        load_cache_snapshot(path)


def test_save_writes_indented_json_with_trailing_newline(tmp_path: Path) -> None:
    path = _write(tmp_path / "cache.json", {"items": {"0": {"link": "a", "onChain": False}}})

    save_cache_snapshot(load_cache_snapshot(path), path)

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "items": {' in text
    assert json.loads(text) == {"items": {"0": {"link": "a", "onChain": False}}}
