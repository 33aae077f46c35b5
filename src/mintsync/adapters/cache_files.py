"""Load and store cache snapshots as JSON files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from mintsync.domain.cache import CacheSnapshot
from mintsync.domain.errors import CacheFileError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def load_cache_snapshot(path: Path) -> CacheSnapshot:
    """Read and validate the cache snapshot stored at ``path``."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CacheFileError(f"Cannot read cache file {path}: {exc}") from exc

    try:
        snapshot = CacheSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise CacheFileError(f"Invalid cache file {path}: {exc}") from exc

    log.debug("Loaded %s items from %s", snapshot.item_count, path)
    return snapshot


def save_cache_snapshot(snapshot: CacheSnapshot, path: Path) -> None:
    payload = snapshot.model_dump_json(indent=2, by_alias=True, exclude_unset=True)
    path.write_text(payload + "\n", encoding="utf-8")
    log.info("Wrote %s items to %s", snapshot.item_count, path)
