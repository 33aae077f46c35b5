"""Reconciliation defaults for batch submission and daemon mode."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_value
from .errors import ConfigurationError

DEFAULT_BATCH_SIZE = 10
DEFAULT_PACING_SECONDS = 0.5
DEFAULT_DAEMON_INTERVAL_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class SyncConfig:
    batch_size: int = DEFAULT_BATCH_SIZE
    pacing_seconds: float = DEFAULT_PACING_SECONDS
    daemon_interval_seconds: float = DEFAULT_DAEMON_INTERVAL_SECONDS


def get_sync_config() -> SyncConfig:
    batch_size = optional_env_value("MINTSYNC_BATCH_SIZE", DEFAULT_BATCH_SIZE, int)
    pacing = optional_env_value("MINTSYNC_PACING_SECONDS", DEFAULT_PACING_SECONDS, float)
    interval = optional_env_value(
        "MINTSYNC_DAEMON_INTERVAL", DEFAULT_DAEMON_INTERVAL_SECONDS, float
    )
    if batch_size <= 0:
        raise ConfigurationError("MINTSYNC_BATCH_SIZE must be a positive integer")
    if pacing < 0 or interval < 0:
        raise ConfigurationError("Pacing and daemon interval must be non-negative")
    return SyncConfig(
        batch_size=batch_size,
        pacing_seconds=pacing,
        daemon_interval_seconds=interval,
    )
