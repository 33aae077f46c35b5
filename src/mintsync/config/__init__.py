"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_value
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .solana import (
    CANDY_MACHINE_PROGRAM_V2_ID,
    DEFAULT_SOLANA_RPC_URL,
    TOKEN_METADATA_PROGRAM_ID,
    SolanaConfig,
    get_solana_config,
)
from .sync import SyncConfig, get_sync_config

__all__ = [
    "CANDY_MACHINE_PROGRAM_V2_ID",
    "DEFAULT_SOLANA_RPC_URL",
    "TOKEN_METADATA_PROGRAM_ID",
    "ConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SolanaConfig",
    "SyncConfig",
    "configure_logging",
    "get_solana_config",
    "get_sync_config",
    "optional_env_value",
]
