"""Solana RPC configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SOLANA_RPC_URL: Final[str] = "https://api.mainnet-beta.solana.com"
SOLANA_TIMEOUT_SECONDS: Final[float] = 30.0

TOKEN_METADATA_PROGRAM_ID: Final[str] = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
CANDY_MACHINE_PROGRAM_V2_ID: Final[str] = "cndy3Z4yapfJBmL3ShUp5exZKqR3z33thTzeNMm2gRZ"


@dataclass(frozen=True, slots=True)
class SolanaConfig:
    """Holds Solana JSON-RPC endpoint and program configuration."""

    rpc_url: str
    resilience: ResilienceConfig
    metadata_program_id: str = TOKEN_METADATA_PROGRAM_ID
    candy_machine_program_id: str = CANDY_MACHINE_PROGRAM_V2_ID


def get_solana_config(*, resilience: ResilienceConfig | None = None) -> SolanaConfig:
    env_url = os.getenv("SOLANA_RPC_URL")
    rpc_url = env_url.strip() if env_url and env_url.strip() else DEFAULT_SOLANA_RPC_URL
    return SolanaConfig(
        rpc_url=rpc_url,
        resilience=resilience
        or ResilienceConfig(
            name="solana",
            base_url=rpc_url,
            timeout_seconds=SOLANA_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={"Content-Type": "application/json"},
        ),
    )
