"""Public interface for the Solana adapter."""

from __future__ import annotations

from .client import SolanaRpcError, SolanaRpcReader
from .layout import FIRST_CREATOR_OFFSET, decode_metadata, derive_candy_machine_creator

__all__ = [
    "FIRST_CREATOR_OFFSET",
    "SolanaRpcError",
    "SolanaRpcReader",
    "decode_metadata",
    "derive_candy_machine_creator",
]
