"""JSON-RPC client for reading Solana accounts."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from mintsync.adapters.http_resilience import ResilienceConfig, ResilientClient
from mintsync.config.solana import SolanaConfig, get_solana_config
from mintsync.domain.types import OnChainRecord

from .layout import FIRST_CREATOR_OFFSET, decode_metadata
from .schema import AccountInfoResponse, ErrorResponse, ProgramAccountsResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from mintsync.domain.ports import LedgerReader

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class SolanaRpcError(RuntimeError):
    """Raised when the RPC node returns a JSON-RPC error object."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass(slots=True)
class SolanaRpcReader:
    """Ledger reader backed by a Solana JSON-RPC endpoint.

    A client is opened per call; the rate limiter therefore bounds requests
    within one call, not across calls.
    """

    config: SolanaConfig = field(default_factory=get_solana_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _ids: itertools.count[int] = field(default_factory=lambda: itertools.count(1))

    async def get_account_info(self, address: str) -> bytes | None:
        payload = await self._call(
            "getAccountInfo",
            [address, {"encoding": "base64"}],
        )
        response = AccountInfoResponse.model_validate(payload)
        if response.result.value is None:
            log.warning("Account %s not found", address)
            return None
        return response.result.value.data

    async def get_accounts_by_creator(self, creator_address: str) -> list[OnChainRecord]:
        payload = await self._call(
            "getProgramAccounts",
            [
                self.config.metadata_program_id,
                {
                    "encoding": "base64",
                    "filters": [
                        {"memcmp": {"offset": FIRST_CREATOR_OFFSET, "bytes": creator_address}}
                    ],
                },
            ],
        )
        response = ProgramAccountsResponse.model_validate(payload)
        records = [
            OnChainRecord(metadata=decode_metadata(keyed.account.data), address=keyed.pubkey)
            for keyed in response.result
        ]
        log.debug("Fetched %s metadata accounts for creator %s", len(records), creator_address)
        return records

    async def _call(self, method: str, params: list[object]) -> dict[str, object]:
        body = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        async with self.client_factory(self.config.resilience) as client:
            response = await client.post(self.config.rpc_url, json=body)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise SolanaRpcError(f"Unexpected {method} response payload")
        if "error" in payload:
            error_payload = ErrorResponse.model_validate(payload).error
            log.error(f"Solana RPC error {error_payload.code}: {error_payload.message}")
            raise SolanaRpcError(error_payload.message, code=error_payload.code) from None
        if "result" not in payload:
            raise SolanaRpcError(f"Unexpected {method} response payload")
        return payload


if TYPE_CHECKING:
    _reader_check: LedgerReader = SolanaRpcReader()
