from __future__ import annotations

import asyncio
import base64
import json
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from mintsync.adapters.http_resilience import ResilienceConfig, ResilientClient
from mintsync.adapters.solana import FIRST_CREATOR_OFFSET, SolanaRpcError, SolanaRpcReader
from mintsync.config import SolanaConfig, TOKEN_METADATA_PROGRAM_ID
from tests.helpers.ledger import address, encode_metadata_account, pubkey

RPC_URL = "https://rpc.test"


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


def _reader(handler: Callable[[httpx.Request], httpx.Response]) -> SolanaRpcReader:
    config = SolanaConfig(
        rpc_url=RPC_URL,
        resilience=ResilienceConfig(name="solana-test", base_url=RPC_URL),
    )
    return SolanaRpcReader(config=config, client_factory=_make_client_factory(handler))


def _b64(data: bytes) -> list[str]:
    return [base64.b64encode(data).decode("ascii"), "base64"]


def test_get_account_info_returns_decoded_bytes() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        seen.append(body)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "result": {
                    "context": {"slot": 10},
                    "value": {"data": _b64(b"\x01\x02\x03"), "owner": address(5), "lamports": 1},
                },
            },
        )

    data = asyncio.run(_reader(handler).get_account_info(address(9)))

    assert data == b"\x01\x02\x03"
    assert seen[0]["method"] == "getAccountInfo"
    assert seen[0]["params"] == [address(9), {"encoding": "base64"}]


def test_get_account_info_missing_account_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 1}, "value": None}},
        )

    assert asyncio.run(_reader(handler).get_account_info(address(9))) is None


def test_get_accounts_by_creator_filters_on_first_creator() -> None:
    seen: list[dict[str, object]] = []
    accounts = [
        (address(60), encode_metadata_account(uri="one", creators=[(pubkey(8), True, 100)])),
        (address(61), encode_metadata_account(uri="two", creators=[(pubkey(8), True, 100)])),
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        seen.append(body)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "result": [
                    {"pubkey": key, "account": {"data": _b64(data)}} for key, data in accounts
                ],
            },
        )

    records = asyncio.run(_reader(handler).get_accounts_by_creator(address(8)))

    assert [(record.address, record.uri) for record in records] == [
        (address(60), "one"),
        (address(61), "two"),
    ]
    params = seen[0]["params"]
    assert isinstance(params, list)
    assert params[0] == TOKEN_METADATA_PROGRAM_ID
    assert params[1]["filters"] == [
        {"memcmp": {"offset": FIRST_CREATOR_OFFSET, "bytes": address(8)}}
    ]


def test_rpc_error_payload_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "bad params"}},
        )

    with pytest.raises(SolanaRpcError, match="bad params") as exc:
        asyncio.run(_reader(handler).get_account_info(address(9)))

    assert exc.value.code == -32602


def test_unexpected_payload_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1})

    with pytest.raises(SolanaRpcError, match="Unexpected"):
        asyncio.run(_reader(handler).get_accounts_by_creator(address(8)))


def test_http_error_status_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(403, json={"message": "forbidden"})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_reader(handler).get_account_info(address(9)))
