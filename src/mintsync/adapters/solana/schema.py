"""Pydantic models describing the Solana JSON-RPC payloads."""

from __future__ import annotations

import base64
import binascii
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SolanaBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RpcErrorPayload(SolanaBaseModel):
    code: int
    message: str


class ErrorResponse(SolanaBaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    error: RpcErrorPayload


class AccountPayload(SolanaBaseModel):
    data: bytes
    owner: str | None = None
    lamports: int | None = None
    executable: bool = False

    @field_validator("data", mode="before")
    @classmethod
    def _decode_base64(cls, value: object) -> object:
        # Accounts are requested with encoding=base64: ["<payload>", "base64"].
        if isinstance(value, list | tuple) and len(value) == 2:  # noqa: PLR2004
            payload, encoding = value
            if encoding != "base64" or not isinstance(payload, str):
                raise ValueError(f"Unsupported account data encoding: {encoding!r}")
            try:
                return base64.b64decode(payload, validate=True)
            except binascii.Error as exc:
                raise ValueError("Account data is not valid base64") from exc
        return value


class RpcContext(SolanaBaseModel):
    slot: int


class AccountInfoResult(SolanaBaseModel):
    context: RpcContext | None = None
    value: AccountPayload | None = None


class AccountInfoResponse(SolanaBaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    result: AccountInfoResult


class KeyedAccountPayload(SolanaBaseModel):
    pubkey: str
    account: AccountPayload


class ProgramAccountsResponse(SolanaBaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    result: list[KeyedAccountPayload] = Field(default_factory=list[KeyedAccountPayload])
