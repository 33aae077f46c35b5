"""Ports for reading state from the remote ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mintsync.domain.types import OnChainRecord


@runtime_checkable
class LedgerReader(Protocol):
    """Read-only access to ledger accounts."""

    async def get_account_info(self, address: str) -> bytes | None:
        """Return the raw account data, or ``None`` when the account does not exist."""
        ...

    async def get_accounts_by_creator(self, creator_address: str) -> list[OnChainRecord]:
        """Return metadata records whose first creator is ``creator_address``, in fetch order."""
        ...


__all__ = ["LedgerReader"]
