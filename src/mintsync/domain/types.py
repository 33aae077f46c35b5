"""Ledger-side types shared by the reconciliation stages and adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

LinkDiff: TypeAlias = dict[str, str]
"""Old content link -> new content link for claimed items whose link changed."""

PendingSet: TypeAlias = tuple[int, ...]
"""Ordered indices of items that have not been claimed on-chain yet."""


@dataclass(slots=True, frozen=True)
class Creator:
    address: str | bytes
    verified: bool
    share: int


@dataclass(slots=True, frozen=True)
class MetadataData:
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: tuple[Creator, ...] | None = None


@dataclass(slots=True, frozen=True)
class Metadata:
    """Decoded token-metadata account."""

    key: int
    update_authority: str
    mint: str
    data: MetadataData
    primary_sale_happened: bool = False
    is_mutable: bool = True


@dataclass(slots=True, frozen=True)
class OnChainRecord:
    """A metadata account fetched for a creator, paired with its address."""

    metadata: Metadata
    address: str

    @property
    def uri(self) -> str:
        return self.metadata.data.uri


@dataclass(slots=True, frozen=True)
class MetadataUpdate:
    """Prepared update-metadata arguments for one on-chain record."""

    address: str
    data: MetadataData
    update_authority: str | None = None
    primary_sale_happened: bool | None = None


@dataclass(slots=True)
class DiffResult:
    """Outcome of comparing the current and candidate cache snapshots."""

    link_diff: LinkDiff = field(default_factory=dict[str, str])
    refreshed: list[int] = field(default_factory=list[int])
    changed: list[int] = field(default_factory=list[int])
