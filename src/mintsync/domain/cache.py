"""Pydantic schema for off-chain cache snapshots.

A snapshot maps stringified item indices (dense from ``"0"``) to item records.
Fields the reconciliation core does not look at are kept as extras so that a
snapshot can be written back without losing data.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import CacheMismatchError


class CacheBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, validate_assignment=True)


class CacheCreator(CacheBaseModel):
    address: str
    share: int
    verified: bool = False


class ItemRecord(CacheBaseModel):
    link: str
    name: str | None = None
    on_chain: bool | None = Field(default=None, alias="onChain")
    creators: list[CacheCreator] | None = None


class CacheSnapshot(CacheBaseModel):
    items: dict[str, ItemRecord]

    @field_validator("items")
    @classmethod
    def _require_dense_indices(cls, value: dict[str, ItemRecord]) -> dict[str, ItemRecord]:
        expected = {str(index) for index in range(len(value))}
        unexpected = sorted(set(value) - expected)
        if unexpected:
            msg = f"Item keys must be dense non-negative indices from 0, got {unexpected[:5]}"
            raise ValueError(msg)
        return value

    @property
    def item_count(self) -> int:
        return len(self.items)

    def item(self, index: int, *, snapshot: str = "current") -> ItemRecord:
        try:
            return self.items[str(index)]
        except KeyError:
            raise CacheMismatchError(index, snapshot=snapshot) from None
