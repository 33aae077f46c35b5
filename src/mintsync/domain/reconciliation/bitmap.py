"""Decode the claimed-items bitmap embedded in a candy machine account.

The account stores its config lines followed by a packed bitmap with one bit
per item. Bits are read most-significant first; a set bit means the item has
been minted.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from mintsync.domain.errors import AccountNotFoundError, MalformedAccountError

if TYPE_CHECKING:
    from mintsync.domain.types import PendingSet

log = getLogger(__name__)

CONFIG_ARRAY_START_V2: Final[int] = 713
CONFIG_LINE_SIZE_V2: Final[int] = 4 + 32 + 4 + 200

_U32_SIZE: Final[int] = 4
_HIGH_BIT: Final[int] = 1 << 7


@dataclass(slots=True, frozen=True)
class BitmapLayout:
    """Header layout of a versioned candy machine account."""

    config_array_start: int = CONFIG_ARRAY_START_V2
    config_line_size: int = CONFIG_LINE_SIZE_V2

    def bitmap_offset(self, item_count: int) -> int:
        return (
            self.config_array_start
            + _U32_SIZE
            + self.config_line_size * item_count
            + _U32_SIZE
            + item_count // 8
            + _U32_SIZE
        )


def bitmap_length(item_count: int) -> int:
    return (item_count + 7) // 8


def decode_pending_indices(
    blob: bytes | None,
    item_count: int,
    *,
    layout: BitmapLayout | None = None,
    address: str = "<unknown>",
) -> PendingSet:
    """Return the indices in ``range(item_count)`` whose bitmap bit is clear."""

    if item_count < 0:
        raise ValueError(f"Item count must be non-negative, got {item_count}")
    if blob is None:
        raise AccountNotFoundError(address)

    effective_layout = layout or BitmapLayout()
    offset = effective_layout.bitmap_offset(item_count)
    length = bitmap_length(item_count)
    if len(blob) < offset + length:
        msg = (
            f"Account {address} data is {len(blob)} bytes, "
            f"expected at least {offset + length} for {item_count} items"
        )
        raise MalformedAccountError(msg)

    bitmap = blob[offset : offset + length]
    pending: list[int] = []
    for position in range(item_count):
        byte_index, bit_index = divmod(position, 8)
        if not bitmap[byte_index] & (_HIGH_BIT >> bit_index):
            log.debug("Unminted token index %s", position)
            pending.append(position)
    return tuple(pending)
