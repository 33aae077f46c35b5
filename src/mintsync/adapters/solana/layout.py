"""Binary layout of token-metadata accounts and candy machine addresses."""

from __future__ import annotations

import struct
from typing import Final

from solders.pubkey import Pubkey

from mintsync.domain.errors import MalformedAccountError
from mintsync.domain.types import Creator, Metadata, MetadataData

MAX_NAME_LENGTH: Final[int] = 32
MAX_SYMBOL_LENGTH: Final[int] = 10
MAX_URI_LENGTH: Final[int] = 200
MAX_CREATOR_LEN: Final[int] = 32 + 1 + 1

# key, update authority, mint, padded name/uri/symbol, seller fee, creators option tag, vec length
FIRST_CREATOR_OFFSET: Final[int] = (
    1
    + 32
    + 32
    + 4
    + MAX_NAME_LENGTH
    + 4
    + MAX_URI_LENGTH
    + 4
    + MAX_SYMBOL_LENGTH
    + 2
    + 1
    + 4
)

CANDY_MACHINE_SEED: Final[bytes] = b"candy_machine"


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            msg = f"Metadata account truncated at byte {self._offset} (wanted {size} more)"
            raise MalformedAccountError(msg)
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u16(self) -> int:
        return struct.unpack("<H", self.take(2))[0]

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]

    def pubkey(self) -> str:
        return str(Pubkey.from_bytes(self.take(32)))

    def string(self) -> str:
        raw = self.take(self.u32())
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedAccountError("Metadata string is not valid UTF-8") from exc
        return text.replace("\x00", "")


def decode_metadata(data: bytes) -> Metadata:
    """Decode the leading fields of a token-metadata account."""

    reader = _Reader(data)
    key = reader.u8()
    update_authority = reader.pubkey()
    mint = reader.pubkey()
    name = reader.string()
    symbol = reader.string()
    uri = reader.string()
    seller_fee_basis_points = reader.u16()

    creators: tuple[Creator, ...] | None = None
    if reader.u8():
        count = reader.u32()
        creators = tuple(
            Creator(address=reader.pubkey(), verified=bool(reader.u8()), share=reader.u8())
            for _ in range(count)
        )

    primary_sale_happened = bool(reader.u8())
    is_mutable = bool(reader.u8())

    return Metadata(
        key=key,
        update_authority=update_authority,
        mint=mint,
        data=MetadataData(
            name=name,
            symbol=symbol,
            uri=uri,
            seller_fee_basis_points=seller_fee_basis_points,
            creators=creators,
        ),
        primary_sale_happened=primary_sale_happened,
        is_mutable=is_mutable,
    )


def derive_candy_machine_creator(candy_machine: str, program_id: str) -> str:
    """Return the PDA that signs as first creator for ``candy_machine``'s mints."""

    address, _bump = Pubkey.find_program_address(
        [CANDY_MACHINE_SEED, bytes(Pubkey.from_string(candy_machine))],
        Pubkey.from_string(program_id),
    )
    return str(address)
