"""Fixed-width identifier types used as seed material."""

from __future__ import annotations

import struct

from evmloader.errors import MalformedInputError

ADDRESS_SIZE = 20
CHAIN_ID_SIZE = 32


class Address(bytes):
    """A 20-byte EVM address.

    Behaves exactly like ``bytes`` so it can be passed straight into a
    seed list, but refuses any other width::

        usdt = Address.from_hex("0x5f0155d08eF4aaE2B500AefB64A3419dA8bB611a")
    """

    def __new__(cls, data: bytes) -> Address:
        if len(data) != ADDRESS_SIZE:
            raise MalformedInputError(
                f"address must be {ADDRESS_SIZE} bytes, got {len(data)}"
            )
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls, s: str) -> Address:
        h = s[2:] if s[:2] in ("0x", "0X") else s
        try:
            data = bytes.fromhex(h)
        except ValueError:
            raise MalformedInputError(f"invalid address hex: {s!r}") from None
        return cls(data)

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"Address({self})"


def chain_id_bytes(chain_id: int) -> bytes:
    """Encode a chain id as a big-endian u256."""
    if not 0 <= chain_id < 1 << (8 * CHAIN_ID_SIZE):
        raise MalformedInputError(f"chain id out of range: {chain_id}")
    return chain_id.to_bytes(CHAIN_ID_SIZE, "big")


def treasury_index_bytes(index: int) -> bytes:
    """Encode a treasury pool index as a little-endian u32."""
    if not 0 <= index <= 0xFFFFFFFF:
        raise MalformedInputError(f"treasury index out of range: {index}")
    return struct.pack("<I", index)
