"""Compact binary encoding of blocks.

Integers are unsigned 64-bit little-endian; strings are a 64-bit
little-endian length followed by UTF-8 bytes. Fields follow the block's
declaration order.
"""

from __future__ import annotations

import struct

from ledgerkit.chain import Block

_U64 = struct.Struct("<Q")


class SerializationError(ValueError):
    """Raised when a block cannot be encoded or decoded."""


def _encode_str(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _U64.pack(len(raw)) + raw


def to_bytes(block: Block) -> bytes:
    """Encode ``block`` as bytes."""
    try:
        return b"".join(
            (
                _U64.pack(block.index),
                _U64.pack(block.timestamp),
                _encode_str(block.prev_hash),
                _encode_str(block.hash),
                _encode_str(block.data),
                _U64.pack(block.nonce),
            )
        )
    except struct.error as exc:
        raise SerializationError(str(exc)) from exc


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def u64(self) -> int:
        (value,) = _U64.unpack_from(self._data, self._offset)
        self._offset += _U64.size
        return value

    def string(self) -> str:
        length = self.u64()
        end = self._offset + length
        if end > len(self._data):
            raise SerializationError("string runs past end of data")
        raw = self._data[self._offset:end]
        self._offset = end
        return raw.decode("utf-8")


def from_bytes(data: bytes) -> Block:
    """Decode a block; trailing bytes are ignored."""
    reader = _Reader(bytes(data))
    try:
        return Block(
            index=reader.u64(),
            timestamp=reader.u64(),
            prev_hash=reader.string(),
            hash=reader.string(),
            data=reader.string(),
            nonce=reader.u64(),
        )
    except (struct.error, UnicodeDecodeError) as exc:
        raise SerializationError(str(exc)) from exc


def to_hex(block: Block) -> str:
    """Encode ``block`` as lower-case hex."""
    return to_bytes(block).hex()


def from_hex(text: str) -> Block:
    """Decode a block from hex text."""
    try:
        raw = bytes.fromhex(text)
    except ValueError as exc:
        raise SerializationError(str(exc)) from exc
    return from_bytes(raw)


def is_valid_bytes(data: bytes) -> bool:
    """Whether ``data`` decodes to a block."""
    try:
        from_bytes(data)
    except SerializationError:
        return False
    return True