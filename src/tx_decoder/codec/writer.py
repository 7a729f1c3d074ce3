"""
CBOR Writer

Encodes a CborValue tree back to bytes using shortest-form item heads.
Used to re-serialize a parsed transaction body for hashing.
"""

import struct
from typing import List

from .values import (
    Array,
    Bool,
    ByteString,
    CborValue,
    Float,
    Map,
    NegInt,
    Null,
    Tagged,
    TextString,
    UInt,
)
from ..runtime.errors import UnsupportedEncodingError


class CborWriter:
    """
    Byte writer with CBOR head and item encoding.

    Maps, arrays and tags are written in the order they were parsed, so a
    parse/write cycle preserves entry order and duplicate keys.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def head(self, major: int, argument: int) -> None:
        """
        Write an item head with the shortest argument encoding.

        Args:
            major: Major type (0-7)
            argument: Length or value carried by the head
        """
        if argument < 0:
            raise UnsupportedEncodingError(f"Negative head argument: {argument}")
        prefix = major << 5
        if argument < 24:
            self.u8(prefix | argument)
        elif argument <= 0xFF:
            self.u8(prefix | 24)
            self.u8(argument)
        elif argument <= 0xFFFF:
            self.u8(prefix | 25)
            self.bytes(struct.pack(">H", argument))
        elif argument <= 0xFFFFFFFF:
            self.u8(prefix | 26)
            self.bytes(struct.pack(">I", argument))
        elif argument <= 0xFFFFFFFFFFFFFFFF:
            self.u8(prefix | 27)
            self.bytes(struct.pack(">Q", argument))
        else:
            raise UnsupportedEncodingError(f"Head argument too large: {argument}")

    def value(self, v: CborValue) -> None:
        """
        Write a complete data item.

        Args:
            v: Value to encode
        """
        if isinstance(v, UInt):
            self.head(0, v.value)
        elif isinstance(v, NegInt):
            self.head(1, -1 - v.value)
        elif isinstance(v, ByteString):
            self.head(2, len(v.value))
            self.bytes(v.value)
        elif isinstance(v, TextString):
            data = v.value.encode("utf-8")
            self.head(3, len(data))
            self.bytes(data)
        elif isinstance(v, Array):
            self.head(4, len(v.items))
            for item in v.items:
                self.value(item)
        elif isinstance(v, Map):
            self.head(5, len(v.entries))
            for key, item in v.entries:
                self.value(key)
                self.value(item)
        elif isinstance(v, Tagged):
            self.head(6, v.tag)
            self.value(v.value)
        elif isinstance(v, Bool):
            self.u8(0xF5 if v.value else 0xF4)
        elif isinstance(v, Null):
            self.u8(0xF6)
        elif isinstance(v, Float):
            self.u8(0xFB)
            self.bytes(struct.pack(">d", v.value))
        else:
            raise UnsupportedEncodingError(f"Cannot encode {type(v).__name__}")

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)


def dumps(v: CborValue) -> bytes:
    """Encode a single value to CBOR bytes."""
    writer = CborWriter()
    writer.value(v)
    return writer.to_bytes()
