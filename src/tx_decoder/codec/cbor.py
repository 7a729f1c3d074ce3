"""
CBOR Reader

Recursive-descent parser turning a ByteReader into a CborValue tree.
Only definite-length items are supported; indefinite-length heads fail as
unsupported additional info.
"""

import math
import struct
from typing import Any, Optional, Tuple

from .reader import ByteReader
from .values import (
    NULL,
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
from ..canonjson import dumps_canonical
from ..runtime.errors import NestingDepthError, UnsupportedEncodingError

MAJOR_UNSIGNED = 0
MAJOR_NEGATIVE = 1
MAJOR_BYTES = 2
MAJOR_TEXT = 3
MAJOR_ARRAY = 4
MAJOR_MAP = 5
MAJOR_TAG = 6
MAJOR_SIMPLE = 7


def decode_half_float(half: int) -> float:
    """
    Decode an IEEE-754 binary16 bit pattern.

    Args:
        half: 16-bit pattern

    Returns:
        Float value (subnormals, infinities and NaN included)
    """
    sign = -1.0 if half & 0x8000 else 1.0
    exponent = (half & 0x7C00) >> 10
    fraction = half & 0x03FF

    if exponent == 0:
        if fraction == 0:
            return sign * 0.0
        return sign * math.ldexp(fraction / 0x400, -14)

    if exponent == 0x1F:
        if fraction == 0:
            return sign * math.inf
        return math.nan

    return sign * math.ldexp(1 + fraction / 0x400, exponent - 15)


class CborReader:
    """
    CBOR parser over a ByteReader.

    One stack frame per nesting level. When max_depth is set, containers
    nested deeper than that raise NestingDepthError.
    """

    def __init__(self, reader: ByteReader, max_depth: Optional[int] = None):
        self._reader = reader
        self._max_depth = max_depth
        self._depth = 0

    @property
    def reader(self) -> ByteReader:
        return self._reader

    def read_header(self) -> Tuple[int, int]:
        """
        Read one item head.

        Returns:
            (major type, additional info)
        """
        byte = self._reader.u8()
        return (byte & 0xE0) >> 5, byte & 0x1F

    def read_argument(self, additional_info: int) -> int:
        """
        Resolve the length/value argument of an item head.

        Args:
            additional_info: Low five bits of the head byte

        Returns:
            Argument value

        Raises:
            UnsupportedEncodingError: For additional info 28-31
        """
        if additional_info < 24:
            return additional_info
        if additional_info == 24:
            return self._reader.u8()
        if additional_info == 25:
            return self._reader.u16be()
        if additional_info == 26:
            return self._reader.u32be()
        if additional_info == 27:
            return self._reader.u64be()
        raise UnsupportedEncodingError(f"Unsupported length encoding: {additional_info}")

    def read_value(self) -> CborValue:
        """
        Read the next complete data item.

        Returns:
            Parsed CborValue
        """
        major, info = self.read_header()

        if major == MAJOR_UNSIGNED:
            return UInt(self.read_argument(info))
        if major == MAJOR_NEGATIVE:
            return NegInt(-1 - self.read_argument(info))
        if major == MAJOR_BYTES:
            return ByteString(self._reader.bytes(self.read_argument(info)))
        if major == MAJOR_TEXT:
            raw = self._reader.bytes(self.read_argument(info))
            return TextString(raw.decode("utf-8", errors="replace"))
        if major == MAJOR_ARRAY:
            length = self.read_argument(info)
            with _Nested(self):
                return Array(tuple(self.read_value() for _ in range(length)))
        if major == MAJOR_MAP:
            length = self.read_argument(info)
            with _Nested(self):
                entries = []
                for _ in range(length):
                    key = self.read_value()
                    entries.append((key, self.read_value()))
                return Map(tuple(entries))
        if major == MAJOR_TAG:
            tag = self.read_argument(info)
            with _Nested(self):
                return Tagged(tag, self.read_value())
        return self._read_simple(info)

    def _read_simple(self, info: int) -> CborValue:
        if info == 20:
            return Bool(False)
        if info == 21:
            return Bool(True)
        if info in (22, 23):
            return NULL
        if info == 24:
            self._reader.u8()
            return NULL
        if info == 25:
            return Float(decode_half_float(self._reader.u16be()))
        if info == 26:
            return Float(struct.unpack(">f", self._reader.bytes(4))[0])
        if info == 27:
            return Float(struct.unpack(">d", self._reader.bytes(8))[0])
        raise UnsupportedEncodingError(f"Unsupported special value: {info}")


class _Nested:
    """Depth bookkeeping around a container's children."""

    def __init__(self, parser: CborReader):
        self._parser = parser

    def __enter__(self) -> None:
        parser = self._parser
        parser._depth += 1
        if parser._max_depth is not None and parser._depth > parser._max_depth:
            raise NestingDepthError(details={"max_depth": parser._max_depth})

    def __exit__(self, *exc) -> None:
        self._parser._depth -= 1


def read_value(reader: ByteReader, max_depth: Optional[int] = None) -> CborValue:
    """Parse one CBOR data item from the reader."""
    return CborReader(reader, max_depth).read_value()


def loads_hex(text: str, max_depth: Optional[int] = None) -> CborValue:
    """Parse the first CBOR data item of a hex payload."""
    return read_value(ByteReader.from_hex(text), max_depth)


def to_plain(value: Any) -> Any:
    """
    Convert a CborValue into plain Python data.

    Byte strings become lowercase hex, maps become dicts keyed by
    stringify_key (last duplicate wins) and tags become {"tag", "value"}
    records. Plain Python input is returned unchanged.
    """
    if isinstance(value, (UInt, NegInt, TextString, Bool, Float)):
        return value.value
    if isinstance(value, ByteString):
        return value.value.hex()
    if isinstance(value, Null):
        return None
    if isinstance(value, Array):
        return [to_plain(item) for item in value.items]
    if isinstance(value, Map):
        return {stringify_key(k): to_plain(v) for k, v in value.entries}
    if isinstance(value, Tagged):
        return {"tag": value.tag, "value": to_plain(value.value)}
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


def stringify_key(key: Any) -> str:
    """
    Deterministic string form of a map key.

    Numbers in decimal, bytes as lowercase hex, booleans as "true"/"false",
    null as "null", text unchanged, containers as canonical JSON.
    """
    if isinstance(key, TextString):
        return key.value
    if isinstance(key, (UInt, NegInt)):
        return str(key.value)
    if isinstance(key, Bool):
        return "true" if key.value else "false"
    if isinstance(key, Null):
        return "null"
    if isinstance(key, ByteString):
        return key.value.hex()
    if isinstance(key, Float):
        if math.isfinite(key.value) and key.value.is_integer():
            return str(int(key.value))
        return repr(key.value)
    if isinstance(key, (Array, Map, Tagged)):
        return dumps_canonical(to_plain(key))
    return str(key)
