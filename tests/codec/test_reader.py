"""Tests for the byte reader."""

import pytest

from tx_decoder.codec.reader import ByteReader, MAX_SAFE_INTEGER
from tx_decoder.runtime.errors import (
    ErrorCode,
    IntegerOverflowError,
    MalformedInputError,
    UnexpectedEofError,
)


class TestFromHex:
    """Hex text validation."""

    def test_trims_whitespace(self):
        """Surrounding whitespace is ignored."""
        reader = ByteReader.from_hex("  0aFF\n")
        assert reader.u8() == 0x0A
        assert reader.u8() == 0xFF
        assert reader.eof

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty(self, text):
        """Empty input is malformed."""
        with pytest.raises(MalformedInputError, match="empty"):
            ByteReader.from_hex(text)

    def test_odd_length(self):
        """Odd-length input is malformed."""
        with pytest.raises(MalformedInputError, match="even"):
            ByteReader.from_hex("abc")

    @pytest.mark.parametrize("text,bad", [("zz", "zz"), ("00g1", "g1"), ("0x80", "0x"), ("00 011", " 0")])
    def test_non_hex(self, text, bad):
        """Non-hex characters are rejected, including inner whitespace."""
        with pytest.raises(MalformedInputError) as exc_info:
            ByteReader.from_hex(text)
        assert exc_info.value.code == ErrorCode.MALFORMED_INPUT
        assert f"Invalid hex byte: {bad}" in str(exc_info.value)


class TestPrimitives:
    """Bounds-checked reads."""

    def test_u8_eof(self):
        """Reading past the end raises UnexpectedEofError."""
        reader = ByteReader(b"\x01")
        assert reader.u8() == 1
        with pytest.raises(UnexpectedEofError, match="Unexpected end of input"):
            reader.u8()

    def test_zero_length_read(self):
        """A zero-length read returns b'' and does not move the cursor."""
        reader = ByteReader(b"")
        assert reader.bytes(0) == b""
        assert reader.offset == 0

    def test_bytes_short(self):
        """A short buffer fails without consuming."""
        reader = ByteReader(b"\x01\x02")
        with pytest.raises(UnexpectedEofError) as exc_info:
            reader.bytes(4)
        assert exc_info.value.details == {"offset": 0, "wanted": 4, "available": 2}
        assert reader.offset == 0

    def test_big_endian(self):
        """Fixed-width integers are big-endian."""
        reader = ByteReader(bytes.fromhex("0102" "01020304" "0000000100000000"))
        assert reader.u16be() == 0x0102
        assert reader.u32be() == 0x01020304
        assert reader.u64be() == 2**32
        assert reader.remaining == 0

    def test_u32_high_bit(self):
        """The top bit of a 32-bit value stays unsigned."""
        assert ByteReader(b"\xff\xff\xff\xff").u32be() == 0xFFFFFFFF

    def test_u64_max_safe(self):
        """MAX_SAFE_INTEGER itself is accepted."""
        reader = ByteReader(MAX_SAFE_INTEGER.to_bytes(8, "big"))
        assert reader.u64be() == MAX_SAFE_INTEGER

    def test_u64_overflow(self):
        """Values above MAX_SAFE_INTEGER raise IntegerOverflowError."""
        reader = ByteReader((MAX_SAFE_INTEGER + 1).to_bytes(8, "big"))
        with pytest.raises(IntegerOverflowError):
            reader.u64be()

    def test_offset_monotonic(self):
        """Offset only advances."""
        reader = ByteReader(bytes(10))
        seen = [reader.offset]
        reader.u8()
        seen.append(reader.offset)
        reader.bytes(3)
        seen.append(reader.offset)
        reader.u16be()
        seen.append(reader.offset)
        assert seen == sorted(seen) == [0, 1, 4, 6]
