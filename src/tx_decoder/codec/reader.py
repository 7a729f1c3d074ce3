"""
Byte Reader

Bounds-checked cursor over a byte buffer. Provides the primitive reads the
CBOR parser is built on: single bytes, raw byte runs and big-endian
fixed-width unsigned integers.
"""

import builtins
import re
import struct

from ..runtime.errors import IntegerOverflowError, MalformedInputError, UnexpectedEofError

MAX_SAFE_INTEGER = 2**53 - 1

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class ByteReader:
    """
    Byte cursor owned by a single decode call.

    The offset only moves forward and never passes the end of the buffer;
    a read that would overrun raises UnexpectedEofError.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @classmethod
    def from_hex(cls, text: str) -> "ByteReader":
        """
        Build a reader from hex text.

        Leading and trailing whitespace is ignored.

        Args:
            text: Hex encoded payload

        Returns:
            Reader positioned at the first byte

        Raises:
            MalformedInputError: If the text is empty, odd-length or not hex
        """
        trimmed = text.strip()
        if not trimmed:
            raise MalformedInputError("Serialized transaction is empty")
        if len(trimmed) % 2 != 0:
            raise MalformedInputError("Serialized transaction hex length must be even")
        if not _HEX_RE.fullmatch(trimmed):
            bad = next(
                trimmed[i:i + 2] for i in range(0, len(trimmed), 2)
                if not _HEX_RE.fullmatch(trimmed[i:i + 2])
            )
            raise MalformedInputError(f"Invalid hex byte: {bad}")
        return cls(builtins.bytes.fromhex(trimmed))

    @property
    def offset(self) -> int:
        """Current read offset."""
        return self._off

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    def _ensure(self, n: int) -> None:
        if self._off + n > len(self._buf):
            raise UnexpectedEofError(
                details={"offset": self._off, "wanted": n, "available": self.remaining}
            )

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        self._ensure(1)
        val = self._buf[self._off]
        self._off += 1
        return val

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        A zero-length read returns b"" without touching the cursor.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if n == 0:
            return b""
        self._ensure(n)
        out = builtins.bytes(self._buf[self._off : self._off + n])
        self._off += n
        return out

    def u16be(self) -> int:
        """Read unsigned 16-bit big-endian integer."""
        return struct.unpack(">H", self.bytes(2))[0]

    def u32be(self) -> int:
        """Read unsigned 32-bit big-endian integer."""
        return struct.unpack(">I", self.bytes(4))[0]

    def u64be(self) -> int:
        """
        Read unsigned 64-bit big-endian integer.

        Returns:
            Unsigned integer value

        Raises:
            IntegerOverflowError: If the value exceeds MAX_SAFE_INTEGER
        """
        val = struct.unpack(">Q", self.bytes(8))[0]
        if val > MAX_SAFE_INTEGER:
            raise IntegerOverflowError(details={"value": val})
        return val
