"""
HexReader - cursor for reading fields out of hex-encoded records.

Records are often transmitted as ASCII hex text where each byte is two
characters (e.g. 0x8F becomes "8F"). The reader walks such text field by
field, decoding through the strict codec.

Key features:
- Position tracking with seek/skip operations
- Fixed-width integer reads in either byte order
- Peek operations for lookahead without advancing
- Bounds checking with clear error messages
- Character errors report the index in the full record, not in the field

Example:
    >>> reader = HexReader("001234FF")
    >>> reader.read_byte()
    0
    >>> reader.read_uint(2, byteorder="little")
    13330
    >>> reader.read_byte()
    255
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from hexcodec.codec.decoding import decode
from hexcodec.exceptions import InvalidHexCharacter, OddLength, ParseError

if TYPE_CHECKING:
    from hexcodec.codec.buffers import BytesLike

ByteOrder = Literal["big", "little"]


class HexReader:
    """
    Reader for parsing ASCII hex-encoded binary data.

    Upper and lower case characters may be mixed. Positions are counted in
    hex characters unless the name says bytes.

    Attributes:
        position: Current read position in hex characters.
        remaining: Number of hex characters remaining.
        data: The underlying hex text being read.

    Example:
        >>> reader = HexReader("12345678")
        >>> reader.read_byte()
        18
        >>> reader.position
        2
        >>> reader.remaining
        6
    """

    __slots__ = ("_data", "_position", "_length")

    def __init__(self, data: BytesLike) -> None:
        """
        Initialize the hex reader.

        Args:
            data: Hex text, str or bytes-like ASCII (2 chars per byte).

        Raises:
            OddLength: If data length is odd (incomplete byte).
        """
        if not isinstance(data, str):
            data = bytes(data)
        if len(data) % 2 != 0:
            raise OddLength()

        self._data = data
        self._position = 0
        self._length = len(data)

    @property
    def position(self) -> int:
        """Current position in hex characters (0-indexed)."""
        return self._position

    @property
    def byte_position(self) -> int:
        """Current position in bytes (position // 2)."""
        return self._position // 2

    @property
    def remaining(self) -> int:
        """Number of hex characters remaining to read."""
        return self._length - self._position

    @property
    def remaining_bytes(self) -> int:
        """Number of bytes remaining to read."""
        return self.remaining // 2

    @property
    def data(self) -> str | bytes:
        """The underlying hex text."""
        return self._data

    def is_at_end(self) -> bool:
        """Check if reader has reached the end of data."""
        return self._position >= self._length

    def has_bytes(self, count: int) -> bool:
        """Check if at least `count` bytes are available to read."""
        return self.remaining >= count * 2

    def _check_bounds(self, char_offset: int, char_count: int, operation: str) -> None:
        """Verify sufficient data is available for operation."""
        if char_count < 0 or char_offset < 0 or char_offset + char_count > self._length:
            raise ParseError(
                f"Cannot {operation}: need {char_count} chars, "
                f"have {self._length - char_offset} at position {char_offset}",
                offset=char_offset,
            )

    def _decode_at(self, char_offset: int, byte_count: int) -> bytes:
        """Decode ``byte_count`` bytes starting at an absolute char offset."""
        chunk = self._data[char_offset : char_offset + byte_count * 2]
        try:
            return decode(chunk)
        except InvalidHexCharacter as e:
            raise InvalidHexCharacter(e.c, char_offset + e.index) from None

    # ===== Position Control =====

    def skip(self, char_count: int) -> None:
        """
        Skip forward by the specified number of hex characters.

        Raises:
            ParseError: If skip would exceed data bounds.
        """
        self._check_bounds(self._position, char_count, "skip")
        self._position += char_count

    def skip_bytes(self, byte_count: int) -> None:
        """Skip forward by the specified number of bytes (2 hex chars each)."""
        self.skip(byte_count * 2)

    def seek(self, char_position: int) -> None:
        """
        Move to an absolute position in the hex text.

        Raises:
            ParseError: If position is out of bounds.
        """
        if char_position < 0 or char_position > self._length:
            raise ParseError(
                f"Invalid seek position {char_position}, valid range is 0-{self._length}",
                offset=char_position,
            )
        self._position = char_position

    def seek_byte(self, byte_position: int) -> None:
        """Move to an absolute byte position."""
        self.seek(byte_position * 2)

    def reset(self) -> None:
        """Reset position to beginning of data."""
        self._position = 0

    # ===== Reading =====

    def read_bytes(self, count: int) -> bytes:
        """
        Read multiple bytes and advance position.

        The position is left unchanged when decoding fails.

        Raises:
            ParseError: If insufficient data available.
            InvalidHexCharacter: With the index in the full record.
        """
        self._check_bounds(self._position, count * 2, f"read {count} bytes")
        value = self._decode_at(self._position, count)
        self._position += count * 2
        return value

    def read_byte(self) -> int:
        """Read a single unsigned byte (2 hex chars) and advance position."""
        return self.read_bytes(1)[0]

    def read_uint(self, size: int, byteorder: ByteOrder = "big", *, signed: bool = False) -> int:
        """
        Read a ``size``-byte integer and advance position.

        Args:
            size: Width in bytes.
            byteorder: "big" (most significant byte first) or "little".
            signed: Interpret as two's complement.

        Example:
            >>> HexReader("18FC").read_uint(2, "little", signed=True)
            -1000
        """
        return int.from_bytes(self.read_bytes(size), byteorder, signed=signed)

    def peek_byte(self, offset: int = 0) -> int:
        """
        Read a byte at the specified byte offset without advancing position.

        Raises:
            ParseError: If offset is out of bounds.
        """
        char_offset = self._position + offset * 2
        self._check_bounds(char_offset, 2, f"peek byte at offset {offset}")
        return self._decode_at(char_offset, 1)[0]

    def slice(self, byte_count: int) -> str | bytes:
        """
        Get a slice of the raw hex text and advance position.

        Raises:
            ParseError: If insufficient data available.
        """
        char_count = byte_count * 2
        self._check_bounds(self._position, char_count, f"slice {byte_count} bytes")
        hex_text = self._data[self._position : self._position + char_count]
        self._position += char_count
        return hex_text

    def read_remaining(self) -> bytes:
        """Read all remaining data and advance to end."""
        return self.read_bytes(self.remaining_bytes)

    def __repr__(self) -> str:
        return (
            f"HexReader(pos={self._position}, "
            f"remaining={self.remaining}, "
            f"total={self._length})"
        )

    def __len__(self) -> int:
        """Return total length in hex characters."""
        return self._length
