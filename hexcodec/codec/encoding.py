"""
Hex encoding of binary data.

Each byte becomes two ASCII hex characters, high nibble first. Encoding
never fails for byte input: every byte value has a two-character form.

The bulk paths look up both nibbles of every byte through bytes.translate
tables and interleave the two results with strided slice assignment, so
there is no per-byte branching in Python code.

Example:
    >>> encode(b"kiwi")
    '6b697769'
    >>> encode_upper(bytes([1, 2, 3, 15, 16]))
    '0102030F10'
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from operator import index as as_index
from typing import TYPE_CHECKING

from hexcodec.codec.buffers import byte_view, writable_bytes
from hexcodec.codec.constants import (
    HEX_CHARS_LOWER,
    HEX_CHARS_UPPER,
    HIGH_NIBBLE_LOWER,
    HIGH_NIBBLE_UPPER,
    LOW_NIBBLE_LOWER,
    LOW_NIBBLE_UPPER,
    CodecConstants,
)
from hexcodec.exceptions import InvalidStringLength

if TYPE_CHECKING:
    from collections.abc import Buffer

    from hexcodec.codec.buffers import BytesLike


def nibble_tables(upper: bool) -> tuple[bytes, bytes]:
    """Return the (high, low) translate tables for the requested case."""
    if upper:
        return HIGH_NIBBLE_UPPER, LOW_NIBBLE_UPPER
    return HIGH_NIBBLE_LOWER, LOW_NIBBLE_LOWER


def interleave_into(
    output: bytearray | memoryview,
    source: bytes | bytearray,
    high: bytes,
    low: bytes,
) -> None:
    """
    Write the hex digits of ``source`` into ``output``.

    ``output`` must be exactly twice as long as ``source``.
    """
    output[0::2] = source.translate(high)
    output[1::2] = source.translate(low)


def _encode(data: BytesLike, upper: bool) -> str:
    source = byte_view(data)
    output = bytearray(len(source) * CodecConstants.CHARS_PER_BYTE)
    interleave_into(output, source, *nibble_tables(upper))
    return output.decode("ascii")


def encode(data: BytesLike) -> str:
    """
    Encode ``data`` as a hex string using lowercase characters.

    The result is always exactly twice as long as the input data.

    Args:
        data: Bytes-like object, or str (encoded as UTF-8).

    Returns:
        Lowercase hex string (e.g. ``f9b4ca``).

    Example:
        >>> encode("Hello world!")
        '48656c6c6f20776f726c6421'
    """
    return _encode(data, upper=False)


def encode_upper(data: BytesLike) -> str:
    """
    Encode ``data`` as a hex string using uppercase characters.

    Apart from the characters' casing, this works exactly like encode().

    Example:
        >>> encode_upper("Hello world!")
        '48656C6C6F20776F726C6421'
    """
    return _encode(data, upper=True)


def _encode_to_slice(data: BytesLike, output: Buffer, upper: bool) -> None:
    source = byte_view(data)
    with writable_bytes(output) as target:
        if len(source) * CodecConstants.CHARS_PER_BYTE != len(target):
            raise InvalidStringLength()
        interleave_into(target, source, *nibble_tables(upper))


def encode_to_slice(data: BytesLike, output: Buffer) -> None:
    """
    Encode ``data`` into a caller-owned buffer as lowercase ASCII hex.

    The buffer must hold exactly ``len(data) * 2`` bytes. Nothing is written
    when the size is wrong.

    Args:
        data: Bytes to encode.
        output: Writable buffer (bytearray, writable memoryview, ...).

    Raises:
        InvalidStringLength: If ``len(output) != len(data) * 2``.
        TypeError: If output is not a writable buffer.

    Example:
        >>> buffer = bytearray(8)
        >>> encode_to_slice(b"kiwi", buffer)
        >>> bytes(buffer)
        b'6b697769'
    """
    _encode_to_slice(data, output, upper=False)


def encode_upper_to_slice(data: BytesLike, output: Buffer) -> None:
    """Like encode_to_slice(), using uppercase characters."""
    _encode_to_slice(data, output, upper=True)


def encode_byte(value: int, *, upper: bool = False) -> str:
    """
    Encode a single byte value as 2 hex characters.

    Args:
        value: Byte value (0-255).
        upper: Use uppercase characters.

    Returns:
        2-character hex string.

    Raises:
        ValueError: If value is not in range 0-255.

    Example:
        >>> encode_byte(0x8F, upper=True)
        '8F'
    """
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value must be 0-255, got {value}")
    table = HEX_CHARS_UPPER if upper else HEX_CHARS_LOWER
    return chr(table[value >> 4]) + chr(table[value & 0x0F])


class HexChars(Sequence[str]):
    """
    Lazy sequence of the hex characters of a byte string.

    Characters are produced on demand; nothing is encoded up front. The
    length (``2 * len(data)``) is known before any consumption, items can
    be accessed at random, and every iteration starts from the beginning.

    Example:
        >>> chars = HexChars(b"\\x01\\xab")
        >>> len(chars)
        4
        >>> list(chars)
        ['0', '1', 'a', 'b']
        >>> chars[-1]
        'b'
    """

    __slots__ = ("_data", "_table")

    def __init__(self, data: BytesLike, *, upper: bool = False) -> None:
        self._data = byte_view(data)
        self._table = HEX_CHARS_UPPER if upper else HEX_CHARS_LOWER

    @property
    def upper(self) -> bool:
        """Whether uppercase characters are produced."""
        return self._table is HEX_CHARS_UPPER

    def __len__(self) -> int:
        return len(self._data) * CodecConstants.CHARS_PER_BYTE

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(self[i] for i in range(*index.indices(len(self))))

        position = as_index(index)
        length = len(self)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError(f"Hex character index {index} out of range for length {length}")

        value = self._data[position >> 1]
        nibble = value & 0x0F if position & 1 else value >> 4
        return chr(self._table[nibble])

    def __iter__(self) -> Iterator[str]:
        table = self._table
        for value in self._data:
            yield chr(table[value >> 4])
            yield chr(table[value & 0x0F])

    def __repr__(self) -> str:
        return f"HexChars(len={len(self)}, upper={self.upper})"


def encode_to_iter(data: BytesLike, *, upper: bool = False) -> HexChars:
    """
    Encode ``data`` lazily.

    Returns:
        A HexChars sequence producing each character on demand.
    """
    return HexChars(data, upper=upper)
