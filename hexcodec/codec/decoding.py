"""
Hex decoding with strict validation.

Upper and lower case characters are valid and can be mixed freely, even
within a single byte (``f9b4ca``, ``F9B4CA`` and ``f9B4Ca`` all decode to
the same bytes).

Validation happens in a fixed order:
1. Odd input length -> OddLength, before any character is inspected
2. Output buffer size != len(input) // 2 -> InvalidStringLength, before
   anything is written
3. First invalid character, scanning left to right ->
   InvalidHexCharacter(c, index), with index into the original input

Example:
    >>> decode("48656c6c6f20776f726c6421")
    b'Hello world!'
    >>> decode("123")
    Traceback (most recent call last):
        ...
    hexcodec.exceptions.OddLength: Odd number of digits
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from hexcodec.codec.buffers import writable_bytes
from hexcodec.codec.constants import DECODE_TABLE, INVALID_NIBBLE_BYTE, CodecConstants
from hexcodec.exceptions import InvalidHexCharacter, InvalidStringLength, OddLength

if TYPE_CHECKING:
    from collections.abc import Buffer

    from hexcodec.codec.buffers import BytesLike

    CodeUnits = Union[bytes, bytearray, str]


def _code_units(data: BytesLike) -> CodeUnits:
    # ASCII text is encoded so that indices are preserved; any other text is
    # kept as str and always holds at least one invalid character.
    if isinstance(data, str):
        return data.encode("ascii") if data.isascii() else data
    if isinstance(data, (bytes, bytearray)):
        return data
    return memoryview(data).tobytes()


def _nibble(char: str, index: int) -> int:
    code = ord(char)
    nibble = DECODE_TABLE[code] if code <= 0xFF else CodecConstants.INVALID_NIBBLE
    if nibble == CodecConstants.INVALID_NIBBLE:
        raise InvalidHexCharacter(char, index)
    return nibble


def _nibbles(units: CodeUnits) -> bytes | bytearray:
    """
    Map every character to its nibble value.

    Scanning left to right also means that, within a pair, the high-nibble
    character is reported before the low-nibble one.

    Raises:
        InvalidHexCharacter: For the first character outside 0-9, a-f, A-F.
    """
    if isinstance(units, str):
        return bytes(_nibble(char, index) for index, char in enumerate(units))

    nibbles = units.translate(DECODE_TABLE)
    index = nibbles.find(INVALID_NIBBLE_BYTE)
    if index != -1:
        raise InvalidHexCharacter(chr(units[index]), index)
    return nibbles


def _combine(nibbles: bytes | bytearray) -> bytes:
    return bytes((high << 4) | low for high, low in zip(nibbles[0::2], nibbles[1::2]))


def decode(data: BytesLike) -> bytes:
    """
    Decode a hex string into raw bytes.

    Args:
        data: Hex text as str or bytes-like ASCII (must be even length).

    Returns:
        Decoded bytes, half the length of the input. Empty input decodes to
        ``b""``.

    Raises:
        OddLength: If the input has an odd number of characters.
        InvalidHexCharacter: For the first non-hex character.

    Example:
        >>> decode("666f6f626172")
        b'foobar'
        >>> decode("aB") == decode("AB") == decode("ab") == b"\\xab"
        True
    """
    units = _code_units(data)
    if len(units) % CodecConstants.CHARS_PER_BYTE:
        raise OddLength()
    return _combine(_nibbles(units))


def decode_to_slice(data: BytesLike, output: Buffer) -> None:
    """
    Decode a hex string into a caller-owned buffer.

    Args:
        data: Hex text as str or bytes-like ASCII.
        output: Writable buffer of exactly ``len(data) // 2`` bytes.

    Raises:
        OddLength: If the input has an odd number of characters.
        InvalidStringLength: If the buffer size does not match.
        InvalidHexCharacter: For the first non-hex character.
        TypeError: If output is not a writable buffer.

    Example:
        >>> buffer = bytearray(4)
        >>> decode_to_slice("6b697769", buffer)
        >>> bytes(buffer)
        b'kiwi'
    """
    units = _code_units(data)
    if len(units) % CodecConstants.CHARS_PER_BYTE:
        raise OddLength()
    with writable_bytes(output) as target:
        if len(units) // CodecConstants.CHARS_PER_BYTE != len(target):
            raise InvalidStringLength()
        target[:] = _combine(_nibbles(units))


def decode_in_slice(buffer: Buffer) -> None:
    """
    Decode hex text held in ``buffer`` into the buffer's first half.

    After a successful call the first ``len(buffer) // 2`` bytes hold the
    decoded data; the rest of the buffer is unspecified. Nothing is
    written when decoding fails.

    Raises:
        OddLength: If the buffer has an odd length.
        InvalidHexCharacter: For the first non-hex character.
        TypeError: If buffer is not writable.

    Example:
        >>> buffer = bytearray(b"6b697769")
        >>> decode_in_slice(buffer)
        >>> bytes(buffer[:4])
        b'kiwi'
    """
    with writable_bytes(buffer) as target:
        if len(target) % CodecConstants.CHARS_PER_BYTE:
            raise OddLength()
        decoded = _combine(_nibbles(target.tobytes()))
        target[: len(decoded)] = decoded


def decode_byte(hex_chars: BytesLike) -> int:
    """
    Decode exactly 2 hex characters to a byte value.

    Raises:
        InvalidStringLength: If the input is not 2 characters long.
        InvalidHexCharacter: For a non-hex character.

    Example:
        >>> decode_byte("8F")
        143
    """
    units = _code_units(hex_chars)
    if len(units) != CodecConstants.CHARS_PER_BYTE:
        raise InvalidStringLength()
    high, low = _nibbles(units)
    return (high << 4) | low
