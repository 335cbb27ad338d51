"""
Lookup tables and constants for hex encoding and decoding.

Every byte is represented as two hexadecimal characters, most-significant
nibble first. For example:
- Byte 0x8F is encoded as "8f" (or "8F" in uppercase)
- Bytes b"kiwi" are encoded as "6b697769"

All tables are built once at import time and never mutated, so they can be
read concurrently without synchronization.
"""

from __future__ import annotations

from typing import Final


class CodecConstants:
    """
    Codec constants.

    Contains the sizes and sentinel values used throughout the codec.
    """

    CHARS_PER_BYTE: Final[int] = 2
    """Number of hex characters that encode one byte."""

    INVALID_NIBBLE: Final[int] = 0xFF
    """Decode table entry for characters outside 0-9, a-f, A-F."""

    DISPLAY_CHUNK_SIZE: Final[int] = 256
    """Input bytes rendered per chunk by HexDisplay (512 characters)."""


# ===== Nibble -> Character =====

HEX_CHARS_LOWER: Final[bytes] = b"0123456789abcdef"
"""Lowercase nibble to ASCII hex digit table."""

HEX_CHARS_UPPER: Final[bytes] = b"0123456789ABCDEF"
"""Uppercase nibble to ASCII hex digit table."""


def _build_nibble_tables(chars: bytes) -> tuple[bytes, bytes]:
    # bytes.translate tables: byte -> digit of its high / low nibble
    high = bytes(chars[value >> 4] for value in range(256))
    low = bytes(chars[value & 0x0F] for value in range(256))
    return high, low


HIGH_NIBBLE_LOWER, LOW_NIBBLE_LOWER = _build_nibble_tables(HEX_CHARS_LOWER)
HIGH_NIBBLE_UPPER, LOW_NIBBLE_UPPER = _build_nibble_tables(HEX_CHARS_UPPER)


# ===== Character -> Nibble =====


def _build_decode_table() -> bytes:
    table = bytearray([CodecConstants.INVALID_NIBBLE]) * 256
    for nibble, code in enumerate(HEX_CHARS_LOWER):
        table[code] = nibble
    for nibble, code in enumerate(HEX_CHARS_UPPER):
        table[code] = nibble
    return bytes(table)


DECODE_TABLE: Final[bytes] = _build_decode_table()
"""ASCII code to nibble value, INVALID_NIBBLE for non-hex codes."""

INVALID_NIBBLE_BYTE: Final[bytes] = bytes([CodecConstants.INVALID_NIBBLE])
"""Single-byte needle for locating invalid entries in translated input."""
