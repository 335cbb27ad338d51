"""
Readers for hex-encoded records.

Example:
    >>> from hexcodec.parsers import HexReader
    >>> reader = HexReader("0102")
    >>> reader.read_uint(2)
    258
"""

from hexcodec.parsers.hex_reader import ByteOrder, HexReader

__all__ = [
    "HexReader",
    "ByteOrder",
]
