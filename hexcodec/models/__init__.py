"""
Data models built on the hex codec.

This module contains:

- Byte containers implementing ToHex and FromHex (HexBuffer, FixedBytes)
- pydantic field types and hooks for hex-encoded bytes
"""

from hexcodec.models.containers import FixedBytes, HexBuffer
from hexcodec.models.fields import (
    HexBytes,
    UpperHexBytes,
    bounded_hex_bytes,
    deserialize,
    serialize,
    serialize_bounded,
    serialize_upper,
    serialize_upper_bounded,
)

__all__ = [
    # Containers
    "HexBuffer",
    "FixedBytes",
    # pydantic
    "HexBytes",
    "UpperHexBytes",
    "bounded_hex_bytes",
    "serialize",
    "serialize_upper",
    "serialize_bounded",
    "serialize_upper_bounded",
    "deserialize",
]
