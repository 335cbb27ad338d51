"""
pydantic integration for hex-encoded byte fields.

The functions in this module are field-level hooks: thin adapters over the
codec that plug into pydantic's ``PlainSerializer``/``BeforeValidator`` (or
``@field_serializer``/``@field_validator``). The annotated types bundle them
for direct use in models.

Example:
    >>> from pydantic import BaseModel
    >>> class Packet(BaseModel):
    ...     payload: HexBytes
    ...     digest: UpperHexBytes
    >>> packet = Packet.model_validate_json('{"payload": "010a6401", "digest": "FF"}')
    >>> packet.payload
    b'\\x01\\nd\\x01'
    >>> packet.model_dump_json()
    '{"payload":"010a6401","digest":"FF"}'
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from hexcodec.codec.decoding import decode
from hexcodec.codec.encoding import encode, encode_upper
from hexcodec.exceptions import FromHexError, InvalidStringLength

if TYPE_CHECKING:
    from hexcodec.codec.buffers import BytesLike

# Module logger
logger = logging.getLogger(__name__)


# ===== Field Hooks =====


def serialize(value: BytesLike) -> str:
    """Serialize bytes as a lowercase hex string."""
    return encode(value)


def serialize_upper(value: BytesLike) -> str:
    """Serialize bytes as an uppercase hex string."""
    return encode_upper(value)


def deserialize(value: BytesLike) -> bytes:
    """
    Deserialize a hex string into bytes.

    Both upper and lower case characters are accepted.

    Raises:
        FromHexError: If the value is not valid hex. As a ValueError, this
            surfaces as a pydantic ValidationError.
    """
    return decode(value)


def _check_capacity(length: int, capacity: int) -> None:
    if length > capacity:
        raise InvalidStringLength()


def serialize_bounded(value: BytesLike, capacity: int) -> str:
    """
    Serialize bytes as lowercase hex into a string of bounded capacity.

    Args:
        value: Bytes to serialize.
        capacity: Maximum number of characters in the result.

    Raises:
        InvalidStringLength: If ``2 * len(value)`` exceeds ``capacity``.
    """
    text = encode(value)
    _check_capacity(len(text), capacity)
    return text


def serialize_upper_bounded(value: BytesLike, capacity: int) -> str:
    """Like serialize_bounded(), using uppercase characters."""
    text = encode_upper(value)
    _check_capacity(len(text), capacity)
    return text


# ===== Annotated Types =====


def _validate_hex(value: Any, max_bytes: int | None = None) -> Any:
    """
    Decode str input; pass raw bytes through.

    Other types are left for pydantic's bytes validation to reject.
    """
    if isinstance(value, str):
        try:
            value = deserialize(value)
        except FromHexError as e:
            logger.debug("Rejected hex field value: %s", e)
            raise
    if max_bytes is not None and isinstance(value, (bytes, bytearray)):
        if len(value) > max_bytes:
            logger.debug("Rejected hex field value: %d bytes exceeds capacity %d", len(value), max_bytes)
            raise InvalidStringLength()
    return value


HexBytes = Annotated[
    bytes,
    BeforeValidator(_validate_hex),
    PlainSerializer(serialize, return_type=str),
]
"""bytes field stored as lowercase hex text in JSON."""

UpperHexBytes = Annotated[
    bytes,
    BeforeValidator(_validate_hex),
    PlainSerializer(serialize_upper, return_type=str),
]
"""bytes field stored as uppercase hex text in JSON."""


def bounded_hex_bytes(max_bytes: int, *, upper: bool = False) -> Any:
    """
    Build a hex bytes field type with a fixed capacity.

    Decoded values longer than ``max_bytes`` are rejected, and serialized
    text is produced into a capacity of ``2 * max_bytes`` characters.

    Args:
        max_bytes: Maximum number of bytes the field may hold.
        upper: Serialize with uppercase characters.

    Returns:
        An ``Annotated[bytes, ...]`` type for use in model fields.

    Example:
        >>> class Frame(BaseModel):
        ...     body: bounded_hex_bytes(4)
        >>> Frame(body="010a6401").model_dump_json()
        '{"body":"010a6401"}'
    """
    if max_bytes < 0:
        raise ValueError(f"max_bytes must be non-negative, got {max_bytes}")
    serializer = serialize_upper_bounded if upper else serialize_bounded
    return Annotated[
        bytes,
        BeforeValidator(partial(_validate_hex, max_bytes=max_bytes)),
        PlainSerializer(partial(serializer, capacity=max_bytes * 2), return_type=str),
    ]
