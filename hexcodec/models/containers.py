"""
Byte containers with hex capabilities.

This module defines the two container types that implement both ToHex and
FromHex:

- HexBuffer: growable byte buffer (a bytearray)
- FixedBytes[N]: immutable byte string of exactly N bytes

FixedBytes is specialized by subscripting with the size. Specializations are
created on first use and cached, so ``FixedBytes[32] is FixedBytes[32]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from hexcodec.codec.decoding import decode, decode_to_slice
from hexcodec.codec.traits import HexEncodable
from hexcodec.exceptions import InvalidStringLength

if TYPE_CHECKING:
    from collections.abc import Buffer

    from hexcodec.codec.buffers import BytesLike


class HexBuffer(HexEncodable, bytearray):
    """
    Growable byte buffer that converts to and from hex.

    Example:
        >>> buffer = HexBuffer.from_hex("48656c6c6f")
        >>> buffer.extend(b"!")
        >>> buffer.encode_hex()
        '48656c6c6f21'
    """

    __slots__ = ()

    @classmethod
    def from_hex(cls, data: BytesLike) -> HexBuffer:
        """
        Decode hex text into a new buffer.

        Raises:
            OddLength: If the input has an odd number of characters.
            InvalidHexCharacter: For the first non-hex character.
        """
        return cls(decode(data))

    def __repr__(self) -> str:
        return f"HexBuffer({bytes(self)!r})"


_SPECIALIZATIONS: Final[dict[int, type[FixedBytes]]] = {}


class FixedBytes(HexEncodable, bytes):
    """
    Immutable byte string of a fixed size.

    The size is part of the type: ``FixedBytes[6]`` only ever holds exactly
    6 bytes. Decoding hex of any other length fails with InvalidStringLength
    before a single character is inspected.

    Attributes:
        size: Number of bytes for a specialization, None on FixedBytes itself.

    Example:
        >>> FixedBytes[6].from_hex("666f6f626172")
        FixedBytes[6](b'foobar')
        >>> FixedBytes[5].from_hex("666f6f626172")
        Traceback (most recent call last):
            ...
        hexcodec.exceptions.InvalidStringLength: Invalid string length
    """

    __slots__ = ()

    size: ClassVar[int | None] = None

    def __class_getitem__(cls, size: int) -> type[FixedBytes]:
        if cls.size is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError(f"FixedBytes size must be an int, got {type(size).__name__}")
        if size < 0:
            raise ValueError(f"FixedBytes size must be non-negative, got {size}")

        specialized = _SPECIALIZATIONS.get(size)
        if specialized is None:
            name = f"FixedBytes[{size}]"
            created = type(cls)(name, (cls,), {"__slots__": (), "size": size, "__qualname__": name})
            specialized = _SPECIALIZATIONS.setdefault(size, created)
        return specialized

    @classmethod
    def _required_size(cls) -> int:
        if cls.size is None:
            raise TypeError("FixedBytes must be specialized with a size, e.g. FixedBytes[32]")
        return cls.size

    def __new__(cls, value: Buffer | None = None) -> FixedBytes:
        size = cls._required_size()
        if value is None:
            return super().__new__(cls, size)
        if isinstance(value, (int, str)):
            raise TypeError(f"{cls.__name__} requires a bytes-like value, got {type(value).__name__}")
        instance = super().__new__(cls, value)
        if len(instance) != size:
            raise InvalidStringLength()
        return instance

    @classmethod
    def from_hex(cls, data: BytesLike) -> FixedBytes:
        """
        Decode hex text of exactly ``2 * size`` characters.

        Raises:
            OddLength: If the input has an odd number of characters.
            InvalidStringLength: If the input does not hold ``size`` bytes.
            InvalidHexCharacter: For the first non-hex character.
        """
        output = bytearray(cls._required_size())
        decode_to_slice(data, output)
        return cls(output)

    def __reduce__(self) -> tuple[object, ...]:
        return (_rebuild_fixed_bytes, (type(self).size, bytes(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"


def _rebuild_fixed_bytes(size: int, value: bytes) -> FixedBytes:
    return FixedBytes[size](value)
