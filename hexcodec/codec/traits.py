"""
Capabilities for converting values to and from hex.

Two structural protocols describe the capabilities:

- **ToHex**: values that can render themselves as hex text, collected into a
  container chosen at the call site (``str`` by default, or any callable that
  builds from an iterable of characters, such as ``list``).
- **FromHex**: types that can be constructed from hex text.

Any byte-viewable value gets ToHex through the free functions encode_hex()
and encode_hex_upper(); classes opt in to the method form by mixing in
HexEncodable. from_hex() is the generic decoding entry point: it delegates to
a FromHex type, and serves the built-in bytes and bytearray types directly.

Example:
    >>> encode_hex(b"\\x01\\xab", into=list)
    ['0', '1', 'a', 'b']
    >>> from_hex(bytearray, "6b697769")
    bytearray(b'kiwi')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from hexcodec.codec.decoding import decode
from hexcodec.codec.encoding import HexChars, encode, encode_upper

if TYPE_CHECKING:
    from hexcodec.codec.buffers import BytesLike

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Collector = Callable[[Iterable[str]], T]


@runtime_checkable
class ToHex(Protocol):
    """
    Protocol for values that can be encoded as hex text.

    Implementations render ``self`` high nibble first, two characters per
    byte, and hand the characters to ``into``.
    """

    def encode_hex(self, into: Any = str) -> Any:
        """Encode as lowercase hex (e.g. ``f9b4ca``)."""
        ...

    def encode_hex_upper(self, into: Any = str) -> Any:
        """Encode as uppercase hex (e.g. ``F9B4CA``)."""
        ...


@runtime_checkable
class FromHex(Protocol[T_co]):
    """
    Protocol for types that can be decoded from hex text.

    ``from_hex`` accepts str or bytes-like hex text in either case and
    raises FromHexError on invalid input.
    """

    @classmethod
    def from_hex(cls, data: BytesLike) -> T_co:
        """Create an instance from the given hex text."""
        ...


def encode_hex(data: BytesLike, into: Collector[T] | type[str] = str) -> T | str:
    """
    Encode any byte-viewable value as lowercase hex.

    Args:
        data: Value to encode.
        into: ``str`` (default), or a callable receiving an iterable of
            one-character strings.

    Returns:
        The collected characters.
    """
    if into is str:
        return encode(data)
    return into(HexChars(data))


def encode_hex_upper(data: BytesLike, into: Collector[T] | type[str] = str) -> T | str:
    """Like encode_hex(), using uppercase characters."""
    if into is str:
        return encode_upper(data)
    return into(HexChars(data, upper=True))


class HexEncodable:
    """
    Mixin implementing ToHex for buffer-protocol classes.

    Example:
        >>> class Digest(HexEncodable, bytes):
        ...     pass
        >>> Digest(b"\\xde\\xad").encode_hex_upper()
        'DEAD'
    """

    __slots__ = ()

    def encode_hex(self, into: Collector[T] | type[str] = str) -> T | str:
        """Encode as lowercase hex (e.g. ``f9b4ca``)."""
        return encode_hex(self, into)  # type: ignore[arg-type]

    def encode_hex_upper(self, into: Collector[T] | type[str] = str) -> T | str:
        """Encode as uppercase hex (e.g. ``F9B4CA``)."""
        return encode_hex_upper(self, into)  # type: ignore[arg-type]


def from_hex(target: type[T], data: BytesLike) -> T:
    """
    Decode hex text into an instance of ``target``.

    Args:
        target: A FromHex type, or bytes/bytearray (or a plain subclass).
        data: Hex text as str or bytes-like ASCII.

    Returns:
        Decoded instance of ``target``.

    Raises:
        FromHexError: If the hex text is invalid for the target.
        TypeError: If target cannot be built from hex.

    Example:
        >>> from_hex(bytes, "666F6F626172")
        b'foobar'
    """
    if isinstance(target, FromHex):
        return target.from_hex(data)
    if isinstance(target, type) and issubclass(target, (bytes, bytearray)):
        decoded = decode(data)
        return decoded if target is bytes else target(decoded)  # type: ignore[return-value]
    raise TypeError(f"Cannot decode hex into {target!r}")
