"""
Streaming hex display view.

HexDisplay renders a byte string as hex text straight into a text sink
(a file, io.StringIO, sys.stdout, ...) without building the full result
string. The input is processed in chunks of CodecConstants.DISPLAY_CHUNK_SIZE
bytes through one fixed local buffer. The buffer only ever receives ASCII hex
digits, so decoding it as ASCII cannot fail.

Example:
    >>> import io
    >>> sink = io.StringIO()
    >>> HexDisplay(b"kiwi").write_to(sink)
    8
    >>> sink.getvalue()
    '6b697769'
    >>> f"{HexDisplay(b'kiwi'):X}"
    '6B697769'
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from hexcodec.codec.buffers import byte_view
from hexcodec.codec.constants import CodecConstants
from hexcodec.codec.encoding import interleave_into, nibble_tables

if TYPE_CHECKING:
    from hexcodec.codec.buffers import BytesLike


class TextSink(Protocol):
    """Anything with a ``write(str)`` method."""

    def write(self, text: str, /) -> object: ...


class HexDisplay:
    """
    Formatting view over a byte string.

    The view keeps a reference to the data and renders it on demand,
    either in the case chosen at construction (``str()``, ``write_to()``)
    or in the case requested by a format spec (``x`` or ``X``).
    """

    __slots__ = ("_data", "_upper")

    def __init__(self, data: BytesLike, *, upper: bool = False) -> None:
        self._data = byte_view(data)
        self._upper = upper

    @property
    def upper(self) -> bool:
        """Whether str() and write_to() render uppercase characters."""
        return self._upper

    def __len__(self) -> int:
        """Return the rendered length in characters."""
        return len(self._data) * CodecConstants.CHARS_PER_BYTE

    def chunks(self, *, upper: bool | None = None) -> Iterator[str]:
        """
        Yield the hex text chunk by chunk.

        Args:
            upper: Override the view's case for this rendering.

        Yields:
            Strings of at most ``2 * DISPLAY_CHUNK_SIZE`` characters.
        """
        high, low = nibble_tables(self._upper if upper is None else upper)
        size = CodecConstants.DISPLAY_CHUNK_SIZE
        buffer = bytearray(size * CodecConstants.CHARS_PER_BYTE)

        for start in range(0, len(self._data), size):
            chunk = self._data[start : start + size]
            if len(chunk) < size:
                # last chunk
                del buffer[len(chunk) * CodecConstants.CHARS_PER_BYTE :]
            interleave_into(buffer, chunk, high, low)
            yield buffer.decode("ascii")

    def write_to(self, sink: TextSink) -> int:
        """
        Write the hex text into ``sink``.

        Args:
            sink: Object with a ``write(str)`` method.

        Returns:
            Number of characters written.
        """
        written = 0
        for chunk in self.chunks():
            sink.write(chunk)
            written += len(chunk)
        return written

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            upper = self._upper
        elif format_spec == "x":
            upper = False
        elif format_spec == "X":
            upper = True
        else:
            raise ValueError(f"Invalid format specifier {format_spec!r} for HexDisplay")
        return "".join(self.chunks(upper=upper))

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"HexDisplay({len(self._data)} bytes, upper={self._upper})"
