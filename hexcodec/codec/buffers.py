"""
Buffer protocol helpers shared by the encoder and decoder.

Inputs may be any object exposing the buffer protocol (bytes, bytearray,
memoryview, array.array, mmap, ...). Outputs must be writable buffers.
Views taken on caller buffers are released before the call returns.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Buffer

    BytesLike = Union[str, Buffer]


def byte_view(data: BytesLike) -> bytes | bytearray:
    """
    Return ``data`` as a translatable byte string.

    ``bytes`` and ``bytearray`` are returned as-is, ``str`` is encoded as
    UTF-8 and other buffers are copied.

    Raises:
        TypeError: If data does not support the buffer protocol.
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).tobytes()


@contextmanager
def writable_bytes(output: Buffer) -> Iterator[memoryview]:
    """
    Yield a flat, writable byte view of ``output``.

    Raises:
        TypeError: If output is not a writable buffer.
    """
    with memoryview(output) as view:
        if view.readonly:
            raise TypeError(f"Output buffer must be writable, got read-only {type(output).__name__}")
        with view.cast("B") as target:
            yield target
