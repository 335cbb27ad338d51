"""
Exception hierarchy for hexcodec.

All exceptions inherit from HexCodecError, providing a clean hierarchy
for error handling. The design follows these principles:

1. Decode failures form a closed set rooted at FromHexError
2. FromHexError is also a ValueError, so generic validation layers
   (e.g. pydantic) treat it as a rejected value
3. Character errors carry the offending character and its index in the
   caller's original input
4. Errors compare by value, so an expected error can be asserted directly
"""

from __future__ import annotations

from typing import ClassVar


class HexCodecError(Exception):
    """
    Base exception for all hexcodec errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all hexcodec errors with a single except clause.
    """

    pass


class FromHexError(HexCodecError, ValueError):
    """
    Hex codec failure.

    Root of the closed error taxonomy shared by the encoder and the decoder.
    Only the three subclasses below are ever raised.
    """

    description: ClassVar[str] = "hex codec error"
    """Short lowercase description of the error kind."""

    def _key(self) -> tuple[object, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class InvalidHexCharacter(FromHexError):
    """
    An invalid character was found.

    Valid characters are ``0-9``, ``a-f`` and ``A-F``. The ``index`` is the
    zero-based position of ``c`` in the original input text.
    """

    description = "invalid character"

    def __init__(self, c: str, index: int) -> None:
        super().__init__(c, index)
        self.c = c
        self.index = index

    def _key(self) -> tuple[object, ...]:
        return (self.c, self.index)

    def __str__(self) -> str:
        return f"Invalid character {self.c!r} at position {self.index}"

    def __repr__(self) -> str:
        return f"InvalidHexCharacter(c={self.c!r}, index={self.index})"


class OddLength(FromHexError):
    """
    A hex string's length needs to be even, as two digits correspond to
    one byte.
    """

    description = "odd number of digits"

    def __str__(self) -> str:
        return "Odd number of digits"

    def __repr__(self) -> str:
        return "OddLength()"


class InvalidStringLength(FromHexError):
    """
    Output size mismatch.

    Raised when a fixed-size target does not match the input: a decode
    target must hold exactly ``len(text) // 2`` bytes, an encode target
    exactly ``len(data) * 2`` characters.
    """

    description = "invalid string length"

    def __str__(self) -> str:
        return "Invalid string length"

    def __repr__(self) -> str:
        return "InvalidStringLength()"


class ParseError(HexCodecError):
    """
    Record reading error.

    Raised by HexReader when a read, peek or seek falls outside the
    available data.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset

    def __str__(self) -> str:
        base = super().__str__()
        if self.offset is not None:
            return f"{base} offset={self.offset}"
        return base
