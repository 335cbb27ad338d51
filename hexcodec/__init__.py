"""
hexcodec - Encoding and decoding data into/from hexadecimal representation.

For most cases, use the encode(), encode_upper() and decode() functions. For
more control over the output, use encode_to_slice(), decode_to_slice(), the
lazy HexChars sequence, the streaming HexDisplay view, or the ToHex and
FromHex capabilities.

Example:
    >>> import hexcodec
    >>> hexcodec.encode("Hello world!")
    '48656c6c6f20776f726c6421'
    >>> hexcodec.decode("48656C6C6F20776F726C6421")
    b'Hello world!'
    >>> hexcodec.decode("66ag")
    Traceback (most recent call last):
        ...
    hexcodec.exceptions.InvalidHexCharacter: Invalid character 'g' at position 3
"""

from hexcodec.codec.decoding import decode, decode_in_slice, decode_to_slice
from hexcodec.codec.display import HexDisplay
from hexcodec.codec.encoding import (
    HexChars,
    encode,
    encode_to_iter,
    encode_to_slice,
    encode_upper,
    encode_upper_to_slice,
)
from hexcodec.codec.traits import (
    FromHex,
    HexEncodable,
    ToHex,
    encode_hex,
    encode_hex_upper,
    from_hex,
)
from hexcodec.exceptions import (
    FromHexError,
    HexCodecError,
    InvalidHexCharacter,
    InvalidStringLength,
    OddLength,
    ParseError,
)
from hexcodec.models.containers import FixedBytes, HexBuffer

__version__ = "0.4.3"
__all__ = [
    # Encoding
    "encode",
    "encode_upper",
    "encode_to_slice",
    "encode_upper_to_slice",
    "encode_to_iter",
    "HexChars",
    "HexDisplay",
    # Decoding
    "decode",
    "decode_to_slice",
    "decode_in_slice",
    # Capabilities
    "ToHex",
    "FromHex",
    "HexEncodable",
    "encode_hex",
    "encode_hex_upper",
    "from_hex",
    # Containers
    "HexBuffer",
    "FixedBytes",
    # Exceptions
    "HexCodecError",
    "FromHexError",
    "InvalidHexCharacter",
    "OddLength",
    "InvalidStringLength",
    "ParseError",
    # Version
    "__version__",
]
