"""
Codec layer for hex conversion.

This package contains the encode/decode primitives:
- Lookup tables and codec constants
- Encoder (owned string, caller buffer, lazy sequence)
- Streaming display view
- Decoder (owned bytes, caller buffer, in place)
- ToHex / FromHex capabilities
"""

from hexcodec.codec.constants import (
    DECODE_TABLE,
    HEX_CHARS_LOWER,
    HEX_CHARS_UPPER,
    CodecConstants,
)
from hexcodec.codec.decoding import (
    decode,
    decode_byte,
    decode_in_slice,
    decode_to_slice,
)
from hexcodec.codec.display import HexDisplay
from hexcodec.codec.encoding import (
    HexChars,
    encode,
    encode_byte,
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

__all__ = [
    # Constants
    "CodecConstants",
    "HEX_CHARS_LOWER",
    "HEX_CHARS_UPPER",
    "DECODE_TABLE",
    # Encoding
    "encode",
    "encode_upper",
    "encode_to_slice",
    "encode_upper_to_slice",
    "encode_to_iter",
    "encode_byte",
    "HexChars",
    "HexDisplay",
    # Decoding
    "decode",
    "decode_to_slice",
    "decode_in_slice",
    "decode_byte",
    # Capabilities
    "ToHex",
    "FromHex",
    "HexEncodable",
    "encode_hex",
    "encode_hex_upper",
    "from_hex",
]
