"""Tests for the ToHex/FromHex capabilities and containers."""

import pickle
from collections import deque

import pytest

from hexcodec import FixedBytes, HexBuffer
from hexcodec.codec.traits import (
    FromHex,
    HexEncodable,
    ToHex,
    encode_hex,
    encode_hex_upper,
    from_hex,
)
from hexcodec.exceptions import InvalidHexCharacter, InvalidStringLength, OddLength


class CharCollector:
    """Custom container built from an iterable of characters."""

    def __init__(self, chars):
        self.chars = "".join(chars)


class TestToHex:
    """Tests for the encode-as-hex capability."""

    def test_encode_hex_default_str(self):
        """Test that str is the default container."""
        assert encode_hex(b"foobar") == "666f6f626172"
        assert encode_hex_upper("foobar") == "666F6F626172"

    def test_encode_hex_into_containers(self):
        """Test collecting into caller-chosen containers."""
        assert encode_hex(b"\x01\xab", into=list) == ["0", "1", "a", "b"]
        assert encode_hex_upper(bytearray(b"\xff"), into=tuple) == ("F", "F")
        assert encode_hex(b"\x0f", into=deque) == deque(["0", "f"])
        assert encode_hex(b"kiwi", into=CharCollector).chars == "6b697769"

    def test_mixin(self):
        """Test HexEncodable on a custom bytes subclass."""

        class Digest(HexEncodable, bytes):
            pass

        digest = Digest(b"\xde\xad")
        assert digest.encode_hex() == "dead"
        assert digest.encode_hex_upper() == "DEAD"
        assert digest.encode_hex(into=list) == ["d", "e", "a", "d"]
        assert isinstance(digest, ToHex)

    def test_protocol_check(self):
        """Test runtime protocol checks."""
        assert isinstance(HexBuffer(), ToHex)
        assert isinstance(FixedBytes[2](b"ab"), ToHex)
        assert not isinstance(b"ab", ToHex)


class TestFromHex:
    """Tests for the construct-from-hex capability."""

    def test_from_hex_bytes(self):
        """Test decoding into built-in byte types."""
        assert from_hex(bytes, "666f6f626172") == b"foobar"
        result = from_hex(bytearray, b"666F6F626172")
        assert type(result) is bytearray
        assert result == b"foobar"

    def test_from_hex_delegates(self):
        """Test decoding into FromHex implementations."""
        buffer = from_hex(HexBuffer, "6b697769")
        assert type(buffer) is HexBuffer
        assert buffer == b"kiwi"

        fixed = from_hex(FixedBytes[4], "6b697769")
        assert type(fixed) is FixedBytes[4]

    def test_from_hex_unsupported_target(self):
        """Test that targets without the capability are rejected."""
        with pytest.raises(TypeError):
            from_hex(int, "00")
        with pytest.raises(TypeError):
            from_hex(str, "00")

    def test_protocol_check(self):
        """Test runtime protocol checks on types."""
        assert isinstance(HexBuffer, FromHex)
        assert isinstance(FixedBytes[4], FromHex)
        assert not isinstance(bytes, FromHex)

    def test_errors_propagate(self):
        """Test that decode errors reach the caller unchanged."""
        with pytest.raises(OddLength):
            from_hex(bytes, "1")
        with pytest.raises(InvalidHexCharacter) as exc_info:
            from_hex(HexBuffer, "66ag")
        assert exc_info.value == InvalidHexCharacter("g", 3)


class TestHexBuffer:
    """Tests for the growable HexBuffer."""

    def test_from_hex(self):
        """Test decoding and growing the buffer."""
        buffer = HexBuffer.from_hex("48656c6c6f")
        buffer.extend(b"!")
        assert buffer == b"Hello!"
        assert buffer.encode_hex() == "48656c6c6f21"
        assert buffer.encode_hex_upper() == "48656C6C6F21"

    def test_empty(self):
        """Test decoding empty text."""
        assert HexBuffer.from_hex("") == b""

    def test_repr(self):
        """Test the debug representation."""
        assert repr(HexBuffer(b"ab")) == "HexBuffer(b'ab')"


class TestFixedBytes:
    """Tests for the fixed-size FixedBytes[N] container."""

    def test_from_hex_array(self):
        """Test decoding into a correctly sized array."""
        value = FixedBytes[6].from_hex("666f6f626172")
        assert value == bytes([0x66, 0x6F, 0x6F, 0x62, 0x61, 0x72])
        assert isinstance(value, FixedBytes)
        assert isinstance(value, bytes)

    def test_from_hex_wrong_size(self):
        """Test that a size mismatch is InvalidStringLength."""
        with pytest.raises(InvalidStringLength):
            FixedBytes[5].from_hex("666f6f626172")
        with pytest.raises(InvalidStringLength):
            FixedBytes[7].from_hex("666f6f626172")

    def test_from_hex_odd_length(self):
        """Test that odd length is reported before the size mismatch."""
        with pytest.raises(OddLength):
            FixedBytes[6].from_hex("666f6f62617")

    def test_from_hex_invalid_char(self):
        """Test character errors for a correctly sized input."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            FixedBytes[2].from_hex("0x00")
        assert exc_info.value == InvalidHexCharacter("x", 1)

    def test_zero_size(self):
        """Test the empty specialization."""
        assert FixedBytes[0].from_hex("") == b""

    def test_specializations_are_cached(self):
        """Test that each size maps to one class."""
        assert FixedBytes[32] is FixedBytes[32]
        assert FixedBytes[32] is not FixedBytes[16]
        assert FixedBytes[32].size == 32
        assert FixedBytes.size is None
        assert FixedBytes[32].__name__ == "FixedBytes[32]"

    def test_construct(self):
        """Test direct construction checks the size."""
        assert FixedBytes[3]() == b"\x00\x00\x00"
        assert FixedBytes[3](b"abc") == b"abc"
        with pytest.raises(InvalidStringLength):
            FixedBytes[3](b"ab")

    def test_construct_rejects_non_bytes(self):
        """Test that ints and strs are not accepted as values."""
        with pytest.raises(TypeError):
            FixedBytes[3](3)
        with pytest.raises(TypeError):
            FixedBytes[3]("abc")

    def test_unspecialized(self):
        """Test that FixedBytes needs a size."""
        with pytest.raises(TypeError):
            FixedBytes(b"abc")
        with pytest.raises(TypeError):
            FixedBytes.from_hex("00")

    def test_invalid_sizes(self):
        """Test specialization argument checks."""
        with pytest.raises(TypeError):
            FixedBytes["6"]
        with pytest.raises(TypeError):
            FixedBytes[True]
        with pytest.raises(ValueError):
            FixedBytes[-1]
        with pytest.raises(TypeError):
            FixedBytes[6][2]

    def test_encode_hex(self):
        """Test ToHex on a fixed array."""
        value = FixedBytes[2](b"\xde\xad")
        assert value.encode_hex() == "dead"
        assert value.encode_hex_upper() == "DEAD"

    def test_repr(self):
        """Test the debug representation."""
        assert repr(FixedBytes[6](b"foobar")) == "FixedBytes[6](b'foobar')"

    def test_pickle(self):
        """Test that specialized values survive pickling."""
        value = FixedBytes[6](b"foobar")
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert type(restored) is FixedBytes[6]
