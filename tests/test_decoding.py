"""Tests for hex decoding."""

import pytest

from hexcodec.codec.decoding import decode, decode_byte, decode_in_slice, decode_to_slice
from hexcodec.exceptions import InvalidHexCharacter, InvalidStringLength, OddLength


class TestDecode:
    """Tests for decode."""

    def test_decode(self):
        """Test decoding lowercase hex."""
        assert decode("666f6f626172") == b"foobar"

    def test_decode_upper(self):
        """Test decoding uppercase hex."""
        assert decode("666F6F626172") == b"foobar"

    def test_decode_bytes_input(self):
        """Test decoding bytes-like hex text."""
        assert decode(b"666f6f626172") == b"foobar"
        assert decode(bytearray(b"666F6F626172")) == b"foobar"
        assert decode(memoryview(b"6b697769")) == b"kiwi"

    def test_mixed_case(self):
        """Test that case can be mixed, even within one byte."""
        assert decode("aB") == decode("AB") == decode("ab") == b"\xab"
        assert decode("f9B4Ca") == b"\xf9\xb4\xca"

    def test_empty(self):
        """Test that empty input decodes to empty bytes."""
        assert decode("") == b""
        assert decode(b"") == b""

    def test_returns_bytes(self):
        """Test that the result is an owned bytes object."""
        assert type(decode(bytearray(b"00"))) is bytes

    def test_odd_length(self):
        """Test that odd length is rejected."""
        with pytest.raises(OddLength):
            decode("1")
        with pytest.raises(OddLength):
            decode("666f6f6261721")

    def test_odd_length_checked_before_characters(self):
        """Test that odd length wins over invalid characters."""
        with pytest.raises(OddLength):
            decode("zzz")

    def test_invalid_char(self):
        """Test the first invalid character and its index are reported."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("66ag")
        assert exc_info.value == InvalidHexCharacter("g", 3)
        assert exc_info.value.c == "g"
        assert exc_info.value.index == 3

    def test_whitespace_is_invalid(self):
        """Test that whitespace is not skipped."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("666f 6f62617")
        assert exc_info.value == InvalidHexCharacter(" ", 4)

    def test_high_character_reported_first(self):
        """Test that the high nibble wins when both characters are invalid."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("00zy")
        assert exc_info.value == InvalidHexCharacter("z", 2)

    def test_first_of_several_invalid(self):
        """Test that only the leftmost invalid character is reported."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("0g0h")
        assert exc_info.value == InvalidHexCharacter("g", 1)

    def test_non_ascii_text(self):
        """Test that indices count characters of str input."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("00é0")
        assert exc_info.value == InvalidHexCharacter("é", 2)

        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode("0€")
        assert exc_info.value == InvalidHexCharacter("€", 1)

    def test_non_ascii_bytes(self):
        """Test that indices count bytes of bytes input."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode(b"0\xff")
        assert exc_info.value == InvalidHexCharacter("\xff", 1)


class TestDecodeToSlice:
    """Tests for decoding into caller-owned buffers."""

    def test_decode_to_slice(self):
        """Test decoding into an exactly sized buffer."""
        output = bytearray(4)
        decode_to_slice("6b697769", output)
        assert output == b"kiwi"

    def test_memoryview_output(self):
        """Test decoding into a writable memoryview."""
        backing = bytearray(6)
        decode_to_slice(b"6b697769", memoryview(backing)[1:5])
        assert backing == b"\x00kiwi\x00"

    def test_wrong_size(self):
        """Test that a mismatched buffer is rejected without writing."""
        output = bytearray(b"\x11" * 5)
        with pytest.raises(InvalidStringLength):
            decode_to_slice("6b697769", output)
        assert output == b"\x11" * 5

    def test_odd_length_checked_before_size(self):
        """Test that odd length wins over a size mismatch."""
        with pytest.raises(OddLength):
            decode_to_slice("123", bytearray(5))

    def test_size_checked_before_characters(self):
        """Test that a size mismatch wins over invalid characters."""
        with pytest.raises(InvalidStringLength):
            decode_to_slice("zz", bytearray(2))

    def test_invalid_char_leaves_output_untouched(self):
        """Test that no partial output is written on a character error."""
        output = bytearray(b"\x11\x11")
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode_to_slice("00zz", output)
        assert exc_info.value == InvalidHexCharacter("z", 2)
        assert output == b"\x11\x11"

    def test_readonly_output_raises(self):
        """Test that a read-only buffer is rejected."""
        with pytest.raises(TypeError):
            decode_to_slice("6b697769", bytes(4))


class TestDecodeInSlice:
    """Tests for in-place decoding."""

    def test_decode_in_slice(self):
        """Test decoding into the first half of the same buffer."""
        buffer = bytearray(b"6b697769")
        decode_in_slice(buffer)
        assert buffer[:4] == b"kiwi"
        assert len(buffer) == 8

    def test_empty(self):
        """Test in-place decoding of an empty buffer."""
        buffer = bytearray()
        decode_in_slice(buffer)
        assert buffer == b""

    def test_odd_length(self):
        """Test that an odd-length buffer is rejected."""
        buffer = bytearray(b"123")
        with pytest.raises(OddLength):
            decode_in_slice(buffer)
        assert buffer == b"123"

    def test_invalid_char_leaves_buffer_untouched(self):
        """Test that the buffer is unchanged on error."""
        buffer = bytearray(b"6b6g")
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode_in_slice(buffer)
        assert exc_info.value == InvalidHexCharacter("g", 3)
        assert buffer == b"6b6g"

    def test_readonly_buffer_raises(self):
        """Test that a read-only buffer is rejected."""
        with pytest.raises(TypeError):
            decode_in_slice(b"6b697769")


class TestDecodeByte:
    """Tests for single byte decoding."""

    def test_decode_byte(self):
        """Test decoding two characters in either case."""
        assert decode_byte("8F") == 0x8F
        assert decode_byte(b"8f") == 0x8F
        assert decode_byte("00") == 0

    def test_decode_byte_wrong_length(self):
        """Test that anything but two characters is rejected."""
        with pytest.raises(InvalidStringLength):
            decode_byte("8")
        with pytest.raises(InvalidStringLength):
            decode_byte("8FF")

    def test_decode_byte_invalid(self):
        """Test that invalid characters are reported."""
        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode_byte("8x")
        assert exc_info.value == InvalidHexCharacter("x", 1)
