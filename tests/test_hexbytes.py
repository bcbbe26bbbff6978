"""
Tests for hyphen-separated hex byte strings.
"""

import pytest

from convertkit.converters import ConversionError
from convertkit.hexbytes import hex_with_separator_to_bytes, bytes_to_hex_with_separator


class TestParse:

    def test_basic(self):
        assert hex_with_separator_to_bytes("0A-1B-FF") == bytes([0x0A, 0x1B, 0xFF])

    def test_single_digit_and_lowercase(self):
        assert hex_with_separator_to_bytes("a-1b-ff") == bytes([0x0A, 0x1B, 0xFF])

    def test_single_segment(self):
        assert hex_with_separator_to_bytes("7F") == b"\x7f"

    def test_segment_whitespace(self):
        assert hex_with_separator_to_bytes(" 0a - ff ") == b"\x0a\xff"

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank(self, value):
        assert hex_with_separator_to_bytes(value) is None

    @pytest.mark.parametrize("value", ["0A--FF", "100", "GG", "0A-", "0x0A", "0A 1B"])
    def test_invalid(self, value):
        with pytest.raises(ConversionError):
            hex_with_separator_to_bytes(value)


class TestRender:

    def test_no_zero_padding(self):
        assert bytes_to_hex_with_separator(bytes([0x0A, 0x1B, 0xFF])) == "A-1B-FF"

    def test_zero_byte(self):
        assert bytes_to_hex_with_separator(b"\x00\x10") == "0-10"

    def test_empty(self):
        assert bytes_to_hex_with_separator(b"") == ""

    def test_int_sequences(self):
        assert bytes_to_hex_with_separator([10, 27, 255]) == "A-1B-FF"
        assert bytes_to_hex_with_separator(bytearray([1, 2])) == "1-2"

    @pytest.mark.parametrize("value", [[256], [-1], [True], "abc", None, 5])
    def test_invalid(self, value):
        with pytest.raises(ConversionError):
            bytes_to_hex_with_separator(value)


def test_render_then_parse_keeps_every_byte():
    data = bytes(range(256))
    assert hex_with_separator_to_bytes(bytes_to_hex_with_separator(data)) == data
