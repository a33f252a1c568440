"""Unit tests for the value type and all formatter modules.

WHY: Each formatter renders the same NumericValue in a different
notation. A padding or case slip silently produces output that looks
plausible but reads as a different number.

HOW: Tests check each formatter against hand-computed vectors, the
prefix/padding/case options, the registry, and the parse-after-format
round trip for every text notation.

RULES:
- Vectors for base32/base64 and padding match the original numf tool
- Default options render upper-case hex with no prefix and no padding
"""

import pytest

from numf.core.formats import Format
from numf.core.parser import parse_number
from numf.core.value import NumericValue
from numf.formatters import FORMATTERS, format_number
from numf.formatters.base import BaseFormatter, FormatOptions
from numf.formatters.encoded import Base32Formatter, Base64Formatter, RawFormatter
from numf.formatters.positional import BinFormatter, DecFormatter, HexFormatter, OctFormatter

DEFAULT = FormatOptions()
PADDED = FormatOptions(padding=True)
PREFIXED = FormatOptions(prefix=True)


class TestNumericValue:
    """NumericValue invariants and byte view."""

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            NumericValue(-1)

    def test_is_immutable(self):
        value = NumericValue(1)
        with pytest.raises(AttributeError):
            value.value = 2

    def test_zero_has_one_byte(self):
        assert NumericValue(0).to_bytes() == b"\x00"

    def test_minimal_big_endian(self):
        assert NumericValue(0x0100).to_bytes() == b"\x01\x00"
        assert NumericValue(0xFF).to_bytes() == b"\xff"

    def test_from_bytes(self):
        assert NumericValue.from_bytes(b"\x00\x05\x39").value == 1337
        assert NumericValue.from_bytes(b"").value == 0

    def test_int_conversion(self):
        assert int(NumericValue(42)) == 42


class TestPositionalFormatters:
    """Hex, binary, octal and decimal output."""

    def test_decimal(self):
        assert DecFormatter().format(NumericValue(1337), DEFAULT) == "1337"

    def test_decimal_huge(self):
        value = 2 ** 128 - 1
        assert DecFormatter().format(NumericValue(value), DEFAULT) == str(value)

    def test_hex(self):
        assert HexFormatter().format(NumericValue(0x1337), DEFAULT) == "1337"
        assert HexFormatter().format(NumericValue(0xBEEF), DEFAULT) == "BEEF"

    def test_hex_lowercase(self):
        options = FormatOptions(uppercase=False)
        assert HexFormatter().format(NumericValue(0xBEEF), options) == "beef"

    def test_binary(self):
        value = NumericValue(0b1010001001010010010100111)
        assert BinFormatter().format(value, DEFAULT) == "1010001001010010010100111"

    def test_octal(self):
        assert OctFormatter().format(NumericValue(0o13377331), DEFAULT) == "13377331"

    def test_zero(self):
        for formatter in (HexFormatter(), BinFormatter(), OctFormatter(), DecFormatter()):
            assert formatter.format(NumericValue(0), DEFAULT) == "0"

    def test_prefixes(self):
        value = NumericValue(1337)
        assert HexFormatter().format(value, PREFIXED) == "0x539"
        assert BinFormatter().format(value, PREFIXED) == "0b10100111001"
        assert OctFormatter().format(value, PREFIXED) == "0o2471"
        assert DecFormatter().format(value, PREFIXED) == "0d1337"

    def test_prefix_stays_lowercase(self):
        assert HexFormatter().format(NumericValue(0xAB), PREFIXED) == "0xAB"


class TestPadding:
    """Padding aligns hex and binary output to whole bytes."""

    def test_hex_odd_digit_count(self):
        assert HexFormatter().format(NumericValue(0xFFF), PADDED) == "0FFF"

    def test_hex_even_digit_count_unchanged(self):
        assert HexFormatter().format(NumericValue(0xFFFF), PADDED) == "FFFF"

    def test_binary_pads_to_eight(self):
        assert BinFormatter().format(NumericValue(0b110000_00001111), PADDED) == "0011000000001111"
        assert BinFormatter().format(NumericValue(0b1100), PADDED) == "00001100"

    def test_binary_full_bytes_unchanged(self):
        value = NumericValue(0b11110000_00001111)
        assert BinFormatter().format(value, PADDED) == "1111000000001111"

    def test_octal_and_decimal_never_pad(self):
        assert OctFormatter().format(NumericValue(0o13377331), PADDED) == "13377331"
        assert DecFormatter().format(NumericValue(1337), PADDED) == "1337"

    def test_padding_goes_after_prefix(self):
        options = FormatOptions(prefix=True, padding=True)
        assert HexFormatter().format(NumericValue(0xFFF), options) == "0x0FFF"
        assert BinFormatter().format(NumericValue(0b1100), options) == "0b00001100"


class TestEncodedFormatters:
    """Base64, base32 and raw output."""

    def test_base64(self):
        assert Base64Formatter().format(NumericValue(0x41414242), DEFAULT) == "QUFCQg=="
        assert Base64Formatter().format(NumericValue(0x4141414141414141), DEFAULT) == "QUFBQUFBQUE="

    def test_base32(self):
        assert Base32Formatter().format(NumericValue(0x41414242), DEFAULT) == "IFAUEQQ="
        assert Base32Formatter().format(NumericValue(0x4141414141414141), DEFAULT) == "IFAUCQKBIFAUC==="

    def test_prefixes(self):
        value = NumericValue(1337)
        assert Base64Formatter().format(value, PREFIXED) == "0sBTk="
        assert Base32Formatter().format(value, PREFIXED) == "032sAU4Q===="

    def test_base64_ignores_uppercase_option(self):
        """Base64 is case sensitive, so the case switch must not touch it."""
        options = FormatOptions(uppercase=False)
        assert Base64Formatter().format(NumericValue(0x41414242), options) == "QUFCQg=="

    def test_zero(self):
        assert Base64Formatter().format(NumericValue(0), DEFAULT) == "AA=="

    def test_raw(self):
        assert RawFormatter().format(NumericValue(0x414243), DEFAULT) == b"ABC"

    def test_raw_ignores_prefix(self):
        assert RawFormatter().format(NumericValue(0x41), PREFIXED) == b"A"


class TestRegistry:
    """FORMATTERS covers every notation exactly once."""

    def test_every_format_registered(self):
        assert set(FORMATTERS) == set(Format)

    def test_registered_classes_match_their_format(self):
        for fmt, cls in FORMATTERS.items():
            assert issubclass(cls, BaseFormatter)
            assert cls.fmt is fmt
            assert cls().name

    def test_format_number_defaults(self):
        assert format_number(NumericValue(0xBEEF), Format.HEX) == "BEEF"

    def test_format_number_with_options(self):
        assert format_number(NumericValue(1337), Format.HEX, PREFIXED) == "0x539"


class TestRoundTrip:
    """Formatting with a prefix and parsing back yields the same value."""

    def test_text_notations(self, sample_values):
        options = FormatOptions(prefix=True, padding=True)
        for fmt in (Format.HEX, Format.BIN, Format.OCT, Format.DEC, Format.BASE64, Format.BASE32):
            for number in sample_values:
                rendered = format_number(NumericValue(number), fmt, options)
                assert parse_number(rendered) == NumericValue(number), (fmt, rendered)

    def test_hex_case_normalized(self):
        value = parse_number("0xAbCdEf")
        assert format_number(value, Format.HEX, FormatOptions(uppercase=True)) == "ABCDEF"
        assert format_number(value, Format.HEX, FormatOptions(uppercase=False)) == "abcdef"

    def test_raw_bytes(self, sample_values):
        for number in sample_values:
            rendered = format_number(NumericValue(number), Format.RAW)
            assert parse_number(rendered, Format.RAW) == NumericValue(number), rendered
