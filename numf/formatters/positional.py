"""Formatters for the positional bases: hex, binary, octal, decimal.

WHY: The four classic notations differ only in radix, padding group, and
whether letters appear in their digits. One shared implementation keeps
them consistent: prefix handling, zero padding, and case folding all
behave the same way everywhere.

HOW: PositionalFormatter renders digits with Python's built-in format
specs (``x``, ``b``, ``o``, ``d``), then pads to ``pad_group`` digits when
padding is on, upper-cases when the notation has letters, and finally
prepends the prefix.

RULES:
- Hex pads to an even digit count (one byte = two digits)
- Binary pads to a multiple of 8 digits
- Octal and decimal never pad (digits do not align to bytes)
- Only hex is affected by the uppercase option
- Padding goes between prefix and digits: ``0x0FFF``, never ``00xFFF``
"""

from __future__ import annotations

from typing import ClassVar

from numf.core.formats import Format
from numf.core.value import NumericValue
from numf.formatters.base import BaseFormatter, FormatOptions


class PositionalFormatter(BaseFormatter):
    """Shared implementation for radix-based notations.

    Subclasses set ``fmt``, ``spec`` (a format-spec type character), and
    optionally ``pad_group`` (digits per byte; 0 disables padding).
    """

    spec: ClassVar[str]
    pad_group: ClassVar[int] = 0
    has_letters: ClassVar[bool] = False

    def format(self, value: NumericValue, options: FormatOptions) -> str:
        digits = format(value.value, self.spec)

        if options.padding and self.pad_group:
            width = -(-len(digits) // self.pad_group) * self.pad_group
            digits = digits.zfill(width)

        if self.has_letters and options.uppercase:
            digits = digits.upper()

        return self.with_prefix(digits, options)


class HexFormatter(PositionalFormatter):
    fmt = Format.HEX
    spec = "x"
    pad_group = 2
    has_letters = True

    @property
    def name(self) -> str:
        return "Hexadecimal"


class BinFormatter(PositionalFormatter):
    fmt = Format.BIN
    spec = "b"
    pad_group = 8

    @property
    def name(self) -> str:
        return "Binary"


class OctFormatter(PositionalFormatter):
    fmt = Format.OCT
    spec = "o"

    @property
    def name(self) -> str:
        return "Octal"


class DecFormatter(PositionalFormatter):
    fmt = Format.DEC
    spec = "d"

    @property
    def name(self) -> str:
        return "Decimal"
