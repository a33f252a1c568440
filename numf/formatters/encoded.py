"""Formatters for the byte-oriented notations: base64, base32, raw.

WHY: Keys, hashes, and tokens are often handed around as base64 or
base32 text, or as plain bytes. These notations encode the value's bytes
rather than its digits, so they share the NumericValue byte view instead
of a radix.

HOW: The value is converted to its minimal big-endian bytes and passed
to the RFC 4648 encoders in the standard library's base64 module. Raw
output returns the bytes untouched.

RULES:
- Encoded output always includes ``=`` padding (RFC 4648)
- The padding and uppercase options are ignored; output is byte aligned
  and base64 case is significant
- Raw output is bytes and never carries a prefix
"""

from __future__ import annotations

import base64

from numf.core.formats import Format
from numf.core.value import NumericValue
from numf.formatters.base import BaseFormatter, FormatOptions


class Base64Formatter(BaseFormatter):
    fmt = Format.BASE64

    @property
    def name(self) -> str:
        return "Base64"

    def format(self, value: NumericValue, options: FormatOptions) -> str:
        encoded = base64.b64encode(value.to_bytes()).decode("ascii")
        return self.with_prefix(encoded, options)


class Base32Formatter(BaseFormatter):
    fmt = Format.BASE32

    @property
    def name(self) -> str:
        return "Base32"

    def format(self, value: NumericValue, options: FormatOptions) -> str:
        encoded = base64.b32encode(value.to_bytes()).decode("ascii")
        return self.with_prefix(encoded, options)


class RawFormatter(BaseFormatter):
    """Emits the value's big-endian bytes with no text encoding at all."""

    fmt = Format.RAW

    @property
    def name(self) -> str:
        return "Raw bytes"

    def format(self, value: NumericValue, options: FormatOptions) -> bytes:
        return value.to_bytes()
