"""Output formatter registry, one formatter per notation.

WHY: The CLI needs a single lookup to find the right formatter for the
requested notation. A central dict makes it trivial to add new
notations: create the formatter class, import it here, add one line.

HOW: FORMATTERS maps Format members to formatter *classes* (not
instances). format_number() is the convenience entry point that looks
up, instantiates, and runs the formatter in one call.

RULES:
- Every Format member has exactly one formatter registered here
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import Optional

from numf.core.formats import Format
from numf.core.value import NumericValue
from numf.formatters.base import BaseFormatter, FormatOptions
from numf.formatters.encoded import Base32Formatter, Base64Formatter, RawFormatter
from numf.formatters.positional import BinFormatter, DecFormatter, HexFormatter, OctFormatter

FORMATTERS: dict[Format, type[BaseFormatter]] = {
    Format.HEX: HexFormatter,
    Format.BIN: BinFormatter,
    Format.OCT: OctFormatter,
    Format.DEC: DecFormatter,
    Format.BASE64: Base64Formatter,
    Format.BASE32: Base32Formatter,
    Format.RAW: RawFormatter,
}


def format_number(
    value: NumericValue,
    fmt: Format,
    options: Optional[FormatOptions] = None,
) -> str | bytes:
    """Render value in the notation fmt.

    Args:
        value: The number to render.
        fmt: Target notation.
        options: Prefix, padding, and case switches; defaults to
                 FormatOptions() (bare upper-case digits).
    """
    formatter = FORMATTERS[fmt]()
    return formatter.format(value, options if options is not None else FormatOptions())
