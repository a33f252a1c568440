"""Number parsing: base detection and digit decoding.

WHY: Users paste numbers in whatever notation they happen to have:
``1337``, ``0x539``, ``0b10100111001``, ``0sBTk=``. The parser turns any
of them into one NumericValue so the formatters never care where a
value came from.

HOW: Without an explicit format the token is matched against the known
prefixes (decimal needs none). The prefix and any underscores are then
removed, every remaining character is checked against the format's
alphabet, and the digits are decoded: int() for positional bases, the
base64 module for base32/base64, UTF-8 bytes for raw.

RULES:
- Surrounding whitespace is ignored; an empty token raises EmptyInput
- A bare prefix (``0x``, ``0x__``) raises EmptyInput
- Plain decimal digits need no prefix; ``0d`` is accepted as well
- Prefixes are case sensitive: ``0X1F`` is not hexadecimal
- With an explicit format its own prefix is optional
- The first character outside the alphabet raises InvalidDigit
- Raw tokens are taken verbatim: no stripping, no underscore removal;
  bytes are accepted as-is so any byte sequence round-trips
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from numf.core.errors import EmptyInput, InvalidDigit, UnknownBasePrefix
from numf.core.formats import DETECTION_ORDER, Format
from numf.core.value import NumericValue

logger = logging.getLogger(__name__)

_SEPARATOR = "_"


def _is_plain_decimal(token: str) -> bool:
    digits = token.replace(_SEPARATOR, "")
    return digits.isascii() and digits.isdigit()


def detect_format(token: str) -> Format:
    """Detect the notation of a token from its prefix.

    Decimal wins for tokens made only of digits and underscores, so
    ``032`` is thirty-two rather than an incomplete base32 prefix.

    Raises:
        UnknownBasePrefix: If no known prefix matches.
    """
    if token.startswith(Format.DEC.prefix) or _is_plain_decimal(token):
        return Format.DEC
    for fmt in DETECTION_ORDER:
        if token.startswith(fmt.prefix):
            return fmt
    raise UnknownBasePrefix(token)


def _strip_prefix(token: str, fmt: Format) -> str:
    if fmt.prefix and token.startswith(fmt.prefix):
        return token[len(fmt.prefix):]
    return token


def _check_alphabet(token: str, digits: str, fmt: Format) -> None:
    for position, char in enumerate(digits):
        if char not in fmt.alphabet:
            raise InvalidDigit(token, fmt, char=char, position=position)


def _decode(token: str, digits: str, fmt: Format) -> NumericValue:
    if fmt.is_positional:
        return NumericValue(int(digits, fmt.radix))

    try:
        if fmt is Format.BASE64:
            raw = base64.b64decode(digits, validate=True)
        else:
            raw = base64.b32decode(digits)
    except binascii.Error as e:
        raise InvalidDigit(token, fmt, detail=str(e)) from e
    return NumericValue.from_bytes(raw)


def parse_number(token: str | bytes, fmt: Optional[Format] = None) -> NumericValue:
    """Parse one token into a NumericValue.

    Args:
        token: The number as typed by the user, e.g. ``"0xdead_beef"``.
               Raw tokens may be bytes; str raw tokens are UTF-8 encoded,
               with undecodable argv bytes restored via surrogateescape.
        fmt: Force this notation instead of detecting it from the prefix.

    Returns:
        The parsed value.

    Raises:
        EmptyInput: The token is empty or has no digits after its prefix.
        UnknownBasePrefix: fmt is None and no prefix matched.
        InvalidDigit: A character is outside the notation's alphabet, or
                      base32/base64 digits are malformed.
    """
    if fmt is Format.RAW:
        if not token:
            raise EmptyInput()
        if isinstance(token, str):
            token = token.encode("utf-8", "surrogateescape")
        return NumericValue.from_bytes(token)

    cleaned = token.strip()
    if not cleaned:
        raise EmptyInput()
    if not cleaned.replace(_SEPARATOR, ""):
        raise EmptyInput(cleaned)

    if fmt is None:
        fmt = detect_format(cleaned)
        logger.debug("Detected %s for %r", fmt.key, cleaned)

    digits = _strip_prefix(cleaned, fmt).replace(_SEPARATOR, "")
    if not digits:
        raise EmptyInput(cleaned)

    _check_alphabet(cleaned, digits, fmt)
    return _decode(cleaned, digits, fmt)
