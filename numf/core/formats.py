"""The Format enum: every notation numf reads and writes.

WHY: Prefix detection, alphabet validation, CLI flag names, and the
formatter registry all need the same facts about each notation. Keeping
them on one enum means a notation is described in exactly one place.

HOW: Each member's value is a (name, prefix, radix, alphabet) tuple.
Positional bases carry their radix for int(); the byte-oriented formats
(base64, base32, raw) have radix None and are decoded via the base64
module instead.

RULES:
- Prefixes are case sensitive and always lower case on output
- Hex alphabet accepts both cases; base32 and base64 are exact
- RAW has no prefix and no alphabet (any byte is valid)
- DETECTION_ORDER lists the prefixed formats in the order they are tried
"""

from __future__ import annotations

import string
from enum import Enum
from typing import FrozenSet, List, Optional

_BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/="
_BASE32_ALPHABET = string.ascii_uppercase + "234567="


class Format(Enum):
    """A number notation with its canonical prefix and digit alphabet."""

    DEC = ("dec", "0d", 10, string.digits)
    HEX = ("hex", "0x", 16, string.hexdigits)
    BIN = ("bin", "0b", 2, "01")
    OCT = ("oct", "0o", 8, string.octdigits)
    BASE64 = ("base64", "0s", None, _BASE64_ALPHABET)
    BASE32 = ("base32", "032s", None, _BASE32_ALPHABET)
    RAW = ("raw", "", None, "")

    def __init__(self, key: str, prefix: str, radix: Optional[int], digits: str) -> None:
        self.key = key
        self.prefix = prefix
        self.radix = radix
        self.alphabet: FrozenSet[str] = frozenset(digits)

    @property
    def is_positional(self) -> bool:
        """True for the formats int() can parse with a radix."""
        return self.radix is not None

    @classmethod
    def from_name(cls, name: str) -> Format:
        """Resolve a CLI or environment name such as ``"hex"`` to a Format.

        Raises:
            ValueError: If the name matches no format.
        """
        wanted = name.strip().lower()
        for fmt in cls:
            if fmt.key == wanted:
                return fmt
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(name, ", ".join(format_names()))
        )


def format_names() -> List[str]:
    """All format names in declaration order, for help text and errors."""
    return [fmt.key for fmt in Format]


DETECTION_ORDER = (Format.HEX, Format.OCT, Format.BIN, Format.BASE64, Format.BASE32)
