"""The NumericValue dataclass shared by the parser and every formatter.

WHY: The parser produces values and the formatters consume them. A
single immutable type in between keeps the two stages decoupled and
gives the byte-oriented formats (base32, base64, raw) one agreed-upon
byte view of a number.

HOW: A frozen dataclass around a Python int, which already has
unbounded precision. Byte conversion is big-endian and minimal.

RULES:
- value is never negative (checked on construction)
- to_bytes() of zero is b"\\x00", never b""
- from_bytes(b"") is zero
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NumericValue:
    """A non-negative integer of arbitrary magnitude.

    Attributes:
        value: The integer itself. Must be >= 0.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("NumericValue must be non-negative, got {}".format(self.value))

    def __int__(self) -> int:
        return self.value

    def byte_length(self) -> int:
        """Number of bytes in the minimal big-endian representation."""
        return max(1, (self.value.bit_length() + 7) // 8)

    def to_bytes(self) -> bytes:
        """Return the minimal big-endian byte string for this value.

        Leading zero bytes are dropped, so 0x00FF becomes b"\\xff". Zero
        itself keeps one byte so every value has a non-empty encoding.
        """
        return self.value.to_bytes(self.byte_length(), "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> NumericValue:
        """Interpret data as a big-endian unsigned integer."""
        return cls(int.from_bytes(data, "big"))
