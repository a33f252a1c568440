"""Abstract base formatter and the options every formatter understands.

WHY: Every output notation consumes the same NumericValue but renders
different text. This base class enforces a consistent interface so the
CLI can drive any formatter generically through the registry.

HOW: BaseFormatter is an ABC with three requirements: a ``fmt`` class
attribute, a ``name`` property, and a ``format()`` method. FormatOptions
is a frozen dataclass bundling the prefix, padding, and case switches.

RULES:
- Subclasses MUST set ``fmt`` and implement ``name`` and ``format()``
- ``format()`` returns str for text notations, bytes for raw output
- Formatters are stateless; one instance can format any number of values
- Options a notation cannot honour are ignored, never an error
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from numf.core.formats import Format
from numf.core.value import NumericValue


@dataclass(frozen=True)
class FormatOptions:
    """Rendering switches shared by all formatters.

    Attributes:
        prefix: Prepend the notation's canonical prefix, e.g. ``"0x"``.
        padding: Left-pad with zeros to a whole byte (hex: even digit
                 count, binary: multiple of 8 digits).
        uppercase: Render hex digits A-F in upper case. The prefix stays
                   lower case.
    """

    prefix: bool = False
    padding: bool = False
    uppercase: bool = True


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output notation:
    1. Add a member to numf.core.formats.Format
    2. Subclass BaseFormatter (or PositionalFormatter) and set ``fmt``
    3. Implement format() and name
    4. Register in the FORMATTERS dict in formatters/__init__.py
    """

    fmt: ClassVar[Format]

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable notation name, e.g. 'Hexadecimal'."""

    @abstractmethod
    def format(self, value: NumericValue, options: FormatOptions) -> str | bytes:
        """Render a value in this formatter's notation.

        Args:
            value: The number to render.
            options: Prefix, padding, and case switches.

        Returns:
            The rendered text, or bytes for raw output.
        """

    def with_prefix(self, digits: str, options: FormatOptions) -> str:
        """Prepend the canonical prefix when the options ask for it."""
        if options.prefix:
            return self.fmt.prefix + digits
        return digits
