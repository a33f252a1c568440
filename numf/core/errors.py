"""Exception hierarchy for number parsing.

WHY: The CLI reports each bad token and keeps going, so it needs to tell
parse failures apart from genuine bugs. A common base class lets it catch
exactly the former.

HOW: NumfError subclasses ValueError, so callers that only know about
ValueError (argparse type= callbacks, for instance) still handle it.

RULES:
- Every message names the offending token
- InvalidDigit keeps the character and its position for diagnostics
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from numf.core.formats import Format


class NumfError(ValueError):
    """Base class for all numf parse errors."""


class EmptyInput(NumfError):
    """Raised for an empty token or a token that is only a base prefix."""

    def __init__(self, token: str = "") -> None:
        self.token = token
        if token:
            super().__init__("'{}' has no digits".format(token))
        else:
            super().__init__("empty input")


class UnknownBasePrefix(NumfError):
    """Raised when no base could be detected from the token's prefix."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__("could not determine the format of '{}'".format(token))


class InvalidDigit(NumfError):
    """Raised when a token contains a character outside its base's alphabet.

    Attributes:
        token: The token as given by the user.
        char: The offending character, or None when every character is
              valid but the digits as a whole are malformed (bad base64
              padding, for example).
        position: Index of char within the digits after prefix and
                  underscore removal, or None together with char.
        fmt: The Format the token was being parsed as.
    """

    def __init__(
        self,
        token: str,
        fmt: Format,
        char: Optional[str] = None,
        position: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.token = token
        self.fmt = fmt
        self.char = char
        self.position = position
        if char is not None:
            msg = "invalid {} digit '{}' at position {} in '{}'".format(
                fmt.key, char, position, token
            )
        else:
            msg = "'{}' is not valid {}".format(token, fmt.key)
            if detail:
                msg += " ({})".format(detail)
        super().__init__(msg)
