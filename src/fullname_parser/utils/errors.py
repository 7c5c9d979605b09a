"""Typed exceptions for name parsing failures.

Every condition the parser can report is a subclass of
:class:`NameParsingError`.  The ``MESSAGE`` template is formatted with the
constructor arguments and becomes the human readable entry stored in
:attr:`fullname_parser.model.ParsedName.errors`.  ``fatal`` marks conditions
that abort parsing when ``stop_on_error`` is enabled; non-fatal conditions are
only ever recorded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from fullname_parser.model import ParsedName


class NameParsingError(ValueError):
    """Base class for name parsing errors."""

    MESSAGE = "An unexpected parsing error occurred"
    fatal = True

    def __init__(self, *args: object) -> None:
        super().__init__(self.MESSAGE % args if args else self.MESSAGE)
        self.parsed: ParsedName | None = None


class IncorrectInputError(NameParsingError):
    """Raised when the input string is empty."""

    MESSAGE = "Incorrect input to parse."


class FirstNameNotFoundError(NameParsingError):
    """Raised when a mandatory first name is missing."""

    MESSAGE = "Couldn't find a first name."


class LastNameNotFoundError(NameParsingError):
    """Raised when a mandatory last name is missing."""

    MESSAGE = "Couldn't find a last name."


class FlipStringError(NameParsingError):
    """Raised when a name cannot be flipped around its separator."""

    MESSAGE = "Can't flip around multiple '%s' characters in name string '%s'."

    def __init__(self, char: str, full_name: str) -> None:
        super().__init__(char, full_name)


class MultipleMatchesError(NameParsingError):
    """Raised when a removal pattern matches more than once."""

    MESSAGE = "The regex being used has multiple matches."


class ManyMiddleNamesError(NameParsingError):
    """Recorded when the residual middle name has too many words."""

    MESSAGE = "Warning: %d middle names"
    fatal = False

    def __init__(self, count: int) -> None:
        super().__init__(count)
        self.count = count


class UnsupportedPartError(NameParsingError):
    """Raised when an unknown name part is requested."""

    MESSAGE = "Unsupported name part '%s'."

    def __init__(self, part: object) -> None:
        super().__init__(part)


__all__ = [
    "NameParsingError",
    "IncorrectInputError",
    "FirstNameNotFoundError",
    "LastNameNotFoundError",
    "FlipStringError",
    "MultipleMatchesError",
    "ManyMiddleNamesError",
    "UnsupportedPartError",
]
