"""Result model for parsed names.

:class:`ParsedName` is an inert record: the parser fills it in during a single
``parse`` call and hands it to the caller, who owns it afterwards.  Every field
is a string and absence is always the empty string, never ``None``.  The
``errors`` list collects the messages of every recorded failure in the order
they were detected.

:class:`NamePart` enumerates the symbolic keys accepted by
:meth:`ParsedName.get_part`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from fullname_parser.utils.errors import UnsupportedPartError


class NamePart(Enum):
    """Enumeration of retrievable name parts."""

    TITLE = "title"
    LEADING_INITIAL = "initial"
    FIRST_NAME = "first"
    MIDDLE_NAME = "middle"
    LAST_NAME = "last"
    NICKNAME = "nick"
    SUFFIX = "suffix"
    ERRORS = "errors"
    ALL = "all"

    @classmethod
    def coerce(cls, value: "NamePart | str") -> "NamePart":
        """Return the member for ``value`` or raise :class:`UnsupportedPartError`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedPartError(value) from None


@dataclass(slots=True)
class ParsedName:
    """Parsed name components.

    Attributes mirror the extraction passes.  ``full_name`` holds the
    normalized (and optionally case fixed) input.
    """

    full_name: str = ""
    leading_initial: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    nicknames: str = ""
    academic_title: str = ""
    suffix: str = ""
    errors: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return ``True`` if any failure was recorded."""

        return bool(self.errors)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def get_part(self, part: NamePart | str) -> "str | list[str] | ParsedName":
        """Return the value of ``part``.

        ``errors`` yields a copy of the error list and ``all`` the record
        itself.  Unknown keys raise :class:`UnsupportedPartError`.
        """

        key = NamePart.coerce(part)
        if key is NamePart.ERRORS:
            return list(self.errors)
        if key is NamePart.ALL:
            return self
        return {
            NamePart.TITLE: self.academic_title,
            NamePart.LEADING_INITIAL: self.leading_initial,
            NamePart.FIRST_NAME: self.first_name,
            NamePart.MIDDLE_NAME: self.middle_name,
            NamePart.LAST_NAME: self.last_name,
            NamePart.NICKNAME: self.nicknames,
            NamePart.SUFFIX: self.suffix,
        }[key]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON serializable mapping of all fields."""

        return {
            "full_name": self.full_name,
            "title": self.academic_title,
            "initial": self.leading_initial,
            "first": self.first_name,
            "middle": self.middle_name,
            "last": self.last_name,
            "nick": self.nicknames,
            "suffix": self.suffix,
            "errors": list(self.errors),
        }


__all__ = ["NamePart", "ParsedName"]
