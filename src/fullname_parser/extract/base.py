"""Core primitives shared by the extraction passes.

Each pass is a pure function that receives the current working token (plus
whatever configuration it needs) and returns a :class:`PassOutcome`: the
rewritten token, the extracted value and the failures it detected.  Passes
never raise and never touch the result record; the parser decides what to do
with the failures.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from fullname_parser.preprocess.normalizer import normalize
from fullname_parser.utils.errors import MultipleMatchesError, NameParsingError


@dataclass(slots=True, frozen=True)
class PassOutcome:
    """Result of one extraction pass.

    ``token`` is the working token the next pass receives, already
    normalized.  ``value`` is the extracted component or ``""``.
    """

    token: str
    value: str = ""
    errors: tuple[NameParsingError, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.value)


def remove_matches(
    pattern: re.Pattern[str], token: str, replacement: str = " "
) -> tuple[str, tuple[NameParsingError, ...]]:
    """Replace every match of ``pattern`` in ``token`` and normalize.

    More than one replacement is reported as :class:`MultipleMatchesError`
    since the removed part should have been unambiguous.
    """

    removed, count = pattern.subn(replacement, token)
    errors: tuple[NameParsingError, ...] = (MultipleMatchesError(),) if count > 1 else ()
    return normalize(removed), errors


def cut_span(token: str, match: re.Match[str]) -> str:
    """Return ``token`` without the span of ``match``, normalized."""

    start, end = match.span()
    return normalize(f"{token[:start]} {token[end:]}")


__all__ = ["PassOutcome", "remove_matches", "cut_span"]
