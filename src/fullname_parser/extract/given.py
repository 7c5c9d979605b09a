"""Leading initial, first name and middle name passes.

These run last and consume the token from the left.  Whatever the first name
pass leaves behind is the middle name.
"""

from __future__ import annotations

from fullname_parser.extract.base import PassOutcome, cut_span
from fullname_parser.extract.patterns import FIRST_NAME_RE, LEADING_INITIAL_RE
from fullname_parser.preprocess.normalizer import normalize
from fullname_parser.utils.errors import FirstNameNotFoundError, ManyMiddleNamesError

MAX_MIDDLE_NAMES = 2


def find_leading_initial(token: str) -> PassOutcome:
    """Extract a lone initial such as ``C.`` that precedes a full word."""

    match = LEADING_INITIAL_RE.search(token)
    if match is None:
        return PassOutcome(token)
    return PassOutcome(cut_span(token, match), normalize(match.group(1)))


def find_first_name(token: str, *, mandatory: bool = True) -> PassOutcome:
    match = FIRST_NAME_RE.search(token)
    if match is None:
        errors = (FirstNameNotFoundError(),) if mandatory else ()
        return PassOutcome(token, errors=errors)
    return PassOutcome(cut_span(token, match), normalize(match.group(0)))


def find_middle_name(token: str, *, mandatory: bool = True) -> PassOutcome:
    """Take the remaining ``token`` as the middle name.

    More than :data:`MAX_MIDDLE_NAMES` words is reported as a non-fatal
    :class:`ManyMiddleNamesError` when ``mandatory`` is set.
    """

    count = len(token.split(" "))
    errors = (ManyMiddleNamesError(count),) if mandatory and count > MAX_MIDDLE_NAMES else ()
    return PassOutcome("", token, errors)


__all__ = [
    "MAX_MIDDLE_NAMES",
    "find_leading_initial",
    "find_first_name",
    "find_middle_name",
]
