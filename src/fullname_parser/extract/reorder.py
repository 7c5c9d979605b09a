"""Comma-flip pass turning ``Surname, Given`` into ``Given Surname``."""

from __future__ import annotations

from fullname_parser.extract.base import PassOutcome
from fullname_parser.preprocess.normalizer import normalize
from fullname_parser.utils.constants import SEPARATOR
from fullname_parser.utils.errors import FlipStringError


def flip_name(token: str, full_name: str, separator: str = SEPARATOR) -> PassOutcome:
    """Swap the two halves of ``token`` around ``separator``.

    A token without the separator is returned unchanged.  More than one
    separator cannot be resolved: the token is kept as is and a
    :class:`FlipStringError` naming ``full_name`` is reported.
    """

    parts = token.split(separator)
    if len(parts) == 1:
        return PassOutcome(token)
    if len(parts) > 2:
        return PassOutcome(token, errors=(FlipStringError(separator, full_name),))
    return PassOutcome(normalize(f"{parts[1]} {parts[0]}"))


__all__ = ["flip_name"]
