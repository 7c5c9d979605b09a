"""Last name pass.

The last name is matched from the right end of the token: one final word,
optionally preceded by any number of configured prefixes (``van der``,
``de la``, ``St.`` ...) and Iberian ``<word> y`` links, as in
``de Lorenzo y Gutierez``.  The match may not start at the first word unless a
title was removed in front of it, so a lone word is never taken as a last
name.
"""

from __future__ import annotations

from fullname_parser.extract.base import PassOutcome, cut_span
from fullname_parser.extract.patterns import NamePatterns
from fullname_parser.preprocess.normalizer import normalize
from fullname_parser.utils.errors import LastNameNotFoundError


def find_last_name(
    token: str,
    patterns: NamePatterns,
    *,
    after_title: bool = False,
    mandatory: bool = True,
) -> PassOutcome:
    """Extract the last name from the right end of ``token``."""

    pattern = patterns.last_name_after_title if after_title else patterns.last_name
    match = pattern.search(token)
    if match is None:
        errors = (LastNameNotFoundError(),) if mandatory else ()
        return PassOutcome(token, errors=errors)
    return PassOutcome(cut_span(token, match), normalize(match.group(0)))


__all__ = ["find_last_name"]
