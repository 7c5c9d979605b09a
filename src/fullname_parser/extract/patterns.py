"""Regular expressions used by the extraction passes.

Vocabulary driven patterns (titles, suffixes, last name prefixes) are built
from alternations of escaped literals.  Literals are sorted by descending
length so that multi-word prefixes such as ``van der`` are always tried before
their single-word heads (``van``), independently of the order the vocabulary
was supplied in.  Compiled pattern sets are cached per vocabulary, which is
safe because vocabularies are immutable for the lifetime of a parser.

All patterns are case-insensitive and Unicode aware.  ``[^\\W\\d_]`` stands
for "any letter".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from fullname_parser.utils.constants import NICKNAME_DELIMITERS

__all__ = [
    "NICKNAME_RE",
    "LEADING_INITIAL_RE",
    "FIRST_NAME_RE",
    "NamePatterns",
    "alternation",
    "compile_patterns",
    "nickname_text",
    "suffix_removal_pattern",
]

FLAGS = re.IGNORECASE

# ---------------------------------------------------------------------------
# Static patterns
# ---------------------------------------------------------------------------


def _nickname_branch(opener: str, closer: str) -> str:
    branch = rf"{re.escape(opener)}(.+?){re.escape(closer)}"
    if opener == closer == "'":
        branch = rf"(?<![^\W\d_]){branch}(?![^\W\d_])"
    return branch


# One branch per delimiter pair; the inner text is the branch's only group.
# A straight single quote touching a letter is an apostrophe (O'Neal), never a
# nickname delimiter.
NICKNAME_RE: re.Pattern[str] = re.compile(
    "|".join(_nickname_branch(o, c) for o, c in NICKNAME_DELIMITERS), FLAGS
)


def nickname_text(match: re.Match[str]) -> str:
    """Return the text inside a :data:`NICKNAME_RE` match.

    One nested layer of delimiters is dropped, so ``("Wild Bill")`` gives
    ``Wild Bill``.
    """

    text = next(group for group in match.groups() if group is not None)
    for opener, closer in NICKNAME_DELIMITERS:
        if len(text) > 1 and text.startswith(opener) and text.endswith(closer):
            return text[1:-1]
    return text


# A single character plus periods, only when a word of two or more letters
# follows.  The lookahead is neither returned nor removed.
LEADING_INITIAL_RE: re.Pattern[str] = re.compile(r"^(.\.*)(?= [^\W\d_]{2})", FLAGS)

FIRST_NAME_RE: re.Pattern[str] = re.compile(r"^[^ ]+", FLAGS)

# ---------------------------------------------------------------------------
# Vocabulary patterns
# ---------------------------------------------------------------------------


def alternation(words: Iterable[str]) -> str | None:
    """Return a regex alternation of ``words`` or ``None`` when empty."""

    unique = sorted(set(words), key=lambda w: (-len(w), w))
    if not unique:
        return None
    return "|".join(re.escape(w) for w in unique)


@dataclass(slots=True, frozen=True)
class NamePatterns:
    """Compiled vocabulary patterns for one parser configuration.

    ``title`` and ``suffix`` are ``None`` when their vocabulary is empty,
    which disables the corresponding pass.  ``last_name_after_title`` is the
    last name pattern allowed to start at the first word, used once a title
    has been removed from in front of it.
    """

    title: re.Pattern[str] | None
    suffix: re.Pattern[str] | None
    last_name: re.Pattern[str]
    last_name_after_title: re.Pattern[str]


def _title_pattern(titles: tuple[str, ...]) -> re.Pattern[str] | None:
    alt = alternation(titles)
    if alt is None:
        return None
    # The title is never the last word: a space must follow it.
    return re.compile(rf"(?:^| )(?P<title>(?:{alt})\.*) ", FLAGS)


def _suffix_pattern(
    suffixes: tuple[str, ...], numeral_suffixes: tuple[str, ...]
) -> re.Pattern[str] | None:
    branches: list[str] = []
    regular = alternation(suffixes)
    if regular is not None:
        branches.append(rf"(?:{regular})\.*")
    numeral = alternation(numeral_suffixes)
    if numeral is not None:
        branches.append(rf"(?:{numeral})")
    if not branches:
        return None
    return re.compile(
        rf"""
        [ ]
        (?P<suffix>
            (?:{'|'.join(branches)})
            (?:
                (?:,+[ ]+\S+)*$     # comma separated extra suffixes up to the end
              | (?=[ ,])            # or a plain word boundary
            )
        )
        """,
        FLAGS | re.VERBOSE,
    )


def _last_name_patterns(prefixes: tuple[str, ...]) -> tuple[re.Pattern[str], re.Pattern[str]]:
    alt = alternation(prefixes)
    # "<word> y" joins Iberian double surnames; prefixes may carry a period.
    link = r"[^ ]+ y" if alt is None else rf"[^ ]+ y|{alt}"
    body = rf"\b(?:(?:{link})\.? )*[^ ]+$"
    return re.compile(rf"(?!^){body}", FLAGS), re.compile(body, FLAGS)


@lru_cache(maxsize=32)
def compile_patterns(
    titles: tuple[str, ...],
    suffixes: tuple[str, ...],
    numeral_suffixes: tuple[str, ...],
    prefixes: tuple[str, ...],
) -> NamePatterns:
    """Return the :class:`NamePatterns` for the given vocabularies."""

    last_name, last_name_after_title = _last_name_patterns(prefixes)
    return NamePatterns(
        title=_title_pattern(titles),
        suffix=_suffix_pattern(suffixes, numeral_suffixes),
        last_name=last_name,
        last_name_after_title=last_name_after_title,
    )


def suffix_removal_pattern(suffix: str) -> re.Pattern[str]:
    """Return a pattern removing the literal ``suffix`` and keeping its separator.

    The separator is captured as group 2 so callers can substitute ``\\2``.
    """

    return re.compile(rf" ({re.escape(suffix)})($| |,)", FLAGS)
