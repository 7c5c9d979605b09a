"""Case fixing for name words.

This module restores conventional casing on words of a name typed in all
capitals or all lowercase.  It is intentionally lightweight and relies only on
the standard library.  The helpers are pure and deterministic.

Responsibilities
----------------
* Look words up in a forced-case table (particles such as ``de`` or ``van``,
  roman numerals, credentials such as ``Ph.D.``) and return the canonical
  spelling verbatim.
* Otherwise capitalize each hyphen-separated segment independently, so
  ``DOE-RAY`` becomes ``Doe-Ray``.

Casing is Unicode aware: ``JÜAN`` becomes ``Jüan``.  Punctuation leading a
word is left in place and the letter behind it is not capitalized, which is
why extracted nicknames are fixed a second time once their brackets are gone.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from fullname_parser.utils.constants import FORCED_CASE


def build_forced_case_map(words: Iterable[str]) -> dict[str, str]:
    """Return a lookup from lowercase form to canonical spelling.

    Later entries win when two spellings share a lowercase form.
    """

    return {word.lower(): word for word in words}


FORCED_CASE_MAP: Mapping[str, str] = build_forced_case_map(FORCED_CASE)


def capitalize_segment(segment: str) -> str:
    """Return ``segment`` with its first character upper and the rest lower."""

    return segment[:1].upper() + segment[1:].lower()


def fix_word_case(word: str, forced: Mapping[str, str] = FORCED_CASE_MAP) -> str:
    """Return ``word`` with conventional name casing.

    Words found in ``forced`` are replaced by their canonical spelling; all
    other words are capitalized per hyphen segment.
    """

    canonical = forced.get(word.lower())
    if canonical is not None:
        return canonical
    return "-".join(capitalize_segment(part) for part in word.split("-"))


def fix_name_case(text: str, forced: Mapping[str, str] = FORCED_CASE_MAP) -> str:
    """Apply :func:`fix_word_case` to every space separated word of ``text``."""

    return " ".join(fix_word_case(word, forced) for word in text.split(" "))


__all__ = [
    "FORCED_CASE_MAP",
    "build_forced_case_map",
    "capitalize_segment",
    "fix_word_case",
    "fix_name_case",
]
