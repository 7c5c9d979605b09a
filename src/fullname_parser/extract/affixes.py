"""Title, nickname and suffix passes.

These passes strip the parts of a name that may sit on either side of the
surname/given-name comma, so they run before :func:`flip_name`.

Title
    A configured title literal (``Dr``, ``Mrs`` ...) plus optional periods at
    the start of the token or after a space, and never as the last word.  The
    first case-insensitive occurrence of the matched text is removed.
Nickname
    The first span enclosed in a matching delimiter pair (``[]``, ``()``,
    curly or straight quotes).  The inner text, minus one nested layer of
    delimiters, is the nickname and the whole span is removed.  An apostrophe
    inside a word never opens or closes a span.  A second span anywhere
    in the token is reported as :class:`MultipleMatchesError`.
Suffix
    A configured suffix (optionally followed by periods) or numeral suffix
    preceded by a space.  When the suffix is followed by commas, every further
    comma separated word up to the end is captured with it so compound
    credentials such as ``Jr., CLU, CFP`` stay together.
"""

from __future__ import annotations

import re

from fullname_parser.extract.base import PassOutcome, remove_matches
from fullname_parser.extract.patterns import (
    NICKNAME_RE,
    nickname_text,
    suffix_removal_pattern,
)
from fullname_parser.preprocess.casing import fix_name_case
from fullname_parser.preprocess.normalizer import normalize


def find_title(token: str, pattern: re.Pattern[str] | None) -> PassOutcome:
    """Extract an academic or courtesy title from ``token``."""

    if pattern is None:
        return PassOutcome(token)
    match = pattern.search(token)
    if match is None:
        return PassOutcome(token)
    title = normalize(match.group("title"))
    rest = re.sub(re.escape(title), "", token, count=1, flags=re.IGNORECASE)
    return PassOutcome(normalize(rest), title)


def find_nicknames(token: str, *, fix_case: bool = False) -> PassOutcome:
    """Extract the first bracketed or quoted nickname from ``token``.

    With ``fix_case`` the nickname is case fixed again; its first letter
    followed punctuation during the initial pass and was left lowercase.
    """

    match = NICKNAME_RE.search(token)
    if match is None:
        return PassOutcome(token)
    nickname = normalize(nickname_text(match))
    if fix_case:
        nickname = fix_name_case(nickname)
    rest, errors = remove_matches(NICKNAME_RE, token)
    return PassOutcome(rest, nickname, errors)


def find_suffix(token: str, pattern: re.Pattern[str] | None) -> PassOutcome:
    """Extract a name suffix (``Jr.``, ``III``, ``PhD, Esq`` ...) from ``token``."""

    if pattern is None:
        return PassOutcome(token)
    match = pattern.search(token)
    if match is None:
        return PassOutcome(token)
    suffix = normalize(match.group("suffix"))
    rest, errors = remove_matches(suffix_removal_pattern(suffix), token, r"\2")
    return PassOutcome(rest, suffix, errors)


__all__ = ["find_title", "find_nicknames", "find_suffix"]
