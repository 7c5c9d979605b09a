from __future__ import annotations

import re

from fullname_parser.extract.patterns import (
    FIRST_NAME_RE,
    LEADING_INITIAL_RE,
    NICKNAME_RE,
    NamePatterns,
    alternation,
    compile_patterns,
    nickname_text,
    suffix_removal_pattern,
)
from fullname_parser.utils.constants import NUMERAL_SUFFIXES, PREFIXES, SUFFIXES, TITLES


def _defaults() -> NamePatterns:
    return compile_patterns(TITLES, SUFFIXES, NUMERAL_SUFFIXES, PREFIXES)


def test_alternation_empty() -> None:
    assert alternation([]) is None


def test_alternation_prefers_longer_literals() -> None:
    alt = alternation(["van", "de", "van der"])
    assert alt is not None
    match = re.match(f"(?:{alt})", "van der Dys")
    assert match is not None and match.group(0) == "van der"


def test_alternation_escapes_literals() -> None:
    alt = alternation(["st."])
    assert alt is not None
    assert re.fullmatch(alt, "st.")
    assert not re.fullmatch(alt, "stx")


def test_compiled_patterns_are_cached() -> None:
    assert _defaults() is _defaults()


def test_empty_vocabularies_disable_passes() -> None:
    patterns = compile_patterns((), (), (), ())
    assert patterns.title is None
    assert patterns.suffix is None
    match = patterns.last_name.search("Jüan de Lorenzo y Gutierez")
    assert match is not None and match.group(0) == "Lorenzo y Gutierez"


def test_title_requires_following_word() -> None:
    title = _defaults().title
    assert title is not None
    match = title.search("Dr. John Doe")
    assert match is not None and match.group("title") == "Dr."
    assert title.search("John Doe Dr.") is None
    assert title.search("Drake Doe") is None


def test_suffix_captures_compound_credentials() -> None:
    suffix = _defaults().suffix
    assert suffix is not None
    match = suffix.search("John Doe Jr., CLU, CFP")
    assert match is not None and match.group("suffix") == "Jr., CLU, CFP"
    assert suffix.search("John Vance") is None


def test_suffix_removal_keeps_separator() -> None:
    pattern = suffix_removal_pattern("Jr.")
    assert pattern.sub(r"\2", "Doe Jr., John") == "Doe, John"


def test_last_name_not_anchored_at_start() -> None:
    patterns = _defaults()
    assert patterns.last_name.search("Edward") is None
    match = patterns.last_name_after_title.search("Hyde")
    assert match is not None and match.group(0) == "Hyde"


def test_static_patterns() -> None:
    nick = NICKNAME_RE.search("Björn (\"Wild Bill\") O'Malley")
    assert nick is not None and nickname_text(nick) == "Wild Bill"
    assert NICKNAME_RE.search("Shaquille O'Neal") is None
    initial = LEADING_INITIAL_RE.search("C. Björn")
    assert initial is not None and initial.group(1) == "C."
    assert LEADING_INITIAL_RE.search("C. J.") is None
    first = FIRST_NAME_RE.search("John P.")
    assert first is not None and first.group(0) == "John"
