from __future__ import annotations

from fullname_parser.extract.affixes import find_nicknames, find_suffix, find_title
from fullname_parser.extract.patterns import compile_patterns
from fullname_parser.utils.constants import NUMERAL_SUFFIXES, PREFIXES, SUFFIXES, TITLES
from fullname_parser.utils.errors import MultipleMatchesError

PATTERNS = compile_patterns(TITLES, SUFFIXES, NUMERAL_SUFFIXES, PREFIXES)


def test_title_found() -> None:
    out = find_title("Dr. John Doe", PATTERNS.title)
    assert out.value == "Dr."
    assert out.token == "John Doe"
    assert out.errors == ()


def test_title_without_period() -> None:
    out = find_title("Mr John Doe PhD, Esq", PATTERNS.title)
    assert out.value == "Mr"
    assert out.token == "John Doe PhD, Esq"


def test_title_absent() -> None:
    out = find_title("Drake Doe", PATTERNS.title)
    assert not out.found
    assert out.token == "Drake Doe"


def test_title_pass_disabled() -> None:
    out = find_title("Dr. John Doe", None)
    assert out.value == ""
    assert out.token == "Dr. John Doe"


def test_nickname_removed_with_delimiters() -> None:
    out = find_nicknames('John "Jack" Doe')
    assert out.value == "Jack"
    assert out.token == "John Doe"


def test_nickname_case_fixed() -> None:
    out = find_nicknames("John (jack) Doe", fix_case=True)
    assert out.value == "Jack"


def test_nickname_apostrophe_is_not_a_quote() -> None:
    out = find_nicknames("Björn O'Malley")
    assert not out.found
    assert out.token == "Björn O'Malley"


def test_apostrophe_surname_before_nickname() -> None:
    out = find_nicknames("Shaquille O'Neal [Shaq]")
    assert out.value == "Shaq"
    assert out.token == "Shaquille O'Neal"
    assert out.errors == ()

    out = find_nicknames("Conan O'Brien (Coco)")
    assert out.value == "Coco"
    assert out.token == "Conan O'Brien"


def test_single_quoted_nickname_after_apostrophe() -> None:
    out = find_nicknames("Björn O'Malley 'Bo'")
    assert out.value == "Bo"
    assert out.token == "Björn O'Malley"


def test_mismatched_delimiters_are_not_a_nickname() -> None:
    out = find_nicknames('John (Jack" Doe')
    assert not out.found
    assert out.token == 'John (Jack" Doe'
    assert out.errors == ()


def test_nested_delimiters_unwrapped() -> None:
    out = find_nicknames("Björn (\"Wild Bill\") O'Malley")
    assert out.value == "Wild Bill"
    assert out.token == "Björn O'Malley"


def test_multiple_nicknames_reported() -> None:
    out = find_nicknames('John "Jack" "Johnny" Doe')
    assert out.value == "Jack"
    assert out.token == "John Doe"
    assert len(out.errors) == 1
    assert isinstance(out.errors[0], MultipleMatchesError)


def test_suffix_found() -> None:
    out = find_suffix("John Doe Jr.", PATTERNS.suffix)
    assert out.value == "Jr."
    assert out.token == "John Doe"


def test_numeral_suffix() -> None:
    out = find_suffix("Anthony R Von Fange III", PATTERNS.suffix)
    assert out.value == "III"
    assert out.token == "Anthony R Von Fange"


def test_compound_suffix_before_flip() -> None:
    out = find_suffix("Doe-Ray, John P., Jr., CLU, CFP, LUTC", PATTERNS.suffix)
    assert out.value == "Jr., CLU, CFP, LUTC"
    assert out.token == "Doe-Ray, John P."


def test_suffix_needs_preceding_word() -> None:
    out = find_suffix("Jr John Doe", PATTERNS.suffix)
    assert not out.found


def test_repeated_suffix_reported() -> None:
    out = find_suffix("Jüan Martinez, Jr de Lorenzo y Gutierez, Jr", PATTERNS.suffix)
    assert out.value == "Jr"
    assert [type(e) for e in out.errors] == [MultipleMatchesError]
