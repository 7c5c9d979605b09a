from __future__ import annotations

import pytest

from fullname_parser.model import NamePart, ParsedName
from fullname_parser.utils.errors import UnsupportedPartError


def _sample() -> ParsedName:
    return ParsedName(
        full_name="Dr. John P. Doe-Ray, Jr.",
        first_name="John",
        middle_name="P.",
        last_name="Doe-Ray",
        academic_title="Dr.",
        suffix="Jr.",
    )


def test_defaults_are_empty() -> None:
    name = ParsedName()
    assert name.first_name == ""
    assert name.nicknames == ""
    assert name.errors == []
    assert not name.has_errors


@pytest.mark.parametrize(
    ("part", "expected"),
    [
        ("title", "Dr."),
        ("initial", ""),
        ("first", "John"),
        ("middle", "P."),
        ("last", "Doe-Ray"),
        ("nick", ""),
        ("suffix", "Jr."),
        (NamePart.LAST_NAME, "Doe-Ray"),
    ],
)
def test_get_part(part: NamePart | str, expected: str) -> None:
    assert _sample().get_part(part) == expected


def test_get_part_errors_is_a_copy() -> None:
    name = _sample()
    name.add_error("Warning: 3 middle names")
    errors = name.get_part("errors")
    assert errors == ["Warning: 3 middle names"]
    assert isinstance(errors, list)
    errors.append("tampered")
    assert name.errors == ["Warning: 3 middle names"]
    assert name.has_errors


def test_get_part_all() -> None:
    name = _sample()
    assert name.get_part(NamePart.ALL) is name


def test_unsupported_part() -> None:
    with pytest.raises(UnsupportedPartError) as excinfo:
        _sample().get_part("surname")
    assert str(excinfo.value) == "Unsupported name part 'surname'."


def test_coerce() -> None:
    assert NamePart.coerce("nick") is NamePart.NICKNAME
    assert NamePart.coerce(NamePart.TITLE) is NamePart.TITLE
    with pytest.raises(UnsupportedPartError):
        NamePart.coerce("nickname")


def test_to_dict() -> None:
    data = _sample().to_dict()
    assert data == {
        "full_name": "Dr. John P. Doe-Ray, Jr.",
        "title": "Dr.",
        "initial": "",
        "first": "John",
        "middle": "P.",
        "last": "Doe-Ray",
        "nick": "",
        "suffix": "Jr.",
        "errors": [],
    }
