from __future__ import annotations

import pytest

from fullname_parser.extract.given import (
    MAX_MIDDLE_NAMES,
    find_first_name,
    find_leading_initial,
    find_middle_name,
)
from fullname_parser.utils.errors import FirstNameNotFoundError, ManyMiddleNamesError


@pytest.mark.parametrize(
    ("token", "initial", "rest"),
    [
        ("C. Björn Roger", "C.", "Björn Roger"),
        ("R Arantes", "R", "Arantes"),
        ("B. C.", "", "B. C."),
        ("B.J.", "", "B.J."),
        ("Al Smith", "", "Al Smith"),
    ],
)
def test_leading_initial(token: str, initial: str, rest: str) -> None:
    out = find_leading_initial(token)
    assert out.value == initial
    assert out.token == rest


def test_first_name() -> None:
    out = find_first_name("John P.")
    assert out.value == "John"
    assert out.token == "P."


def test_missing_first_name() -> None:
    out = find_first_name("")
    assert [type(e) for e in out.errors] == [FirstNameNotFoundError]
    assert find_first_name("", mandatory=False).errors == ()


def test_middle_name_is_remainder() -> None:
    out = find_middle_name("P. Q.")
    assert out.value == "P. Q."
    assert out.token == ""
    assert out.errors == ()
    assert find_middle_name("").value == ""


def test_many_middle_names() -> None:
    out = find_middle_name("a b c")
    assert out.value == "a b c"
    assert len(out.errors) == 1
    err = out.errors[0]
    assert isinstance(err, ManyMiddleNamesError)
    assert err.count == MAX_MIDDLE_NAMES + 1
    assert not err.fatal
    assert str(err) == "Warning: 3 middle names"


def test_many_middle_names_ignored_when_optional() -> None:
    assert find_middle_name("a b c", mandatory=False).errors == ()
