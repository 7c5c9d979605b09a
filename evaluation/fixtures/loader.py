"""Loader for the curated name corpus in ``names.yml``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

from fullname_parser.config import ParserConfig
from fullname_parser.model import NamePart
from fullname_parser.utils import errors as error_types
from fullname_parser.utils.errors import NameParsingError

_ROOT = Path(__file__).resolve().parent
CORPUS = _ROOT / "names.yml"

# Parts a case may list under ``expected``.
PARTS: tuple[str, ...] = ("title", "initial", "first", "middle", "last", "nick", "suffix")


@dataclass(slots=True)
class NameCase:
    """One corpus entry."""

    id: str
    input: str
    options: dict[str, Any] = field(default_factory=dict)
    expected: dict[str, str] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    raises: str | None = None

    def expected_part(self, part: str) -> str:
        return self.expected.get(part, "")


def _read(path: Path | str) -> list[dict[str, Any]]:
    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    return cast(list[dict[str, Any]], data.get("cases", []))


def list_cases(path: Path | str = CORPUS) -> list[str]:
    """Return the case ids of the corpus at ``path`` in file order."""

    return [str(entry.get("id")) for entry in _read(path)]


def load_cases(path: Path | str = CORPUS) -> list[NameCase]:
    """Return every case of the corpus at ``path``."""

    cases: list[NameCase] = []
    for entry in _read(path):
        cases.append(
            NameCase(
                id=str(entry["id"]),
                input=str(entry.get("input", "")),
                options=dict(entry.get("options") or {}),
                expected={k: str(v) for k, v in (entry.get("expected") or {}).items()},
                errors=[str(e) for e in entry.get("errors") or []],
                raises=entry.get("raises"),
            )
        )
    return cases


def load_case(case_id: str, path: Path | str = CORPUS) -> NameCase:
    """Return the case named ``case_id``; raise ``KeyError`` if absent."""

    for case in load_cases(path):
        if case.id == case_id:
            return case
    raise KeyError(case_id)


def validate_case(case: NameCase) -> list[str]:
    """Return a list of validation error messages for ``case``."""

    problems: list[str] = []
    known_parts = {p.value for p in NamePart}
    for part in case.expected:
        if part not in PARTS or part not in known_parts:
            problems.append(f"{case.id}: unknown part '{part}'")
    for key in case.options:
        if key not in ParserConfig.model_fields:
            problems.append(f"{case.id}: unknown option '{key}'")
    if case.raises is not None:
        error_cls = getattr(error_types, case.raises, None)
        is_error = isinstance(error_cls, type) and issubclass(error_cls, NameParsingError)
        if not is_error:
            problems.append(f"{case.id}: unknown error '{case.raises}'")
        if case.expected or case.errors:
            problems.append(f"{case.id}: raising case lists expected parts")
        if case.options.get("stop_on_error") is False:
            problems.append(f"{case.id}: raising case disables stop_on_error")
    return problems


__all__ = [
    "CORPUS",
    "PARTS",
    "NameCase",
    "list_cases",
    "load_cases",
    "load_case",
    "validate_case",
]
