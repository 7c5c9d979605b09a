"""Evaluation harness for per-part parsing accuracy.

Every corpus case is parsed with a :class:`~fullname_parser.parser.Parser`
built from the case's options and each name part is compared with the
expected value by exact string match.  A part missing from ``expected`` must
come back empty.  Cases that must raise score every part as correct when the
expected exception class is raised and as wrong otherwise, so a parser that
silently accepts broken input is penalized across the board.

``errors`` is scored as an extra pseudo part: the full error list must match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from evaluation.fixtures import loader as fixtures_loader
from evaluation.fixtures.loader import PARTS, NameCase
from fullname_parser.parser import Parser
from fullname_parser.utils.errors import NameParsingError

__all__ = [
    "PartScore",
    "CorpusScore",
    "evaluate_case",
    "evaluate_corpus",
]

SCORED_PARTS: tuple[str, ...] = (*PARTS, "errors")


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class PartScore:
    """Exact-match counts for one name part."""

    part: str
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


@dataclass(slots=True)
class CorpusScore:
    """Aggregate scores over a corpus."""

    per_part: dict[str, PartScore]
    cases: int = 0
    exact: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def exact_ratio(self) -> float:
        """Share of cases where every part matched."""

        return self.exact / self.cases if self.cases else 0.0


# ---------------------------------------------------------------------------
# Public evaluation entry points
# ---------------------------------------------------------------------------


def evaluate_case(case: NameCase) -> dict[str, bool]:
    """Return a mapping from scored part to match outcome for ``case``."""

    parser = Parser(**case.options)
    try:
        result = parser.parse(case.input)
    except NameParsingError as exc:
        ok = case.raises is not None and type(exc).__name__ == case.raises
        return {part: ok for part in SCORED_PARTS}

    if case.raises is not None:
        return {part: False for part in SCORED_PARTS}

    outcome = {part: result.get_part(part) == case.expected_part(part) for part in PARTS}
    outcome["errors"] = result.errors == case.errors
    return outcome


def evaluate_corpus(cases: Iterable[NameCase] | None = None) -> CorpusScore:
    """Evaluate ``cases`` (default: the bundled corpus) returning aggregate scores."""

    if cases is None:
        cases = fixtures_loader.load_cases()
    score = CorpusScore(per_part={part: PartScore(part) for part in SCORED_PARTS})
    for case in cases:
        outcome = evaluate_case(case)
        score.cases += 1
        for part, ok in outcome.items():
            part_score = score.per_part[part]
            part_score.total += 1
            part_score.correct += int(ok)
        if all(outcome.values()):
            score.exact += 1
        else:
            wrong = ", ".join(part for part, ok in outcome.items() if not ok)
            score.failures.append(f"{case.id}: {wrong}")
    return score
