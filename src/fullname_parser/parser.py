"""Name parsing engine.

Purpose:
    Split a free-form full name into title, leading initial, first, middle
    and last name, nickname and suffix.

Key responsibilities:
    - Normalize (and optionally case fix) the input.
    - Thread the working token through the extraction passes in their fixed
      order: title, nicknames, suffix, comma-flip, last name, leading
      initial, first name, middle name.
    - Apply the strictness policy to the failures reported by each pass.

Strictness:
    Every failure is appended to :attr:`ParsedName.errors` in detection
    order.  With ``stop_on_error`` the first fatal failure is then raised with
    the partial result attached as ``err.parsed``; otherwise parsing always
    runs to completion.  :class:`ManyMiddleNamesError` is never raised.

Notes/Edge cases:
    - Configuration is frozen, so one :class:`Parser` may be shared freely.
      Per-call settings mean a new instance, e.g. ``Parser(fix_case=True)``.
    - The comma-flip keeps the token untouched when it cannot resolve more
      than one separator; later passes still run on it in lenient mode.
"""

from __future__ import annotations

from typing import Any, Iterable

from fullname_parser.config import ParserConfig
from fullname_parser.extract import (
    PassOutcome,
    compile_patterns,
    find_first_name,
    find_last_name,
    find_leading_initial,
    find_middle_name,
    find_nicknames,
    find_suffix,
    find_title,
    flip_name,
)
from fullname_parser.model import ParsedName
from fullname_parser.preprocess.casing import fix_name_case
from fullname_parser.preprocess.normalizer import normalize
from fullname_parser.utils.errors import IncorrectInputError, NameParsingError
from fullname_parser.utils.logging import get_logger

logger = get_logger(__name__)


class Parser:
    """Parse full names according to a :class:`ParserConfig`."""

    def __init__(self, config: ParserConfig | None = None, **overrides: Any) -> None:
        if config is None:
            config = ParserConfig.model_validate(overrides)
        elif overrides:
            config = ParserConfig.model_validate({**config.model_dump(), **overrides})
        self.config = config
        self.patterns = compile_patterns(
            config.titles, config.suffixes, config.numeral_suffixes, config.prefixes
        )

    # ------------------------------------------------------------------
    def parse(self, name: str) -> ParsedName:
        """Return the parsed components of ``name``.

        Raises:
            NameParsingError: the first fatal failure when ``stop_on_error``
                is enabled.
        """

        cfg = self.config
        result = ParsedName()

        full_name = normalize(name)
        if not full_name:
            self._record(result, (IncorrectInputError(),))
            return result
        if cfg.fix_case:
            full_name = fix_name_case(full_name)
        result.full_name = full_name
        token = full_name

        outcome = find_title(token, self.patterns.title)
        result.academic_title = outcome.value
        token = self._advance(result, "title", outcome)

        outcome = find_nicknames(token, fix_case=cfg.fix_case)
        result.nicknames = outcome.value
        token = self._advance(result, "nicknames", outcome)

        outcome = find_suffix(token, self.patterns.suffix)
        result.suffix = outcome.value
        token = self._advance(result, "suffix", outcome)

        outcome = flip_name(token, full_name)
        token = self._advance(result, "flip", outcome)

        outcome = find_last_name(
            token,
            self.patterns,
            after_title=bool(result.academic_title),
            mandatory=cfg.mandatory_last_name,
        )
        result.last_name = outcome.value
        token = self._advance(result, "last name", outcome)

        outcome = find_leading_initial(token)
        result.leading_initial = outcome.value
        token = self._advance(result, "leading initial", outcome)

        outcome = find_first_name(token, mandatory=cfg.mandatory_first_name)
        result.first_name = outcome.value
        token = self._advance(result, "first name", outcome)

        outcome = find_middle_name(token, mandatory=cfg.mandatory_middle_name)
        result.middle_name = outcome.value
        self._advance(result, "middle name", outcome)

        return result

    def parse_part(self, name: str) -> str | list[str] | ParsedName:
        """Parse ``name`` and return the configured ``name_part`` only.

        Without a selector the whole :class:`ParsedName` is returned.
        """

        result = self.parse(name)
        if self.config.name_part is None:
            return result
        return result.get_part(self.config.name_part)

    # ------------------------------------------------------------------
    def _advance(self, result: ParsedName, step: str, outcome: PassOutcome) -> str:
        logger.debug("%s: value=%r rest=%r", step, outcome.value, outcome.token)
        self._record(result, outcome.errors)
        return outcome.token

    def _record(self, result: ParsedName, errors: Iterable[NameParsingError]) -> None:
        for err in errors:
            result.add_error(str(err))
            if not err.fatal:
                logger.warning("%s (input %r)", err, result.full_name)
                continue
            if self.config.stop_on_error:
                err.parsed = result
                raise err
            logger.info("%s (input %r)", err, result.full_name)


__all__ = ["Parser"]
