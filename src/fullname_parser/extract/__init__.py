"""Extraction passes of the name parsing pipeline.

Each pass is a pure function from the working token to a
:class:`~fullname_parser.extract.base.PassOutcome`; the parser threads the
token through them in a fixed order.
"""

from .affixes import find_nicknames, find_suffix, find_title
from .base import PassOutcome, cut_span, remove_matches
from .given import find_first_name, find_leading_initial, find_middle_name
from .patterns import NamePatterns, compile_patterns
from .reorder import flip_name
from .surname import find_last_name

__all__ = [
    "PassOutcome",
    "NamePatterns",
    "compile_patterns",
    "cut_span",
    "remove_matches",
    "find_title",
    "find_nicknames",
    "find_suffix",
    "flip_name",
    "find_last_name",
    "find_leading_initial",
    "find_first_name",
    "find_middle_name",
]
