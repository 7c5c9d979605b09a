"""Whitespace and separator normalization for name strings.

The :func:`normalize` function is applied to the raw input and again after
every destructive extraction pass, so it must be cheap, pure and idempotent:
``normalize(normalize(x)) == normalize(x)`` for every ``x``.

Rules
-----
The following transforms are applied in order:

1. **Edge trimming**: whitespace-class characters and commas are removed from
   both ends.
2. **Whitespace rationalization**: every run of whitespace becomes a single
   ASCII space.  When the string contains a no-break space (``U+00A0``) this
   step is skipped entirely so that the no-break space keeps its meaning.
3. **Separator collapsing**: consecutive commas, with optional single spaces
   around them, become one ``", "``.
4. **Edge trimming**: repeated so that nothing produced by the previous steps
   leaks to the ends.

Example
-------

>>> normalize("  Doe ,, John  ")
'Doe, John'
"""

from __future__ import annotations

import re

from fullname_parser.utils.constants import NBSP

_EDGES_RE = re.compile(r"^[\s,]+|[\s,]+$")
_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATORS_RE = re.compile(r" ?,(?: ?,)+ ?")


def _trim(text: str) -> str:
    return _EDGES_RE.sub("", text)


def normalize(text: str) -> str:
    """Return ``text`` with whitespace and separators rationalized.

    The function is deterministic and applies the rules documented at the
    module level.
    """

    text = _trim(text)
    if NBSP not in text:
        text = _WHITESPACE_RE.sub(" ", text)
    text = _SEPARATORS_RE.sub(", ", text)
    return _trim(text)


__all__ = ["normalize"]
