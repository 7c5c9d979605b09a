"""Deterministic name fuzzing utilities.

The helpers in this module introduce small perturbations into corpus names
that normalization must absorb.  A parser fed a mutated name is expected to
return exactly the same result as for the original.

Applied mutations:

* inflation of single spaces into runs of spaces
* replacement of spaces by tabs or line breaks
* leading and trailing whitespace padding
* duplication of commas followed by a space (``Doe, John`` becomes
  ``Doe,, John``)

Only existing spaces are touched and no whitespace is ever placed in front
of a comma, so the mutations never change what normalization produces.  Input
names must not contain no-break spaces, which switch whitespace collapsing
off.

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

_PADDING = [" ", "  ", "\t", "\n", " \t "]
_SPACE_SUBSTITUTES = ["\t", "\n", "\r\n", " \t"]


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`mutate_name`.

    Attributes mirror the probabilities for each mutation.  ``max_variants``
    controls how many mutated versions :func:`variants` yields.
    """

    max_variants: int = 20
    duplicate_comma_prob: float = 0.5
    inflate_space_prob: float = 0.3
    substitute_space_prob: float = 0.2
    pad_prob: float = 0.5


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def duplicate_commas(text: str, rng: random.Random, prob: float) -> str:
    """Repeat commas one to three extra times with probability ``prob``.

    Only commas followed by a space are repeated.
    """

    out: list[str] = []
    for i, ch in enumerate(text):
        out.append(ch)
        if ch == "," and text[i + 1 : i + 2] == " " and rng.random() < prob:
            out.append("," * rng.randint(1, 3))
    return "".join(out)


def inflate_spaces(text: str, rng: random.Random, prob: float) -> str:
    out: list[str] = []
    for ch in text:
        if ch == " " and rng.random() < prob:
            out.append(" " * rng.randint(2, 4))
        else:
            out.append(ch)
    return "".join(out)


def substitute_spaces(text: str, rng: random.Random, prob: float) -> str:
    out: list[str] = []
    for ch in text:
        if ch == " " and rng.random() < prob:
            out.append(rng.choice(_SPACE_SUBSTITUTES))
        else:
            out.append(ch)
    return "".join(out)


def pad(text: str, rng: random.Random, prob: float) -> str:
    """Surround ``text`` with whitespace padding on either side."""

    left = rng.choice(_PADDING) if rng.random() < prob else ""
    right = rng.choice(_PADDING) if rng.random() < prob else ""
    return f"{left}{text}{right}"


def mutate_name(text: str, *, seed: int, opts: FuzzOptions) -> str:
    """Return a fuzzed variant of ``text`` using ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    mutated = text
    mutated = duplicate_commas(mutated, rng, opts.duplicate_comma_prob)
    mutated = inflate_spaces(mutated, rng, opts.inflate_space_prob)
    mutated = substitute_spaces(mutated, rng, opts.substitute_space_prob)
    mutated = pad(mutated, rng, opts.pad_prob)
    return mutated


def variants(text: str, *, base_seed: int, opts: FuzzOptions) -> Iterable[str]:
    """Yield deterministic fuzzed variants of ``text``."""

    for i in range(opts.max_variants):
        yield mutate_name(text, seed=base_seed + i, opts=opts)


__all__ = [
    "FuzzOptions",
    "rng_from_seed",
    "duplicate_commas",
    "inflate_spaces",
    "substitute_spaces",
    "pad",
    "mutate_name",
    "variants",
]
