"""Default vocabularies and shared character tables for the extraction passes."""

from __future__ import annotations

__all__ = [
    "SUFFIXES",
    "NUMERAL_SUFFIXES",
    "PREFIXES",
    "TITLES",
    "FORCED_CASE",
    "NICKNAME_DELIMITERS",
    "NBSP",
    "SEPARATOR",
]

# Vocabulary literals are lowercase; matching is case-insensitive.
SUFFIXES: tuple[str, ...] = ("esq", "esquire", "jr", "sr", "phd")

# Numeral suffixes never take trailing periods.
NUMERAL_SUFFIXES: tuple[str, ...] = ("2", "iii", "ii", "iv", "v")

PREFIXES: tuple[str, ...] = (
    "bar",
    "ben",
    "bin",
    "da",
    "dal",
    "de la",
    "de",
    "del",
    "der",
    "di",
    "ibn",
    "la",
    "le",
    "san",
    "st",
    "ste",
    "van der",
    "van den",
    "van",
    "vel",
    "von",
)

TITLES: tuple[str, ...] = ("ms", "miss", "mrs", "mr", "prof", "dr")

# Words whose casing is looked up verbatim instead of being capitalized.
FORCED_CASE: tuple[str, ...] = (
    "e",
    "y",
    "av",
    "af",
    "da",
    "dal",
    "de",
    "del",
    "der",
    "di",
    "la",
    "le",
    "van",
    "den",
    "vel",
    "von",
    "II",
    "III",
    "IV",
    "V",
    "J.D.",
    "LL.M.",
    "M.D.",
    "D.O.",
    "D.C.",
    "Ph.D.",
)

# Opening and closing delimiter of each nickname style.
NICKNAME_DELIMITERS: tuple[tuple[str, str], ...] = (
    ("[", "]"),
    ("(", ")"),
    ("‘", "’"),
    ("“", "”"),
    ('"', '"'),
    ("'", "'"),
)

NBSP: str = "\u00a0"
SEPARATOR: str = ","
