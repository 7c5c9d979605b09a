"""Text preparation applied before and between extraction passes."""

from .casing import fix_name_case, fix_word_case
from .normalizer import normalize

__all__ = ["normalize", "fix_name_case", "fix_word_case"]
