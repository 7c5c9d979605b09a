"""Parse free-form full names into title, given names, surname and suffix.

Example
-------

>>> from fullname_parser import Parser
>>> name = Parser().parse("Dr. John P. Doe-Ray, Jr.")
>>> (name.academic_title, name.first_name, name.middle_name, name.last_name, name.suffix)
('Dr.', 'John', 'P.', 'Doe-Ray', 'Jr.')
"""

from .config import ParserConfig, load_config
from .model import NamePart, ParsedName
from .parser import Parser
from .utils.errors import NameParsingError

__version__ = "0.1.0"


def parse(name: str, **overrides: object) -> ParsedName:
    """Parse ``name`` with a one-off :class:`Parser` built from ``overrides``."""

    return Parser(**overrides).parse(name)


__all__ = [
    "NamePart",
    "NameParsingError",
    "ParsedName",
    "Parser",
    "ParserConfig",
    "__version__",
    "load_config",
    "parse",
]
