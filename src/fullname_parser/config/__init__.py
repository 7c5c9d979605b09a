"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``FULLNAME_*`` environment variables for the strictness flags and the
       name part selector
"""

from .schema import ParserConfig, deep_merge_dicts, load_config

__all__ = ["ParserConfig", "deep_merge_dicts", "load_config"]
