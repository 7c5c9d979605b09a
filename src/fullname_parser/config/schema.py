"""Typed configuration schema and loader for the name parser."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from fullname_parser.model import NamePart
from fullname_parser.utils.constants import NUMERAL_SUFFIXES, PREFIXES, SUFFIXES, TITLES

ENV_PREFIX = "FULLNAME_"

# Settings that may be overridden from the environment.
ENV_FIELDS: tuple[str, ...] = (
    "mandatory_first_name",
    "mandatory_middle_name",
    "mandatory_last_name",
    "stop_on_error",
    "fix_case",
    "name_part",
)

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ParserConfig(BaseModel):
    """Vocabularies and strictness flags of one parser.

    Vocabulary entries are lowercase literals; surrounding whitespace, empty
    entries and duplicates are dropped on validation.
    """

    schema_version: conint(ge=1) = 1  # type: ignore[valid-type]
    suffixes: tuple[str, ...] = SUFFIXES
    numeral_suffixes: tuple[str, ...] = NUMERAL_SUFFIXES
    prefixes: tuple[str, ...] = PREFIXES
    titles: tuple[str, ...] = TITLES
    mandatory_first_name: bool = True
    mandatory_middle_name: bool = True
    mandatory_last_name: bool = True
    stop_on_error: bool = True
    fix_case: bool = False
    name_part: NamePart | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("suffixes", "numeral_suffixes", "prefixes", "titles")
    @classmethod
    def _clean_vocabulary(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        cleaned: list[str] = []
        for word in value:
            word = word.strip().lower()
            if word and word not in cleaned:
                cleaned.append(word)
        return tuple(cleaned)


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Return the settings found in ``env`` keyed by field name.

    Values stay strings; boolean parsing (``1/0``, ``true/false``,
    ``yes/no``, ``on/off``) happens in model validation.  An empty
    ``FULLNAME_NAME_PART`` clears the selector.
    """

    overrides: dict[str, Any] = {}
    for field in ENV_FIELDS:
        key = ENV_PREFIX + field.upper()
        if key not in env:
            continue
        value = env[key].strip()
        if field == "name_part":
            overrides[field] = value.lower() or None
        else:
            overrides[field] = value
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ParserConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``FULLNAME_*`` environment variables.
    """

    with (
        importlib_resources.files("fullname_parser.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, env_overrides(environ))

    return ParserConfig.model_validate(merged)


__all__ = [
    "ENV_FIELDS",
    "ENV_PREFIX",
    "ParserConfig",
    "deep_merge_dicts",
    "env_overrides",
    "load_config",
]
