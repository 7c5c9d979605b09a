"""Typer-based command line interface for the name parser.

``parse`` handles names given on the command line; ``run`` reads one name per
line from a file and writes one JSON object per line.

Exit codes
----------
0 success
3 I/O error (unreadable input, unwritable output)
4 configuration error (invalid YAML, unknown keys, unsupported name part)
5 parsing error (``stop_on_error`` raised on one of the names)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ParserConfig, load_config
from .model import NamePart, ParsedName
from .parser import Parser
from .utils.errors import NameParsingError, UnsupportedPartError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="fullname-parser",
    help="Parse full names into their parts. Use 'fullname-parser parse NAME' to try it.",
)

_FIELDS = ("title", "initial", "first", "middle", "last", "nick", "suffix")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _build_parser(
    config_path: Path | None,
    *,
    stop_on_error: bool | None,
    fix_case: bool | None,
    part: str | None,
) -> Parser:
    """Load configuration, apply CLI overrides and return a :class:`Parser`."""

    try:
        cfg = load_config(config_path)
        overrides: dict[str, object] = {}
        if stop_on_error is not None:
            overrides["stop_on_error"] = stop_on_error
        if fix_case is not None:
            overrides["fix_case"] = fix_case
        if part is not None:
            overrides["name_part"] = NamePart.coerce(part.lower())
        return Parser(cfg, **overrides)
    except (ValidationError, UnsupportedPartError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except OSError as exc:
        _safe_exit(4, str(exc))


def _format_block(result: ParsedName) -> str:
    data = result.to_dict()
    lines = [f"{key}: {data[key]}" for key in _FIELDS]
    lines.append(f"errors: {'; '.join(result.errors)}")
    return "\n".join(lines)


def _render(value: str | list[str] | ParsedName, *, as_json: bool) -> str:
    if isinstance(value, ParsedName):
        if as_json:
            return json.dumps(value.to_dict(), ensure_ascii=False)
        return _format_block(value)
    if as_json:
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "\n".join(value)
    return value


def _describe(cfg: ParserConfig) -> str:
    return (
        f"stop_on_error={cfg.stop_on_error} fix_case={cfg.fix_case} "
        f"name_part={cfg.name_part.value if cfg.name_part else None}"
    )


@app.callback()
def main() -> None:
    """Entry point for the fullname-parser command group."""
    pass


@app.command()
def parse(  # noqa: PLR0913
    names: list[str] = typer.Argument(..., help="Full names to parse"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    stop_on_error: bool | None = typer.Option(  # noqa: B008
        None,
        "--stop-on-error/--no-stop-on-error",
        help="Abort on the first parsing error instead of recording it",
    ),
    fix_case: bool | None = typer.Option(  # noqa: B008
        None, "--fix-case/--no-fix-case", help="Normalize the casing of each word"
    ),
    part: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--part",
        help="Print one part only (title, initial, first, middle, last, nick, suffix, errors, all)",
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Emit one JSON value per name"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log parser decisions to stderr"
    ),
) -> None:
    """Parse each of ``names`` and print its parts."""

    if verbose:
        configure_logging(verbose=True)
    parser = _build_parser(config_path, stop_on_error=stop_on_error, fix_case=fix_case, part=part)
    if verbose:
        typer.echo(f"Loaded config ({_describe(parser.config)})", err=True)

    blocks: list[str] = []
    for name in names:
        try:
            value = parser.parse_part(name)
        except NameParsingError as exc:
            _safe_exit(5, f"{name!r}: {exc}")
        blocks.append(_render(value, as_json=as_json))

    separator = "\n" if as_json or part is not None else "\n\n"
    typer.echo(separator.join(blocks))


@app.command()
def run(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file with one name per line"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output JSON Lines file"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    stop_on_error: bool | None = typer.Option(  # noqa: B008
        None,
        "--stop-on-error/--no-stop-on-error",
        help="Abort on the first parsing error instead of recording it",
    ),
    fix_case: bool | None = typer.Option(  # noqa: B008
        None, "--fix-case/--no-fix-case", help="Normalize the casing of each word"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit minimal progress messages to stderr"
    ),
) -> dict[str, str]:
    """Parse every non-blank line of ``in_path`` writing JSON Lines to ``out_path``."""

    if verbose:
        configure_logging(verbose=True)
    parser = _build_parser(config_path, stop_on_error=stop_on_error, fix_case=fix_case, part=None)
    if verbose:
        typer.echo(f"Loaded config ({_describe(parser.config)})", err=True)

    try:
        text = in_path.read_text(encoding=encoding_in)
    except (OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    names = [line for line in text.splitlines() if line.strip()]
    if verbose:
        typer.echo(f"Read {len(names)} names", err=True)

    records: list[str] = []
    with Timing() as t_parse:
        for lineno, name in enumerate(names, start=1):
            try:
                result = parser.parse(name)
            except NameParsingError as exc:
                _safe_exit(5, f"entry {lineno}: {name!r}: {exc}")
            records.append(json.dumps({"input": name, **result.to_dict()}, ensure_ascii=False))
    if verbose:
        typer.echo(f"Parsed {len(records)} names in {t_parse.ms:.1f} ms", err=True)

    try:
        out_path.write_text("".join(f"{r}\n" for r in records), encoding="utf-8")
    except OSError as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo("Wrote output", err=True)

    return {"out": str(out_path)}


__all__ = ["app", "Timing"]
