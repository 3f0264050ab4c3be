"""Text utilities CLI application.

This module provides the command-line interface for textutils: one
subcommand per utility plus configuration helpers. Option parsing lives
here; the behavior of each utility lives in ``textutils.commands``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final

import typer

from textutils import __version__
from textutils.commands import cat as cat_cmd
from textutils.commands import comm as comm_cmd
from textutils.commands import cut as cut_cmd
from textutils.commands import echo as echo_cmd
from textutils.commands import find as find_cmd
from textutils.commands import fortune as fortune_cmd
from textutils.commands import grep as grep_cmd
from textutils.commands import head as head_cmd
from textutils.commands import tail as tail_cmd
from textutils.commands import uniq as uniq_cmd
from textutils.commands import wc as wc_cmd
from textutils.errors import TextUtilsError, UsageError
from textutils.settings import UserSettings
from textutils.utils.file import STDIN

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Classic Unix text utilities", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "textutils.cli"

# Shared options
CONFIG_OPTION = typer.Option(None, "--config", dir_okay=False, help="Config file")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FILES_ARGUMENT = typer.Argument(None, metavar="FILE...", help="Input file(s), '-' for stdin")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"textutils {__version__}")
        raise typer.Exit()


@contextmanager
def _fatal_errors() -> Iterator[None]:
    """Report a fatal TextUtilsError in red and exit with its code."""
    try:
        yield
    except TextUtilsError as exc:
        logger.debug("Fatal error", exc_info=exc)
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=exc.code) from exc


def _settings(ctx: typer.Context) -> UserSettings:
    if isinstance(ctx.obj, UserSettings):
        return ctx.obj
    return UserSettings()


def _inputs(files: list[str] | None) -> list[str]:
    return list(files) if files else [STDIN]


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Classic Unix text utilities."""
    _configure_logging(debug)
    with _fatal_errors():
        ctx.obj = UserSettings.load(config)


# ───────────────────────────── utilities ─────────────────────────────────────
@app.command()
def cat(
    ctx: typer.Context,
    files: list[str] | None = FILES_ARGUMENT,
    number_lines: bool = typer.Option(False, "-n", "--number", help="Number lines"),
    number_nonblank: bool = typer.Option(
        False, "-b", "--number-nonblank", help="Number nonblank lines"
    ),
) -> None:
    """Concatenate files to standard output."""
    with _fatal_errors():
        options = cat_cmd.CatOptions(
            files=_inputs(files),
            number_lines=number_lines,
            number_nonblank=number_nonblank,
            number_width=_settings(ctx).number_width,
        )
        cat_cmd.run(options)


@app.command()
def head(
    ctx: typer.Context,
    files: list[str] | None = FILES_ARGUMENT,
    lines: str | None = typer.Option(None, "-n", "--lines", help="Number of lines to print"),
    bytes_: str | None = typer.Option(None, "-c", "--bytes", help="Number of bytes to print"),
) -> None:
    """Print the first lines of each file."""
    with _fatal_errors():
        if lines is not None and bytes_ is not None:
            raise UsageError("the argument '--lines' cannot be used with '--bytes'")
        options = head_cmd.HeadOptions(
            files=_inputs(files),
            lines=(
                head_cmd.parse_count(lines, "line")
                if lines is not None
                else _settings(ctx).head_lines
            ),
            bytes=head_cmd.parse_count(bytes_, "byte") if bytes_ is not None else None,
        )
        head_cmd.run(options)


@app.command()
def tail(
    ctx: typer.Context,
    files: list[str] = typer.Argument(..., metavar="FILE...", help="Input file(s)"),
    lines: str | None = typer.Option(None, "-n", "--lines", help="Number of lines"),
    bytes_: str | None = typer.Option(None, "-c", "--bytes", help="Number of bytes"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress headers"),
) -> None:
    """Print the last lines of each file (+N starts at line N)."""
    with _fatal_errors():
        if lines is not None and bytes_ is not None:
            raise UsageError("the argument '--lines' cannot be used with '--bytes'")
        options = tail_cmd.TailOptions(
            files=list(files),
            lines=(
                tail_cmd.parse_lines(lines)
                if lines is not None
                else tail_cmd.Offset.end(_settings(ctx).tail_lines)
            ),
            bytes=tail_cmd.parse_bytes(bytes_) if bytes_ is not None else None,
            quiet=quiet,
        )
        tail_cmd.run(options)


@app.command()
def wc(
    ctx: typer.Context,
    files: list[str] | None = FILES_ARGUMENT,
    lines: bool = typer.Option(False, "-l", "--lines", help="Show line count"),
    words: bool = typer.Option(False, "-w", "--words", help="Show word count"),
    bytes_: bool = typer.Option(False, "-c", "--bytes", help="Show byte count"),
    chars: bool = typer.Option(False, "-m", "--chars", help="Show character count"),
) -> None:
    """Print line, word and byte counts for each file."""
    with _fatal_errors():
        options = wc_cmd.WcOptions(
            files=_inputs(files),
            lines=lines,
            words=words,
            bytes=bytes_,
            chars=chars,
            count_width=_settings(ctx).count_width,
        )
        wc_cmd.run(options)


@app.command()
def uniq(
    in_file: str = typer.Argument(STDIN, help="Input file"),
    out_file: str | None = typer.Argument(None, help="Output file"),
    count: bool = typer.Option(False, "-c", "--count", help="Show counts"),
) -> None:
    """Collapse adjacent repeated lines."""
    with _fatal_errors():
        uniq_cmd.run(uniq_cmd.UniqOptions(in_file=in_file, out_file=out_file, count=count))


@app.command()
def cut(
    ctx: typer.Context,
    files: list[str] | None = FILES_ARGUMENT,
    delimiter: str | None = typer.Option(None, "-d", "--delim", help="Field delimiter"),
    fields: str | None = typer.Option(None, "-f", "--fields", help="Selected fields"),
    bytes_: str | None = typer.Option(None, "-b", "--bytes", help="Selected bytes"),
    chars: str | None = typer.Option(None, "-c", "--chars", help="Selected characters"),
) -> None:
    """Print selected parts of each line."""
    with _fatal_errors():
        options = cut_cmd.CutOptions.from_args(
            files=_inputs(files),
            delimiter=delimiter if delimiter is not None else _settings(ctx).cut_delimiter,
            fields=fields,
            bytes=bytes_,
            chars=chars,
        )
        cut_cmd.run(options)


@app.command()
def comm(
    ctx: typer.Context,
    file1: str = typer.Argument(..., help="Input file 1"),
    file2: str = typer.Argument(..., help="Input file 2"),
    suppress_col1: bool = typer.Option(False, "-1", help="Suppress printing of column 1"),
    suppress_col2: bool = typer.Option(False, "-2", help="Suppress printing of column 2"),
    suppress_col3: bool = typer.Option(False, "-3", help="Suppress printing of column 3"),
    insensitive: bool = typer.Option(
        False, "-i", help="Case-insensitive comparison of lines"
    ),
    delimiter: str | None = typer.Option(
        None, "-d", "--output-delimiter", help="Output delimiter"
    ),
) -> None:
    """Compare two sorted files line by line."""
    with _fatal_errors():
        options = comm_cmd.CommOptions(
            file1=file1,
            file2=file2,
            show_col1=not suppress_col1,
            show_col2=not suppress_col2,
            show_col3=not suppress_col3,
            insensitive=insensitive,
            delimiter=delimiter if delimiter is not None else _settings(ctx).comm_delimiter,
        )
        comm_cmd.run(options)


@app.command()
def grep(
    pattern: str = typer.Argument(..., help="Search pattern"),
    files: list[str] | None = FILES_ARGUMENT,
    recursive: bool = typer.Option(False, "-r", "--recursive", help="Recursive search"),
    count: bool = typer.Option(False, "-c", "--count", help="Count occurrences"),
    invert_match: bool = typer.Option(False, "-i", "--invert-match", help="Invert match"),
) -> None:
    """Print lines matching a regular expression."""
    with _fatal_errors():
        options = grep_cmd.GrepOptions(
            pattern=grep_cmd.compile_pattern(pattern),
            files=_inputs(files),
            recursive=recursive,
            count=count,
            invert_match=invert_match,
        )
        grep_cmd.run(options)


@app.command()
def find(
    paths: list[str] | None = typer.Argument(None, metavar="PATH...", help="Search paths"),
    names: list[str] | None = typer.Option(None, "-n", "--name", help="Name regex"),
    entry_types: list[find_cmd.EntryType] | None = typer.Option(
        None, "-t", "--type", help="Entry type: f, d or l"
    ),
) -> None:
    """Find files and directories by name and type."""
    with _fatal_errors():
        options = find_cmd.FindOptions(
            paths=list(paths) if paths else ["."],
            names=[find_cmd.compile_name(name) for name in names or []],
            entry_types=list(entry_types or []),
        )
        find_cmd.run(options)


@app.command()
def fortune(
    ctx: typer.Context,
    sources: list[Path] | None = typer.Argument(
        None, metavar="FILE...", help="Input files or directories"
    ),
    pattern: str | None = typer.Option(None, "-m", "--pattern", help="Pattern"),
    insensitive: bool = typer.Option(
        False, "-i", "--insensitive", help="Case-insensitive pattern matching"
    ),
    seed: int | None = typer.Option(None, "-s", "--seed", min=0, help="Random seed"),
) -> None:
    """Print a random fortune, or all fortunes matching a pattern."""
    settings = _settings(ctx)
    with _fatal_errors():
        options = fortune_cmd.FortuneOptions(
            sources=list(sources) if sources else list(settings.fortune_sources),
            pattern=(
                grep_cmd.compile_pattern(pattern, insensitive) if pattern is not None else None
            ),
            seed=seed if seed is not None else settings.fortune_seed,
        )
        fortune_cmd.run(options)


@app.command()
def echo(
    text: list[str] = typer.Argument(..., help="Input text"),
    omit_newline: bool = typer.Option(False, "-n", "--no-newline", help="Do not print newline"),
) -> None:
    """Print the given text."""
    echo_cmd.run(text, omit_newline)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    with _fatal_errors():
        UserSettings.load(file)
    typer.secho("Config valid", fg=typer.colors.GREEN)


@config_app.command("show")
def show_config(ctx: typer.Context):
    """Print the effective settings as YAML."""
    typer.echo(_settings(ctx).to_yaml(), nl=False)
