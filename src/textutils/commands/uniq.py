"""Collapse adjacent duplicate lines."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Final, TextIO

from textutils.errors import InputError
from textutils.utils.file import STDIN, open_text

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class UniqOptions:
    in_file: str = STDIN
    out_file: str | None = None
    count: bool = False


def group_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(count, first_line)`` for each run of equal adjacent lines.

    Lines compare equal when they match after trailing whitespace is removed.
    """
    previous: str | None = None
    run_length = 0
    for line in lines:
        if previous is not None and line.rstrip() == previous.rstrip():
            run_length += 1
            continue
        if previous is not None:
            yield run_length, previous
        previous = line
        run_length = 1
    if previous is not None:
        yield run_length, previous


def format_group(run_length: int, line: str, show_count: bool) -> str:
    if show_count:
        return f"{run_length:>4} {line}"
    return line


def write_groups(lines: Iterable[str], out: TextIO, show_count: bool) -> None:
    for run_length, line in group_lines(lines):
        out.write(format_group(run_length, line, show_count))


def run(options: UniqOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout

    with open_text(options.in_file) as lines:
        if options.out_file is None:
            write_groups(lines, out, options.count)
            return

        logger.debug("Writing to %s", options.out_file)
        try:
            with Path(options.out_file).open("w", encoding="utf-8", newline="") as target:
                write_groups(lines, target, options.count)
        except OSError as exc:
            raise InputError(options.out_file, exc) from exc
