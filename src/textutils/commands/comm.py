"""Compare two sorted files line by line."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Final, TextIO

from textutils.errors import UsageError
from textutils.utils.file import STDIN, open_text, strip_newline

logger: Final = logging.getLogger(__name__)


class Column(IntEnum):
    ONLY_FIRST = 1
    ONLY_SECOND = 2
    BOTH = 3


@dataclass(frozen=True)
class CommOptions:
    file1: str
    file2: str
    show_col1: bool = True
    show_col2: bool = True
    show_col3: bool = True
    insensitive: bool = False
    delimiter: str = "\t"

    def __post_init__(self) -> None:
        if self.file1 == STDIN and self.file2 == STDIN:
            raise UsageError('Both input files cannot be STDIN ("-")')


def read_lines(filename: str) -> list[str]:
    with open_text(filename) as stream:
        return [strip_newline(line) for line in stream]


def merge(lines1: list[str], lines2: list[str], insensitive: bool = False) -> list[tuple[Column, str]]:
    """Walk two sorted line lists and assign each line to a column.

    With ``insensitive``, lines met while both inputs remain are compared and
    reported in lower case; leftovers after either input ends keep their case.
    """
    merged: list[tuple[Column, str]] = []
    i1 = i2 = 0
    while i1 < len(lines1) or i2 < len(lines2):
        if i1 >= len(lines1):
            merged.append((Column.ONLY_SECOND, lines2[i2]))
            i2 += 1
        elif i2 >= len(lines2):
            merged.append((Column.ONLY_FIRST, lines1[i1]))
            i1 += 1
        else:
            line1, line2 = lines1[i1], lines2[i2]
            if insensitive:
                line1, line2 = line1.lower(), line2.lower()
            if line1 < line2:
                merged.append((Column.ONLY_FIRST, line1))
                i1 += 1
            elif line1 > line2:
                merged.append((Column.ONLY_SECOND, line2))
                i2 += 1
            else:
                merged.append((Column.BOTH, line1))
                i1 += 1
                i2 += 1
    return merged


def format_line(column: Column, line: str, options: CommOptions) -> str | None:
    """Render a line in its column, or None when the column is suppressed."""
    shown = {
        Column.ONLY_FIRST: options.show_col1,
        Column.ONLY_SECOND: options.show_col2,
        Column.BOTH: options.show_col3,
    }
    if not shown[column]:
        return None

    indent = 0
    if column >= Column.ONLY_SECOND and options.show_col1:
        indent += 1
    if column is Column.BOTH and options.show_col2:
        indent += 1
    return f"{options.delimiter * indent}{line}\n"


def run(options: CommOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout

    lines1 = read_lines(options.file1)
    lines2 = read_lines(options.file2)
    logger.debug("Comparing %d and %d lines", len(lines1), len(lines2))

    for column, line in merge(lines1, lines2, options.insensitive):
        rendered = format_line(column, line, options)
        if rendered is not None:
            out.write(rendered)
