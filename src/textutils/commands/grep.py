"""Search inputs for lines matching a regular expression."""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, TextIO

from textutils.errors import InputError, PatternError
from textutils.utils.file import STDIN, open_text, walk_files

logger: Final = logging.getLogger(__name__)


def compile_pattern(pattern: str, insensitive: bool = False) -> re.Pattern[str]:
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternError(f'Invalid pattern "{pattern}"', exc) from exc


@dataclass(frozen=True)
class GrepOptions:
    pattern: re.Pattern[str]
    files: list[str] = field(default_factory=lambda: [STDIN])
    recursive: bool = False
    count: bool = False
    invert_match: bool = False


def find_files(paths: Iterable[str], recursive: bool) -> Iterator[str | InputError]:
    """Expand command-line paths into searchable inputs.

    Errors are yielded in place so they are reported in order.
    """
    for path in paths:
        if path == STDIN:
            yield path
        elif not os.path.exists(path):
            yield InputError(path, FileNotFoundError(2, "No such file or directory"))
        elif os.path.isdir(path):
            if recursive:
                for entry in walk_files(Path(path)):
                    yield str(entry)
            else:
                yield InputError(path, reason="Is a directory")
        else:
            yield path


def find_lines(lines: Iterable[str], pattern: re.Pattern[str], invert: bool) -> list[str]:
    """Return the lines that match, or that don't when ``invert`` is set."""
    return [line for line in lines if bool(pattern.search(line)) != invert]


def run(options: GrepOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr

    entries = list(find_files(options.files, options.recursive))
    show_names = len(entries) > 1

    for entry in entries:
        if isinstance(entry, InputError):
            if entry.reason == "Is a directory":
                err.write(f"{entry.filename} is a directory\n")
            else:
                err.write(f"{entry}\n")
            continue

        prefix = f"{entry}:" if show_names else ""
        try:
            with open_text(entry) as lines:
                matches = find_lines(lines, options.pattern, options.invert_match)
        except InputError as exc:
            err.write(f"{exc}\n")
            continue

        logger.debug("%s: %d matching lines", entry, len(matches))
        if options.count:
            out.write(f"{prefix}{len(matches)}\n")
        else:
            for line in matches:
                out.write(f"{prefix}{line}")
