"""Print a random fortune, or every fortune matching a pattern."""

from __future__ import annotations

import logging
import random
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, TextIO

from textutils.errors import InputError, UsageError
from textutils.utils.file import open_text, strip_newline, walk_files

logger: Final = logging.getLogger(__name__)

SEPARATOR: Final = "%"
INDEX_SUFFIX: Final = ".dat"


@dataclass(frozen=True)
class Fortune:
    source: str
    text: str


@dataclass(frozen=True)
class FortuneOptions:
    sources: list[Path] = field(default_factory=list)
    pattern: re.Pattern[str] | None = None
    seed: int | None = None


def find_files(sources: Iterable[Path]) -> list[Path]:
    """Expand sources into a sorted, de-duplicated list of fortune files.

    Raises:
        InputError: If a source does not exist
    """
    found: set[Path] = set()
    for source in sources:
        if not source.exists():
            raise InputError(str(source), FileNotFoundError(2, "No such file or directory"))
        for path in walk_files(source):
            if path.suffix != INDEX_SUFFIX:
                found.add(path)
    return sorted(found)


def parse_fortunes(lines: Iterable[str], source: str) -> list[Fortune]:
    """Split fortune-file lines into records separated by ``%`` lines."""
    fortunes: list[Fortune] = []
    buffer: list[str] = []

    def flush() -> None:
        text = "\n".join(buffer).strip()
        if text:
            fortunes.append(Fortune(source=source, text=text))
        buffer.clear()

    for line in lines:
        line = strip_newline(line)
        if line == SEPARATOR:
            flush()
        else:
            buffer.append(line)
    flush()
    return fortunes


def read_fortunes(paths: Iterable[Path]) -> list[Fortune]:
    fortunes: list[Fortune] = []
    for path in paths:
        with open_text(str(path)) as lines:
            fortunes.extend(parse_fortunes(lines, path.name))
    logger.debug("Read %d fortunes", len(fortunes))
    return fortunes


def pick_fortune(fortunes: list[Fortune], seed: int | None = None) -> str | None:
    if not fortunes:
        return None
    return random.Random(seed).choice(fortunes).text


def run(options: FortuneOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr

    if not options.sources:
        raise UsageError("At least one fortune source is required")

    fortunes = read_fortunes(find_files(options.sources))

    if options.pattern is None:
        out.write(f"{pick_fortune(fortunes, options.seed) or 'No fortunes found'}\n")
        return

    previous_source: str | None = None
    for fortune in fortunes:
        if not options.pattern.search(fortune.text):
            continue
        if fortune.source != previous_source:
            err.write(f"({fortune.source})\n{SEPARATOR}\n")
            previous_source = fortune.source
        out.write(f"{fortune.text}\n{SEPARATOR}\n")
