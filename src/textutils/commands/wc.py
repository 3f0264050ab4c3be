"""Count lines, words, bytes and characters."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Final, TextIO

from textutils.errors import InputError, UsageError
from textutils.utils.file import STDIN, decode_lossy, open_input
from textutils.utils.formatting import format_count

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileCounts:
    lines: int = 0
    words: int = 0
    bytes: int = 0
    chars: int = 0

    def __add__(self, other: FileCounts) -> FileCounts:
        return FileCounts(
            lines=self.lines + other.lines,
            words=self.words + other.words,
            bytes=self.bytes + other.bytes,
            chars=self.chars + other.chars,
        )


@dataclass(frozen=True)
class WcOptions:
    files: list[str] = field(default_factory=lambda: [STDIN])
    lines: bool = False
    words: bool = False
    bytes: bool = False
    chars: bool = False
    count_width: int = 8

    def __post_init__(self) -> None:
        if self.bytes and self.chars:
            raise UsageError("the argument '--bytes' cannot be used with '--chars'")

    def resolved(self) -> WcOptions:
        """Apply the default of lines, words and bytes when no flag is set."""
        if any((self.lines, self.words, self.bytes, self.chars)):
            return self
        return WcOptions(
            files=self.files,
            lines=True,
            words=True,
            bytes=True,
            count_width=self.count_width,
        )


def count(data: bytes) -> FileCounts:
    """Count the contents of one input."""
    text = decode_lossy(data)
    return FileCounts(
        lines=data.count(b"\n"),
        words=len(text.split()),
        bytes=len(data),
        chars=len(text),
    )


def format_counts(counts: FileCounts, options: WcOptions, name: str) -> str:
    columns = [
        (options.lines, counts.lines),
        (options.words, counts.words),
        (options.bytes, counts.bytes),
        (options.chars, counts.chars),
    ]
    row = "".join(format_count(value, options.count_width) for shown, value in columns if shown)
    suffix = "" if name == STDIN else f" {name}"
    return f"{row}{suffix}\n"


def run(options: WcOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    options = options.resolved()

    total = FileCounts()
    for filename in options.files:
        try:
            with open_input(filename) as stream:
                counts = count(stream.read())
        except InputError as exc:
            logger.debug("Skipping %s: %s", filename, exc.reason)
            err.write(f"{exc}\n")
            continue
        total += counts
        out.write(format_counts(counts, options, filename))

    if len(options.files) > 1:
        out.write(format_counts(total, options, "total"))
