"""Print the last (or trailing-from-offset) lines or bytes of files."""

from __future__ import annotations

import io
import logging
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Final, TextIO

from textutils.errors import InputError, UsageError
from textutils.utils.file import decode_lossy, open_input
from textutils.utils.formatting import format_header

logger: Final = logging.getLogger(__name__)

OFFSET_PATTERN: Final = re.compile(r"^([+-])?(\d+)$", re.ASCII)


class Anchor(Enum):
    """Where an offset is measured from."""

    START = "+"  # +N: begin at item N
    END = "-"  # N or -N: the last N items


@dataclass(frozen=True)
class Offset:
    anchor: Anchor
    count: int

    @classmethod
    def start(cls, count: int) -> Offset:
        return cls(Anchor.START, count)

    @classmethod
    def end(cls, count: int) -> Offset:
        return cls(Anchor.END, count)

    def __str__(self) -> str:
        if self.anchor is Anchor.START:
            return f"+{self.count}"
        return str(self.count)


def parse_offset(value: str) -> Offset | None:
    """Parse ``N``, ``-N`` or ``+N``; returns None for anything else."""
    match = OFFSET_PATTERN.match(value)
    if match is None:
        return None
    count = int(match.group(2))
    if match.group(1) == "+":
        return Offset.start(count)
    return Offset.end(count)


def parse_lines(value: str) -> Offset:
    offset = parse_offset(value)
    if offset is None:
        raise UsageError(f"illegal line count -- {value}")
    return offset


def parse_bytes(value: str) -> Offset:
    offset = parse_offset(value)
    if offset is None:
        raise UsageError(f"illegal byte count -- {value}")
    return offset


def start_index(offset: Offset, total: int) -> int | None:
    """Translate an offset into a zero-based start index.

    Args:
        offset: Requested offset
        total: Number of lines or bytes available

    Returns:
        Index of the first item to print, or None if nothing is printed
    """
    if total == 0:
        return None
    if offset.anchor is Anchor.START:
        if offset.count == 0:
            return 0
        if offset.count <= total:
            return offset.count - 1
        return None
    if offset.count == 0:
        return None
    return max(total - offset.count, 0)


def count_lines_bytes(data: bytes) -> tuple[int, int]:
    """Count lines and bytes; a final unterminated line counts as a line."""
    num_lines = data.count(b"\n")
    if data and not data.endswith(b"\n"):
        num_lines += 1
    return num_lines, len(data)


@dataclass(frozen=True)
class TailOptions:
    files: list[str]
    lines: Offset = Offset.end(10)
    bytes: Offset | None = None
    quiet: bool = False


def print_lines(stream: BinaryIO, offset: Offset, num_lines: int, out: TextIO) -> None:
    start = start_index(offset, num_lines)
    if start is None:
        return
    for index, line in enumerate(stream):
        if index >= start:
            out.write(decode_lossy(line))


def print_bytes(stream: BinaryIO, offset: Offset, num_bytes: int, out: TextIO) -> None:
    start = start_index(offset, num_bytes)
    if start is None:
        return
    stream.seek(start)
    out.write(decode_lossy(stream.read()))


def run(options: TailOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    multiple = len(options.files) > 1

    for index, filename in enumerate(options.files):
        try:
            with open_input(filename) as stream:
                data = stream.read()
            num_lines, num_bytes = count_lines_bytes(data)
            logger.debug("%s: %d lines, %d bytes", filename, num_lines, num_bytes)

            if multiple and not options.quiet:
                out.write(format_header(filename, first=index == 0))
            if options.bytes is not None:
                print_bytes(io.BytesIO(data), options.bytes, num_bytes, out)
            else:
                print_lines(io.BytesIO(data), options.lines, num_lines, out)
        except InputError as exc:
            logger.debug("Skipping %s: %s", filename, exc.reason)
            err.write(f"{exc}\n")
