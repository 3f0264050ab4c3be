"""Print the first lines or bytes of files."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Final, TextIO

from textutils.errors import InputError, UsageError
from textutils.utils.file import STDIN, decode_lossy, open_input
from textutils.utils.formatting import format_header

logger: Final = logging.getLogger(__name__)


def parse_count(value: str, kind: str) -> int:
    """Parse a non-negative count given to ``-n`` or ``-c``.

    Args:
        value: Raw option value
        kind: ``"line"`` or ``"byte"``, used in the error message

    Returns:
        The parsed count

    Raises:
        UsageError: If the value is not a non-negative integer
    """
    if not value.isascii() or not value.isdigit():
        raise UsageError(f"illegal {kind} count -- {value}")
    return int(value)


@dataclass(frozen=True)
class HeadOptions:
    files: list[str] = field(default_factory=lambda: [STDIN])
    lines: int = 10
    bytes: int | None = None


def head_lines(stream: BinaryIO, count: int, out: TextIO) -> None:
    if count == 0:
        return
    for index, line in enumerate(stream, start=1):
        out.write(decode_lossy(line))
        if index >= count:
            break


def head_bytes(stream: BinaryIO, count: int, out: TextIO) -> None:
    out.write(decode_lossy(stream.read(count)))


def run(options: HeadOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    show_headers = len(options.files) > 1

    for index, filename in enumerate(options.files):
        try:
            with open_input(filename) as stream:
                if show_headers:
                    out.write(format_header(filename, first=index == 0))
                if options.bytes is not None:
                    head_bytes(stream, options.bytes, out)
                else:
                    head_lines(stream, options.lines, out)
        except InputError as exc:
            logger.debug("Skipping %s: %s", filename, exc.reason)
            err.write(f"{exc}\n")
