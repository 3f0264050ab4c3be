"""Concatenate files, optionally numbering lines."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Final, TextIO

from textutils.errors import InputError, UsageError
from textutils.utils.file import STDIN, open_text, strip_newline

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatOptions:
    files: list[str] = field(default_factory=lambda: [STDIN])
    number_lines: bool = False
    number_nonblank: bool = False
    number_width: int = 6

    def __post_init__(self) -> None:
        if self.number_lines and self.number_nonblank:
            raise UsageError("the argument '-n' cannot be used with '-b'")


def number_lines(lines: TextIO, out: TextIO, options: CatOptions) -> None:
    """Write lines from one input, numbered according to ``options``."""
    counter = 0
    for line in lines:
        text = strip_newline(line)
        if options.number_lines:
            counter += 1
            out.write(f"{counter:>{options.number_width}}\t{text}\n")
        elif options.number_nonblank:
            if text:
                counter += 1
                out.write(f"{counter:>{options.number_width}}\t{text}\n")
            else:
                out.write("\n")
        else:
            out.write(f"{text}\n")


def run(options: CatOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr

    for filename in options.files:
        try:
            with open_text(filename) as lines:
                number_lines(lines, out, options)
        except InputError as exc:
            logger.debug("Skipping %s: %s", filename, exc.reason)
            err.write(f"{exc}\n")
