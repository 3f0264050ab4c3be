"""File utility functions shared by the commands."""

from __future__ import annotations

import io
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Final, TextIO

from textutils.errors import InputError

logger: Final = logging.getLogger(__name__)

STDIN: Final = "-"


@contextmanager
def open_input(name: str) -> Iterator[BinaryIO]:
    """Open a named file, or standard input for ``-``, in binary mode.

    Standard input is yielded as-is and never closed.

    Raises:
        InputError: If the file does not exist, is a directory or is unreadable
    """
    if name == STDIN:
        logger.debug("Reading from standard input")
        yield sys.stdin.buffer
        return

    if os.path.isdir(name):
        raise InputError(name, reason="Is a directory")
    try:
        handle = open(name, "rb")
    except OSError as exc:
        raise InputError(name, exc) from exc

    logger.debug("Opened %s", name)
    with handle:
        yield handle


@contextmanager
def as_text(raw: BinaryIO) -> Iterator[TextIO]:
    """View an open binary stream as UTF-8 text split on ``\\n`` only, endings preserved."""
    wrapper = io.TextIOWrapper(raw, encoding="utf-8", errors="replace", newline="\n")
    try:
        yield wrapper
    finally:
        # Detach so closing the wrapper never closes the underlying stream
        wrapper.detach()


@contextmanager
def open_text(name: str) -> Iterator[TextIO]:
    """Open an input as UTF-8 text with line endings preserved."""
    with open_input(name) as raw, as_text(raw) as text:
        yield text


def decode_lossy(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def strip_newline(line: str) -> str:
    """Remove one trailing line ending (``\\n`` or ``\\r\\n``)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every regular file at or below ``root`` in sorted order."""
    if not root.is_dir():
        yield root
        return
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            # Directory symlinks are not followed
            if not entry.is_symlink():
                yield from walk_files(entry)
            continue
        yield entry
