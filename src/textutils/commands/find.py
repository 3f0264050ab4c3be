"""Walk directory trees and print entries matching name and type filters."""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, TextIO

from textutils.errors import InputError, PatternError

logger: Final = logging.getLogger(__name__)


class EntryType(str, Enum):
    DIR = "d"
    FILE = "f"
    LINK = "l"


def compile_name(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(f'Invalid --name "{pattern}"', exc) from exc


@dataclass(frozen=True)
class FindOptions:
    paths: list[str] = field(default_factory=lambda: ["."])
    names: list[re.Pattern[str]] = field(default_factory=list)
    entry_types: list[EntryType] = field(default_factory=list)


def entry_type(path: str) -> EntryType | None:
    """Classify a path without following symlinks."""
    if os.path.islink(path):
        return EntryType.LINK
    if os.path.isdir(path):
        return EntryType.DIR
    if os.path.isfile(path):
        return EntryType.FILE
    return None


def walk(root: str) -> Iterator[str | InputError]:
    """Yield ``root`` and everything below it, depth-first in sorted order.

    Unreadable directories are yielded as errors and the walk continues.
    """
    yield root
    if os.path.islink(root) or not os.path.isdir(root):
        return
    try:
        names = sorted(os.listdir(root))
    except OSError as exc:
        yield InputError(root, exc)
        return
    for name in names:
        yield from walk(os.path.join(root, name))


def matches(path: str, options: FindOptions) -> bool:
    if options.entry_types and entry_type(path) not in options.entry_types:
        return False
    if options.names:
        name = os.path.basename(os.path.normpath(path))
        return any(pattern.search(name) for pattern in options.names)
    return True


def run(options: FindOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr

    for root in options.paths:
        if not os.path.lexists(root):
            err.write(f"{InputError(root, FileNotFoundError(2, 'No such file or directory'))}\n")
            continue
        logger.debug("Walking %s", root)
        for path in walk(root):
            if isinstance(path, InputError):
                err.write(f"{path}\n")
            elif matches(path, options):
                out.write(f"{path}\n")
