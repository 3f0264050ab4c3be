"""Select fields, bytes or characters from each line."""

from __future__ import annotations

import csv
import io
import logging
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, TextIO

from textutils.errors import InputError, PositionError, UsageError
from textutils.utils.file import STDIN, decode_lossy, open_input, open_text, strip_newline

logger: Final = logging.getLogger(__name__)

INTERVAL_PATTERN: Final = re.compile(r"^(\d+)(?:-(\d+))?$", re.ASCII)

PositionList = list[range]


class ExtractMode(Enum):
    """What cut selects from each line."""

    FIELDS = "fields"
    BYTES = "bytes"
    CHARS = "chars"


def interval_to_range(interval: str) -> range:
    """Turn ``N`` or ``N-M`` (one-based, inclusive) into a zero-based range."""
    match = INTERVAL_PATTERN.match(interval)
    if match is None:
        raise PositionError(f'illegal list value: "{interval}"')

    start = int(match.group(1))
    if start < 1:
        raise PositionError(f'illegal list value: "{start}"')

    if match.group(2) is None:
        return range(start - 1, start)

    end = int(match.group(2))
    if start >= end:
        raise PositionError(
            f"First number in range ({start}) must be lower than second number ({end})"
        )
    return range(start - 1, end)


def parse_positions(value: str) -> PositionList:
    """Parse a comma-separated position list such as ``1,3-5``.

    Raises:
        PositionError: If any item is malformed
    """
    return [interval_to_range(item) for item in value.split(",")]


def parse_delimiter(value: str) -> str:
    if len(value.encode("utf-8")) != 1:
        raise UsageError(f'--delim "{value}" must be a single byte')
    return value


@dataclass(frozen=True)
class CutOptions:
    mode: ExtractMode
    positions: PositionList
    files: list[str] = field(default_factory=lambda: [STDIN])
    delimiter: str = "\t"

    @classmethod
    def from_args(
        cls,
        files: list[str],
        delimiter: str,
        fields: str | None = None,
        bytes: str | None = None,
        chars: str | None = None,
    ) -> CutOptions:
        """Validate raw option strings and build the options.

        Raises:
            UsageError: On a bad delimiter, a missing or repeated mode,
                or a malformed position list
        """
        given = [
            (mode, raw)
            for mode, raw in (
                (ExtractMode.FIELDS, fields),
                (ExtractMode.BYTES, bytes),
                (ExtractMode.CHARS, chars),
            )
            if raw is not None
        ]
        if not given:
            raise UsageError("Must have --fields, --bytes, or --chars")
        if len(given) > 1:
            raise UsageError("Only one of --fields, --bytes, or --chars may be given")

        mode, raw = given[0]
        return cls(
            mode=mode,
            positions=parse_positions(raw),
            files=files,
            delimiter=parse_delimiter(delimiter),
        )


def select(items: list, positions: PositionList) -> list:
    """Pick items at the given ranges, in order, ignoring out-of-range indices."""
    return [items[i] for span in positions for i in span if i < len(items)]


def extract_chars(line: str, positions: PositionList) -> str:
    return "".join(select(list(line), positions))


def extract_bytes(line: bytes, positions: PositionList) -> str:
    return decode_lossy(bytes(select(list(line), positions)))


def strip_raw_newline(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


def extract_fields(record: list[str], positions: PositionList) -> list[str]:
    return select(record, positions)


def cut_fields(lines: Iterable[str], options: CutOptions, out: TextIO) -> None:
    reader = csv.reader(lines, delimiter=options.delimiter)
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=options.delimiter, lineterminator="\n")
    for record in reader:
        writer.writerow(extract_fields(record, options.positions))
        out.write(buffer.getvalue())
        buffer.seek(0)
        buffer.truncate()


def run(options: CutOptions, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    logger.debug("Cutting %s %s", options.mode.value, options.positions)

    for filename in options.files:
        try:
            if options.mode is ExtractMode.BYTES:
                with open_input(filename) as stream:
                    for raw in stream:
                        line = strip_raw_newline(raw)
                        out.write(f"{extract_bytes(line, options.positions)}\n")
                continue
            with open_text(filename) as lines:
                if options.mode is ExtractMode.FIELDS:
                    cut_fields(lines, options, out)
                    continue
                for line in lines:
                    out.write(f"{extract_chars(strip_newline(line), options.positions)}\n")
        except InputError as exc:
            logger.debug("Skipping %s: %s", filename, exc.reason)
            err.write(f"{exc}\n")
