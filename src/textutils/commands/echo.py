"""Print arguments separated by spaces."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO


def render(text: Sequence[str], omit_newline: bool = False) -> str:
    ending = "" if omit_newline else "\n"
    return " ".join(text) + ending


def run(text: Sequence[str], omit_newline: bool = False, out: TextIO | None = None) -> None:
    (out or sys.stdout).write(render(text, omit_newline))
