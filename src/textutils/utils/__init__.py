"""Common utility functions and helpers for the textutils package."""

from textutils.utils.file import (
    STDIN,
    as_text,
    decode_lossy,
    open_input,
    open_text,
    strip_newline,
    walk_files,
)
from textutils.utils.formatting import format_count, format_header

__all__ = [
    "STDIN",
    "as_text",
    "decode_lossy",
    "format_count",
    "format_header",
    "open_input",
    "open_text",
    "strip_newline",
    "walk_files",
]
