"""Text and number formatting utilities."""

from __future__ import annotations


def format_count(value: int, width: int) -> str:
    """Right-align a count in a column.

    Args:
        value: Count to format
        width: Minimum column width

    Returns:
        Formatted count string
    """
    return f"{value:>{width}}"


def format_header(name: str, first: bool) -> str:
    """Format the ``==> NAME <==`` banner used by head and tail.

    Args:
        name: File name to show
        first: Whether this is the first banner in the output

    Returns:
        Banner line including its trailing newline
    """
    prefix = "" if first else "\n"
    return f"{prefix}==> {name} <==\n"
