"""Module and console-script entry point for textutils."""

from __future__ import annotations

import sys

import click

from textutils.cli import app


def run(args: list[str] | None = None) -> int:
    """Run the CLI and return its exit status; Ctrl+C exits quietly with 0."""
    try:
        result = app(args=args, prog_name="textutils", standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        return 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(run())
