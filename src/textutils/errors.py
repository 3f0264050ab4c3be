"""Exception classes for the text utilities.

This module defines a hierarchy of exception classes for the error
conditions the commands can hit: bad arguments, unreadable inputs and
invalid configuration.
"""

from __future__ import annotations

from typing import Optional


class TextUtilsError(Exception):
    """Base error for every textutils failure.

    Carries the process exit code the CLI should use when the error is
    fatal.
    """

    def __init__(self, message: str, code: int = 1) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            code: Exit status for the CLI
        """
        super().__init__(message)
        self.message: str = message
        self.code: int = code


class UsageError(TextUtilsError):
    """Raised for invalid option values or conflicting options."""

    pass


class PositionError(UsageError):
    """Raised when a cut position list cannot be parsed."""

    pass


class PatternError(UsageError):
    """Raised when a regular expression fails to compile."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class InputError(TextUtilsError):
    """Raised when an input (or output) file cannot be opened or read."""

    def __init__(
        self, filename: str, original_error: Optional[Exception] = None, reason: str = ""
    ) -> None:
        """Initialize with file error details.

        Args:
            filename: Name of the file as given on the command line
            original_error: The OSError that was caught, if any
            reason: Explicit reason; defaults to the OSError's strerror
        """
        if not reason:
            if isinstance(original_error, OSError) and original_error.strerror:
                reason = original_error.strerror
            elif original_error is not None:
                reason = str(original_error)
            else:
                reason = "Unknown error"
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason = reason
        self.original_error = original_error


class ConfigError(TextUtilsError):
    """Raised when the configuration file is missing or invalid."""

    pass
