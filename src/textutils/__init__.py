"""Classic Unix text utilities as a single command-line application."""

__version__ = "0.1.0"
