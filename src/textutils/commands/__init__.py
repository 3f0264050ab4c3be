"""Implementations of the individual text utilities.

Each module exposes an options dataclass and a ``run`` function that
writes results to ``out`` and per-file diagnostics to ``err``.
"""
