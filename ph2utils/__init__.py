"""Utilities for acquisition tooling: command-line parsing, JSON values, timing and console helpers."""

__version__ = "0.1.0"

__all__ = [
    "argvparser",
    "cmdline",
    "consolecolor",
    "jsonparse",
    "jsonvalue",
    "timer",
    "utilities",
]