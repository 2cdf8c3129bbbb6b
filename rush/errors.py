#!/usr/bin/env python3
# rush/errors.py
from __future__ import annotations

"""
Error taxonomy.

Fatal (surfaced to main, exit code 1):
- ConfigError / UnsupportedModeError: no usable input source.
- SourceOpenError: the script path could not be opened.
- SourceReadError: an I/O failure other than end-of-stream.

Recoverable (handled inside the executor, loop continues):
- SpawnError: the requested program could not be launched.
"""


class RushError(Exception):
    """Base class for every error the interpreter reports itself."""


class ConfigError(RushError):
    """No usable input source could be determined."""


class UnsupportedModeError(ConfigError):
    """The requested input mode exists by name but is not implemented."""

    def __init__(self, mode: str = "interactive") -> None:
        super().__init__(f"{mode} mode is not supported")
        self.mode = mode


class SourceOpenError(RushError):
    """The requested script path could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class SourceReadError(RushError):
    """Reading a line failed for a reason other than end-of-stream."""


class SpawnError(RushError):
    """A command could not be launched."""

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"{program}: {reason}")
        self.program = program
        self.reason = reason
