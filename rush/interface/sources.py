#!/usr/bin/env python3
# rush/interface/sources.py
from __future__ import annotations

"""
Line sources.

Every source answers one question, "what is the next line?", with either
the line (trailing '\\n' kept when present), None at end-of-stream, or a
SourceReadError. End-of-stream is sticky.

Variants:
    FileLineSource     buffered text stream, usually a script file
    ConsoleLineSource  interactive console; not implemented, fails fast
"""

import logging
import os
from typing import IO, Optional

from rush.errors import SourceOpenError, SourceReadError, UnsupportedModeError

logger = logging.getLogger(__name__)


class LineSource:
    """
    Base interface for line sources.

    Subclasses implement:
        - read_line()
        - close()

    This base also provides context manager support to guarantee close().
    """

    def read_line(self) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileLineSource(LineSource):
    """Reads lines from an open text stream, which it owns."""

    def __init__(self, stream: IO[str], *, name: str = "<stream>") -> None:
        self._stream = stream
        self.name = name
        self._eof = False

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> "FileLineSource":
        """Open `path` for reading; SourceOpenError if that fails."""
        name = os.fspath(path)
        try:
            # newline="\n": split on LF only, no '\r' translation
            stream = open(name, "r", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise SourceOpenError(name, exc.strerror or str(exc)) from exc
        logger.debug("opened script %s", name)
        return cls(stream, name=name)

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def read_line(self) -> Optional[str]:
        if self._eof:
            return None
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(f"{self.name}: {exc}") from exc
        if line == "":
            self._eof = True
            return None
        return line

    def close(self) -> None:
        if not self._stream.closed:
            self._stream.close()
            logger.debug("closed %s", self.name)


class ConsoleLineSource(LineSource):
    """
    Interactive console input.

    Named so an interactive frontend can slot in later without touching the
    session or driver; for now both construction and reading raise
    UnsupportedModeError.
    """

    def __init__(self) -> None:
        raise UnsupportedModeError("interactive")

    def read_line(self) -> Optional[str]:
        raise UnsupportedModeError("interactive")

    def close(self) -> None:
        pass
