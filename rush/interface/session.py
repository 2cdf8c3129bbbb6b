#!/usr/bin/env python3
# rush/interface/session.py
from __future__ import annotations

"""
Session: the sole owner of the line source for one interpreter run.

Use as a context manager so the script file is released on every exit
path:

    with create_session(config) as session:
        Driver(session).run()
"""

import logging
from dataclasses import dataclass

from rush.config import Config
from rush.interface.sources import ConsoleLineSource, FileLineSource, LineSource

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Session:
    reader: LineSource

    def close(self) -> None:
        self.reader.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_session(config: Config) -> Session:
    """
    Build the Session for `config`.

    Raises:
        SourceOpenError: the script could not be opened.
        UnsupportedModeError: no script given and the console is unavailable.
    """
    reader: LineSource
    if config.input_file is not None:
        reader = FileLineSource.open(config.input_file)
    else:
        reader = ConsoleLineSource()
    logger.debug("session ready (mode=%s, source=%s)",
                 config.mode.name, type(reader).__name__)
    return Session(reader=reader)
