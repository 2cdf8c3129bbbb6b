#!/usr/bin/env python3
# rush/interface/driver.py
from __future__ import annotations

"""
Driver loop.

    READING --line--> EXECUTING --> READING
    READING --end-of-stream--> TERMINATED_CLEAN
    READING --read error--> TERMINATED_FAILED

Terminal states are absorbing: once reached, step() does no further I/O.
Spawn failures are handled by the executor and never change the state.
"""

import enum
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rush.errors import RushError, SourceReadError
from rush.interface.executor import execute
from rush.interface.parser import tokenize
from rush.interface.session import Session
from rush.ui import print_line

logger = logging.getLogger(__name__)

# Prefix for every fatal diagnostic on stderr
DIAGNOSTIC_PREFIX = "rush: "

EXIT_OK = 0
EXIT_FAILURE = 1


class LoopState(enum.Enum):
    READING = "reading"
    EXECUTING = "executing"
    TERMINATED_CLEAN = "terminated-clean"
    TERMINATED_FAILED = "terminated-failed"

    @property
    def terminal(self) -> bool:
        return self in (LoopState.TERMINATED_CLEAN, LoopState.TERMINATED_FAILED)


@dataclass(slots=True)
class LoopResult:
    state: LoopState
    error: Optional[RushError] = None
    lines_read: int = 0
    commands_run: int = 0

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.state is LoopState.TERMINATED_CLEAN else EXIT_FAILURE


def report_error(message: str) -> None:
    """Write a fatal diagnostic as 'rush: <message>' on stderr."""
    print_line(f"{DIAGNOSTIC_PREFIX}{message}", file=sys.stderr, flush=True)


class Driver:
    """Pulls lines from a session, tokenizes and executes them."""

    def __init__(
        self,
        session: Session,
        *,
        executor: Callable[[Sequence[str]], Optional[int]] = execute,
    ) -> None:
        self.session = session
        self._execute = executor
        self.state = LoopState.READING
        self.error: Optional[RushError] = None
        self.lines_read = 0
        self.commands_run = 0

    def step(self) -> LoopState:
        """Run one read → tokenize → execute cycle and return the new state."""
        if self.state.terminal:
            return self.state

        try:
            line = self.session.reader.read_line()
        except SourceReadError as exc:
            self.error = exc
            self.state = LoopState.TERMINATED_FAILED
            logger.debug("read failed after %d lines: %s", self.lines_read, exc)
            return self.state

        if line is None:
            self.state = LoopState.TERMINATED_CLEAN
            logger.debug("end of input after %d lines", self.lines_read)
            return self.state

        self.lines_read += 1
        tokens = tokenize(line)
        if tokens:
            self.state = LoopState.EXECUTING
            self._execute(tokens)
            self.commands_run += 1
        self.state = LoopState.READING
        return self.state

    def run(self) -> LoopResult:
        """Step until a terminal state is reached."""
        while not self.step().terminal:
            pass
        return LoopResult(
            state=self.state,
            error=self.error,
            lines_read=self.lines_read,
            commands_run=self.commands_run,
        )
