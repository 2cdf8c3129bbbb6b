#!/usr/bin/env python3
# rush/interface/executor.py
from __future__ import annotations

"""
Command execution.

A command is a token list: tokens[0] names the program, the rest are its
arguments. The child inherits our stdin, stdout and stderr untouched and
we block until it exits. Failing to launch it is reported on stdout and
is not fatal.
"""

import logging
import subprocess
from typing import Optional, Sequence

from rush.errors import SpawnError
from rush.ui import flush_std_streams, print_line

logger = logging.getLogger(__name__)


def spawn(tokens: Sequence[str]) -> int:
    """
    Run tokens[0] with tokens[1:] as arguments and wait for it.

    Returns the child's exit status (negative N when killed by signal N).
    Raises SpawnError when the program cannot be launched.
    """
    program, *arguments = tokens
    # Interleave correctly with anything we printed before the child runs.
    flush_std_streams()
    try:
        # No stdin/stdout/stderr arguments: the child inherits fds 0, 1 and 2.
        process = subprocess.Popen([program, *arguments])
    except OSError as exc:
        raise SpawnError(program, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        # e.g. an embedded NUL byte in an argument
        raise SpawnError(program, str(exc)) from exc

    logger.debug("spawned %s (pid %s)", program, process.pid)
    returncode = process.wait()
    logger.debug("%s exited with status %s", program, returncode)
    return returncode


def report_spawn_failure(exc: SpawnError) -> None:
    """Spawn failures go to stdout, not stderr (see DESIGN.md)."""
    print_line(str(exc), flush=True)


def execute(tokens: Sequence[str]) -> Optional[int]:
    """
    Execute one tokenized line.

    Empty token lists are a no-op. Returns the exit status, or None when
    nothing ran.
    """
    if not tokens:
        return None
    try:
        return spawn(tokens)
    except SpawnError as exc:
        logger.debug("spawn failed: %s", exc)
        report_spawn_failure(exc)
        return None
