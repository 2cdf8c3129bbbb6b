#!/usr/bin/env python3
# rush/ui/utils/console.py
from __future__ import annotations

import sys
import threading

# Single shared print mutex for all UI output (diagnostics and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Write one line to `file` (stdout when omitted) under the print mutex."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def flush_std_streams() -> None:
    """Flush our buffered stdout/stderr so a child's output lands after ours."""
    with PRINT_MUTEX:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except (OSError, ValueError):
                # closed or broken pipe; nothing left to order against
                pass
