#!/usr/bin/env python3
# rush/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    supports_color,
    colorize,
    PRINT_MUTEX,
    print_line,
    flush_std_streams,
)
from .static import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "supports_color",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "flush_std_streams",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
