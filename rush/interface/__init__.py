#!/usr/bin/env python3
# rush/interface/__init__.py
from __future__ import annotations

"""
Package for the interpreter core.

Provides:
- Line sources (file-backed, and the not-yet-supported console).
- The whitespace tokenizer.
- The executor that spawns programs on inherited standard streams.
- Session construction and the driver loop.
"""


# Leaf modules first (session/driver depend on them)
from .sources import LineSource, FileLineSource, ConsoleLineSource
from .parser import tokenize
from .executor import execute, spawn

from .session import Session, create_session
from .driver import Driver, LoopResult, LoopState, report_error, DIAGNOSTIC_PREFIX

__all__ = [
    # sources
    "LineSource",
    "FileLineSource",
    "ConsoleLineSource",
    # parser
    "tokenize",
    # executor
    "execute",
    "spawn",
    # session / driver
    "Session",
    "create_session",
    "Driver",
    "LoopResult",
    "LoopState",
    "report_error",
    "DIAGNOSTIC_PREFIX",
]
