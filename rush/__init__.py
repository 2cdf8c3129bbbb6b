#!/usr/bin/env python3
# rush/__init__.py
from __future__ import annotations
"""
rush: a minimal line-oriented command interpreter.

Reads a script line by line, splits each line on whitespace and runs the
result as an external program on the interpreter's own standard streams.

Keep this module light; `rush.interface` and `rush.config` expose their
APIs through their own __init__.py files.
"""

__version__ = "0.1.0"
