#!/usr/bin/env python3
# rush/ui/static/__init__.py
from __future__ import annotations
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
