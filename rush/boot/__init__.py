#!/usr/bin/env python3
# rush/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: settings → logging → invocation Config.
- BootState: Dataclass containing settings, logger and config.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
