#!/usr/bin/env python3
# rush/config/__init__.py
from __future__ import annotations

"""
Package for invocation config and ambient settings.

Provides:
- `Mode` / `Config`: what the process was asked to interpret.
- `Settings` loader with config-file and environment overrides.
"""


from .config import (
    DEFAULTS,
    Config,
    Mode,
    Settings,
    load_settings,
    load_settings_or_defaults,
    parse_config_from_args,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "Mode",
    "Settings",
    "load_settings",
    "load_settings_or_defaults",
    "parse_config_from_args",
]
