#!/usr/bin/env python3
# rush/boot/boot.py
from __future__ import annotations
"""
Start-up sequence for rush.

Steps:
- Load ambient settings (config file, environment).
- Initialize the 'rush' logger from those settings.
- Resolve the invocation Config from process arguments.

Each step is traced at DEBUG level as [  OK  ] / [FAILED] so a normal run
prints nothing before the script's own output.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from rush.config import Config, Settings, load_settings_or_defaults, parse_config_from_args
from rush.ui import init_logger

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BootState:
    settings: Settings
    logger: logging.Logger
    config: Config


def _step(label: str, fn: Callable[[], Any]) -> Any:
    """Run a boot step with status tracing."""
    try:
        out = fn()
    except Exception as exc:
        log.debug("[FAILED] %s (%s: %s)", label, type(exc).__name__, exc)
        raise
    log.debug("[  OK  ] %s", label)
    return out


def _init_logging(settings: Settings) -> logging.Logger:
    logfile = str(settings.log_file) if settings.log_file else None
    try:
        return init_logger("rush", level=settings.log_level_number, logfile=logfile)
    except OSError as exc:
        logger = init_logger("rush", level=settings.log_level_number)
        logger.warning("cannot open log file %s: %s", logfile, exc)
        return logger


def boot_sequence(argv: Sequence[str]) -> BootState:
    settings = load_settings_or_defaults()
    logger = _init_logging(settings)
    config = _step("Resolve invocation", lambda: parse_config_from_args(argv))

    return BootState(settings=settings, logger=logger, config=config)
