#!/usr/bin/env python3
# rush/config/config.py
from __future__ import annotations

"""
Invocation config and ambient settings (stdlib-only).

Invocation (`Config`):
  argv[1], when present, is the script to interpret; otherwise the
  interactive console is requested. No flags.

Settings precedence (low → high):
  1) Built-in defaults
  2) $XDG_CONFIG_HOME/rush/config.toml (default ~/.config/rush/config.toml)
  3) Environment variables RUSH_LOG_LEVEL / RUSH_LOG_FILE

Settings only steer diagnostics logging: which records reach stderr and
the optional log file. They never change how a script is interpreted,
what commands run, what rush itself prints to stdout, the `rush: `
diagnostics, or the exit code. Invocation itself reads no environment
variables.
"""

import enum
import logging
import os
import sys
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from rush.errors import ConfigError
from rush.ui import colorize, print_line, supports_color

logger = logging.getLogger(__name__)


# ---------- invocation ----------

class Mode(enum.Enum):
    """Shell dialect. Reserved: validated but has no effect yet."""
    BOURNE = "sh"
    BOURNE_AGAIN = "bash"


@dataclass(frozen=True, slots=True)
class Config:
    mode: Mode = Mode.BOURNE
    input_file: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"unknown mode: {self.mode!r}")
        if self.input_file is not None and not str(self.input_file):
            raise ConfigError("script path is empty")

    @property
    def interactive(self) -> bool:
        return self.input_file is None


def parse_config_from_args(argv: Sequence[str]) -> Config:
    """Build a Config from process arguments (argv[0] is the program name)."""
    args = list(argv[1:])
    if not args:
        return Config(mode=Mode.BOURNE, input_file=None)

    if len(args) > 1:
        logger.warning("ignoring extra arguments: %s", " ".join(args[1:]))
    return Config(mode=Mode.BOURNE, input_file=args[0])


# ---------- settings ----------

DEFAULTS: dict[str, Any] = {
    "LOG_LEVEL": "WARNING",
    "LOG_FILE": None,
}

_ENV_PREFIX = "RUSH_"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Path | None

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "rush" / "config.toml"


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested tables to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


# ---------- normalization & coercion ----------

def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val)
    if lv is None:
        return DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


# ---------- merge & load ----------

def _merge_sources(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)
    merged.update(_flatten_mapping(
        _load_toml_file(config_path or _default_config_path())))

    env = os.environ if environ is None else environ
    merged.update({k[len(_ENV_PREFIX):]: v for k, v in env.items()
                   if k.startswith(_ENV_PREFIX)})
    return merged


def _validate_and_build(raw: dict[str, Any]) -> Settings:
    recognized = set(DEFAULTS)
    return Settings(
        log_level=_as_log_level(raw.get("LOG_LEVEL")),
        log_file=_as_opt_path(raw.get("LOG_FILE")),
        extra={k: v for k, v in raw.items() if k not in recognized},
    )


# ---------- public API ----------

def load_settings(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Load, merge, normalize, and validate settings.
    Raises ValueError (or tomllib.TOMLDecodeError) on bad input.
    """
    return _validate_and_build(_merge_sources(config_path, environ))


def load_settings_or_defaults(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Like load_settings, but warns on stderr and falls back to defaults."""
    try:
        return load_settings(config_path, environ)
    except (ValueError, OSError) as exc:
        warning = f"[ WARN ] Invalid configuration: {exc}"
        if supports_color(sys.stderr):
            warning = colorize(warning, "yellow")
        print_line(warning, file=sys.stderr)
        return _validate_and_build(dict(DEFAULTS))
