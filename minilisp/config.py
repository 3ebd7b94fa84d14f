"""Runtime settings, read from environment variables with built-in defaults."""

from __future__ import annotations

import logging
import os

from minilisp.errors import ConfigError

DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "WARNING"
# Each Lisp call nests several Python frames.
DEFAULT_RECURSION_LIMIT = 10000


def get_prompt() -> str:
    return os.environ.get("MINILISP_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("MINILISP_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    return parse_log_level(raw)


def parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {raw!r}")
    return level


def get_recursion_limit() -> int:
    """Host recursion limit to install before running a session."""
    raw = os.environ.get("MINILISP_RECURSION_LIMIT")
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    return parse_recursion_limit(raw)


def parse_recursion_limit(raw: str) -> int:
    try:
        limit = int(raw)
    except ValueError:
        raise ConfigError(f"Recursion limit must be an integer, got {raw!r}")
    if limit <= 0:
        raise ConfigError(f"Recursion limit must be positive, got {limit}")
    return limit
