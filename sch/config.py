from __future__ import annotations
import logging
import os
import sys
from typing import Optional


def _get_log_level() -> int:
    """
    Determine log level from the SCH_LOGLEVEL environment variable.
    Defaults to WARNING if not set or not a level name.
    """
    loglevel_env = os.getenv("SCH_LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging() -> None:
    logging.basicConfig(
        level=_get_log_level(),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit requested through SCH_RECURSION_LIMIT, if any."""
    raw = os.environ.get("SCH_RECURSION_LIMIT")
    if not raw or not raw.strip():
        return None
    try:
        limit = int(raw.strip())
    except ValueError:
        raise ValueError(f"SCH_RECURSION_LIMIT must be an integer, got {raw!r}")
    return limit if limit > 0 else None
