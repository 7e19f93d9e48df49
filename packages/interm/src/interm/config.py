"""
Application metadata and environment-driven settings.

The Block itself takes no configuration; these settings only affect the
process terminal and the command line tool.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

APP_NAME: str = "interm"
VERSION: str = "0.1.1"

ENV_WRITE_LOG: str = f"{APP_NAME.upper()}_WRITE_LOG"
ENV_LOG_LEVEL: str = f"{APP_NAME.upper()}_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass
class InTermSettings:
    write_log_path: str | None = None  # mirror of every byte written to the terminal
    log_level: str = DEFAULT_LOG_LEVEL


def get_write_log_path() -> str | None:
    """Path of the terminal write log, or None when unset."""
    path = os.environ.get(ENV_WRITE_LOG, "")
    if not path:
        return None
    return os.path.expanduser(path)


def get_log_level() -> str:
    level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> InTermSettings:
    return InTermSettings(
        write_log_path=get_write_log_path(),
        log_level=get_log_level(),
    )
