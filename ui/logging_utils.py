"""Logging setup shared by the API and Streamlit entry points."""
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_FILE = "dochub.log"


def resolve_level(level_name: str | None = None) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    name = (level_name or os.getenv("DOCHUB_LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_handlers(log_file: str | None) -> list[logging.Handler]:
    """Console handler always; a UTF-8 file handler unless ``log_file`` is empty."""
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger once.

    Arguments win over ``DOCHUB_LOG_LEVEL`` and ``DOCHUB_LOG_FILE``; an empty
    ``DOCHUB_LOG_FILE`` keeps logs on the console only.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    if log_file is None:
        log_file = os.getenv("DOCHUB_LOG_FILE", DEFAULT_LOG_FILE)

    root_logger.setLevel(resolve_level(level))
    for handler in build_handlers(log_file):
        root_logger.addHandler(handler)
