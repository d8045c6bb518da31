# app/utils/logger.py
"""
Logging setup shared by the API, the table services and the setup scripts.
Everything goes to the console; a rotating file is added when LOG_DIR is set.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

from app.config import settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def log_file_path() -> str:
    """Where the rotating log lives, or "" when file logging is off. Relative dirs hang off the project root."""
    if not settings.LOG_DIR:
        return ""
    log_dir = settings.LOG_DIR
    if not os.path.isabs(log_dir):
        log_dir = os.path.join(PROJECT_ROOT, log_dir)
    return os.path.join(log_dir, settings.LOG_FILE)


def _handlers() -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    path = log_file_path()
    if path:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        ))
    return handlers


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(level)
    for handler in _handlers():
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
