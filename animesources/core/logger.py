"""Logging setup shared by every module in the package."""

import logging
from threading import Lock

from animesources.core.config import config

_ROOT_LOGGER_NAME = "animesources"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_setup_lock = Lock()
_root_configured = False


def _configure_root() -> None:
    global _root_configured
    with _setup_lock:
        if _root_configured:
            return
        root = logging.getLogger(_ROOT_LOGGER_NAME)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        level = str(config.get("LOG_LEVEL", "INFO") or "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        _root_configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, configuring the package root on first use."""
    _configure_root()
    return logging.getLogger(name)
