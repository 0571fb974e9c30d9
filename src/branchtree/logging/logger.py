"""
Centralized logging configuration for branchtree.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* One shared ``branchtree`` base logger owning the console handler; module
  loggers propagate into it.
* Optional master log file (``logs/branchtree.log``) when
  ``logging.file_output`` is enabled in ``config/branchtree.yml``.
* Optional log rotation controlled by ``logging.rotate``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from branchtree.config import get_config

# -----------------------------------------------------------------------------
# Formatting and state
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "branchtree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_configured_level: int = logging.INFO


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve (relative to the working directory) and create the log directory."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _configured_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(cfg.debug)

    _effective_level = logging.DEBUG if debug_enabled else base_level
    _configured_level = _effective_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if cfg.logging.get("file_output", False):
        master_path = _ensure_log_dir() / cfg.logging.get("file", "branchtree.log")
        base_logger.addHandler(
            _build_file_handler(
                master_path,
                _effective_level,
                rotate=bool(cfg.logging.get("rotate", False)),
            )
        )

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.configured_level = console.level  # type: ignore[attr-defined]
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired into the project-wide handlers.

    Names outside the ``branchtree`` namespace are nested under it so that
    every module logger propagates into the shared base handlers.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(
        BASE_LOGGER_NAME + "."
    ):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger is not base_logger:
        logger.setLevel(_effective_level)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """
    Switch every branchtree logger and handler to DEBUG, or back to the
    configured levels when ``enabled`` is False.
    """
    global _effective_level

    base_logger = _configure_base_logger()
    _effective_level = logging.DEBUG if enabled else _configured_level

    base_logger.setLevel(_effective_level)
    for handler in base_logger.handlers:
        handler.setLevel(
            logging.DEBUG if enabled else getattr(handler, "configured_level", _configured_level)
        )
    for name, logger in _logger_cache.items():
        if name != BASE_LOGGER_NAME:
            logger.setLevel(_effective_level)


def _root_logger() -> Logger:
    return get_logger(BASE_LOGGER_NAME)


def log_debug(message: str, *args, **kwargs) -> None:
    _root_logger().debug(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
