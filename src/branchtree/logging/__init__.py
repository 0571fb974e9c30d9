"""
Logging package for ``branchtree``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    log_debug,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "log_debug",
    "set_debug",
]
