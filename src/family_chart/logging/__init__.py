"""
Logging package for ``family_chart``.

Use ``get_logger("module_name")`` in modules to inherit shared handlers and
write to a module-specific log file.
"""

from .logger import (
    LogSettings,
    get_logger,
    list_active_loggers,
    reset_logging,
)

__all__ = [
    "LogSettings",
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
