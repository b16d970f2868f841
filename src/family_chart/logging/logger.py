"""
Centralized logging for family_chart.

Key behaviors
-------------
* ``get_logger`` is the one way in. Module loggers hang under the
  ``family_chart`` base logger and share its console and master handlers.
* File output (a master log plus one file per module) is on only when a
  loaded config file asks for it, or leaves ``logging.to_file`` unset.
  Running on built-in defaults logs to the console only.
* File handlers open lazily: nothing touches the disk until a record is
  actually written, and the log directory is created at that moment.
* A relative ``logging.dir`` is taken from the current working directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from family_chart.config import FCConfig, get_config

BASE_LOGGER_NAME = "family_chart"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

# Marks handlers this module installed, so reset_logging removes only those.
_ROLE_ATTR = "family_chart_role"


class _CreateDirOnOpen:
    """Mixin for file handlers built with ``delay=True``."""

    baseFilename: str

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()  # type: ignore[misc]


class DeferredFileHandler(_CreateDirOnOpen, logging.FileHandler):
    pass


class DeferredRotatingFileHandler(_CreateDirOnOpen, RotatingFileHandler):
    pass


@dataclass(frozen=True)
class LogSettings:
    level: int
    debug: bool
    to_file: bool
    log_dir: Path
    master_file: str
    rotate: bool

    @classmethod
    def from_config(cls, cfg: FCConfig) -> "LogSettings":
        section = cfg.logging
        debug = bool(cfg.debug)
        level_name = str(section.get("level", "INFO")).upper()
        level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = Path.cwd() / log_dir

        return cls(
            level=level,
            debug=debug,
            to_file=bool(section.get("to_file", cfg.source is not None)),
            log_dir=log_dir,
            master_file=section.get("file", "family_chart.log"),
            rotate=bool(section.get("rotate", False)),
        )


_settings: Optional[LogSettings] = None
_logger_cache: Dict[str, Logger] = {}


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str, role: str) -> logging.Handler:
    path = settings.log_dir / filename
    if settings.rotate:
        handler: logging.Handler = DeferredRotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
            delay=True,
        )
    else:
        handler = DeferredFileHandler(path, encoding="utf-8", delay=True)

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    setattr(handler, _ROLE_ATTR, role)
    return handler


def _settings_or_configure() -> LogSettings:
    """Install the base logger's handlers on first use."""
    global _settings
    if _settings is not None:
        return _settings

    settings = LogSettings.from_config(get_config())
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file, "master"))

    # Console stays at WARNING unless debugging so CLI stdout remains clean.
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    console.setFormatter(_formatter())
    setattr(console, _ROLE_ATTR, "console")
    base.addHandler(console)

    _settings = settings
    return settings


def _qualified_name(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: str | None = None) -> Logger:
    """Return a logger under ``family_chart`` wired to the shared handlers.

    Module loggers also get their own ``<dir>/family_chart_<module>.log``
    when file output is on.
    """
    settings = _settings_or_configure()
    logger_name = _qualified_name(name or BASE_LOGGER_NAME)
    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.level)

    if logger_name == BASE_LOGGER_NAME:
        logger.propagate = False
    else:
        logger.propagate = True
        has_own_file = any(getattr(h, _ROLE_ATTR, None) == "module" for h in logger.handlers)
        if settings.to_file and not has_own_file:
            filename = f"{logger_name.replace('.', '_')}.log"
            logger.addHandler(_file_handler(settings, filename, "module"))

    _logger_cache[logger_name] = logger
    return logger


def reset_logging() -> None:
    """Drop installed handlers so the next ``get_logger`` re-reads config."""
    global _settings
    names = set(_logger_cache) | {BASE_LOGGER_NAME}
    for logger_name in names:
        logger = logging.getLogger(logger_name)
        for handler in [h for h in logger.handlers if hasattr(h, _ROLE_ATTR)]:
            logger.removeHandler(handler)
            handler.close()
    _logger_cache.clear()
    _settings = None


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
