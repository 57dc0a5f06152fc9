"""Logging helpers for groqbuilder.

All loggers live under the ``groqbuilder`` namespace so applications can tune
the library's verbosity without touching their own root configuration.
"""

import logging
from typing import Optional

from groqbuilder.settings import settings as api_settings

ROOT_LOGGER_NAME = "groqbuilder"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def resolve_level(level: Optional[str]) -> int:
    """Map a level name to its ``logging`` constant, defaulting to INFO."""
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the package logger once with a stream handler.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(resolve_level(level))
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a logger namespaced under ``groqbuilder``.

    Args:
        name: Sub-logger name, usually the component (``"builder"``); module
            paths already inside the package are kept as-is.
    """
    return Logger(name)


class Logger:
    """Thin wrapper over standard logging that configures the package logger on first use."""

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        if not name:
            full_name = ROOT_LOGGER_NAME
        elif name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
            full_name = name
        else:
            full_name = f"{ROOT_LOGGER_NAME}.{name}"
        self._logger = logging.getLogger(full_name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)
