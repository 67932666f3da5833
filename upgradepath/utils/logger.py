"""Logging configuration."""

import logging
from typing import Dict, Optional

PACKAGE_LOGGER = "upgradepath"

LOG_LEVELS: Dict[str, int] = {
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

_level = logging.INFO


def _is_package_logger(name: str) -> bool:
    return name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger with the shared stream handler.

    Package loggers start at the level last applied by ``set_log_level``.
    """
    logger = logging.getLogger(name or __name__)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(_level if _is_package_logger(logger.name) else logging.INFO)

    return logger


def set_log_level(level: str) -> int:
    """Apply a CLI log level name to every package logger.

    Unknown names fall back to INFO. Returns the numeric level applied.
    """
    global _level
    _level = LOG_LEVELS.get(level.lower(), logging.INFO)
    for name in list(logging.Logger.manager.loggerDict):
        if _is_package_logger(name):
            logging.getLogger(name).setLevel(_level)
    return _level
