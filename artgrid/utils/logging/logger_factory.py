"""Module: logger_factory.py

Date: 2026-10-19

Cached logger access. Every module does

    logger = get_cached_logger(__name__)

and receives the same patched logger for the same name, so the wrapping in
logger_helper.get_logger happens once per name.
"""

import logging
import threading

from artgrid.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Process-wide name -> logger cache."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create the cached logger for `name`.

        Args:
            name: Logger name; defaults to the caller's module __name__
        """
        if name is None:
            import inspect

            caller = inspect.currentframe().f_back
            name = caller.f_globals.get("__name__", "artgrid")

        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                logger = cls._loggers[name] = get_logger(name)
            return logger

    @classmethod
    def get_cached_names(cls) -> list[str]:
        with cls._lock:
            return list(cls._loggers)


def get_cached_logger(name: str | None = None) -> logging.Logger:
    if name is None:
        import inspect

        name = inspect.currentframe().f_back.f_globals.get("__name__", "artgrid")
    return LoggerFactory.get_logger(name)
