"""Module: logger_helper.py

Date: 2026-10-19

Named-logger helpers for artgrid.

Artwork titles and artist strings from the API are full of non-ASCII text
(arrows, dashes, accented names). On consoles that cannot encode them a plain
logger.info() call raises UnicodeEncodeError from inside the handler, so every
logger handed out here has its level methods wrapped to retry with an
ASCII-safe message.

DevOnlyFilter keeps records logged with extra={"dev_only": True} out of the
console while file handlers still receive them.
"""

import logging
import re
from functools import partial

from artgrid.config import SHOW_DEV_ONLY_IN_CONSOLE

_ASCII_FALLBACKS = {
    "→": "->",
    "—": "--",
    "–": "-",
    "…": "...",
}
_FALLBACK_PATTERN = re.compile("|".join(map(re.escape, _ASCII_FALLBACKS)))

_WRAPPED_METHODS = ("debug", "info", "warning", "error", "critical")


def safe_text(text: str) -> str:
    """Swap characters that commonly break narrow console encodings for ASCII."""
    return _FALLBACK_PATTERN.sub(lambda match: _ASCII_FALLBACKS[match.group(0)], text)


def safe_log(log_method, message, *args, **kwargs):
    """Call `log_method`, retrying with safe_text(message) on UnicodeEncodeError."""
    if not isinstance(message, str):
        message = repr(message)
    # Attribute the record to our caller, not to this wrapper
    kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
    try:
        log_method(message, *args, **kwargs)
    except UnicodeEncodeError:
        log_method(safe_text(message), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    for method_name in _WRAPPED_METHODS:
        setattr(logger, method_name, partial(safe_log, getattr(logger, method_name)))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the named logger, wrapped for Unicode-safe output.

    The logger has no handlers of its own; records propagate to the root
    logger configured by ConfigureLogger.
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    logger.handlers.clear()

    if not getattr(logger, "_artgrid_safe_methods", False):
        patch_logger_safe_methods(logger)
        logger._artgrid_safe_methods = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Hide dev_only records unless SHOW_DEV_ONLY_IN_CONSOLE is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        return SHOW_DEV_ONLY_IN_CONSOLE or not getattr(record, "dev_only", False)
