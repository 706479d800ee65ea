"""Module: logger_setup.py

Date: 2026-10-19

This module provides the ConfigureLogger class for setting up logging in the application.
The root logger is configured to log INFO and higher to the console, the configured
file level to a rotating session log, and DEBUG+ to a debug log (optional).
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from artgrid.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_LEVEL,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from artgrid.utils.logging.logger_file_helper import add_file_handler
from artgrid.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger.
    Logs INFO and higher to the console, LOG_FILE_LEVEL and higher to
    <log_name>_<timestamp>.log, and DEBUG and higher to
    <log_name>_debug_<timestamp>.log when enabled.
    """

    def __init__(self, log_name: str = "app", log_dir: str = "logs"):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log file.
            log_dir (str): Directory to store log files.
        """
        self.log_dir = log_dir
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if LOG_TO_CONSOLE:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if LOG_TO_FILE:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.log_file_path,
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if LOG_DEBUG_FILE_ENABLED:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=getattr(logging, LOG_DEBUG_FILE_LEVEL, logging.DEBUG),
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
