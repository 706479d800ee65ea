"""Module: paths.py

Date: 2026-10-19

Centralized path management for the artgrid application.

Directory layout under the user data directory:

    <user_data_dir>/
    ├── config.json          # Source and selection settings
    ├── config.json.bak      # Previous config.json
    └── logs/                # Session log files

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/artgrid/
- Linux: $XDG_DATA_HOME/artgrid/ or ~/.local/share/artgrid/
- macOS: ~/Library/Application Support/artgrid/

The ARTGRID_DATA_DIR environment variable overrides all of the above.
"""

import os
import platform
from pathlib import Path

from artgrid.config import APP_NAME
from artgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

DATA_DIR_ENV_VAR = "ARTGRID_DATA_DIR"


class AppPaths:
    """Cross-platform access to application paths.

    Directories are created lazily when first requested.
    """

    _user_data_dir: Path | None = None
    _initialized: bool = False

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        override = os.environ.get(DATA_DIR_ENV_VAR)
        if override:
            return Path(override)

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local"
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if necessary."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()

        cls._user_data_dir.mkdir(parents=True, exist_ok=True)

        if not cls._initialized:
            logger.info("[AppPaths] User data directory: %s", cls._user_data_dir)
            cls._initialized = True

        return cls._user_data_dir

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_user_data_dir() / "config.json"

    @classmethod
    def get_logs_dir(cls) -> Path:
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def reset(cls) -> None:
        """Reset cached paths (mainly for testing)."""
        cls._user_data_dir = None
        cls._initialized = False
