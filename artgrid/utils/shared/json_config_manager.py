"""Module: json_config_manager.py

Date: 2026-10-19

JSON-based configuration manager.
Handles JSON serialization, deserialization, and management of the
user-overridable settings (artworks source, selection defaults) with
category defaults, a backup of the previous file and thread-safe access.

Selection state is never written here: it lives only for the session.
"""

import json
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from artgrid.config import (
    API_BASE_URL,
    API_REQUEST_TIMEOUT,
    APP_NAME,
    APP_VERSION,
    DEBUG_RESET_CONFIG,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SELECTION_LIMIT,
)
from artgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


class ConfigCategory(Generic[T]):
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = self.defaults.copy()

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class SourceConfig(ConfigCategory[Any]):
    """Artworks API connection settings."""

    def __init__(self) -> None:
        defaults = {
            "base_url": API_BASE_URL,
            "page_size": DEFAULT_PAGE_SIZE,
            "timeout": API_REQUEST_TIMEOUT,
        }
        super().__init__("source", defaults)

    def get_page_size(self) -> int:
        """Page size as a positive int; falls back to the default when the file holds junk."""
        value = self.get("page_size")
        if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
            return value
        logger.warning("[SourceConfig] Ignoring invalid page_size %r", value)
        return DEFAULT_PAGE_SIZE

    def get_timeout(self) -> float:
        value = self.get("timeout")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        logger.warning("[SourceConfig] Ignoring invalid timeout %r", value)
        return float(API_REQUEST_TIMEOUT)


class SelectionConfig(ConfigCategory[Any]):
    """Selection defaults (the bulk selection limit shown on startup)."""

    def __init__(self) -> None:
        defaults = {
            "default_limit": DEFAULT_SELECTION_LIMIT,
        }
        super().__init__("selection", defaults)

    def get_default_limit(self) -> int:
        value = self.get("default_limit")
        if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
            return value
        logger.warning("[SelectionConfig] Ignoring invalid default_limit %r", value)
        return DEFAULT_SELECTION_LIMIT


class JSONConfigManager:
    """JSON-based configuration manager with a backup of the previous file."""

    def __init__(self, app_name: str = APP_NAME, config_dir: str | None = None):
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory[Any]] = {}
        self._dirty = False

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        from artgrid.utils.paths import AppPaths

        return str(AppPaths.get_user_data_dir())

    def register_category(self, category: ConfigCategory[Any]) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory[Any] | None:
        """Get configuration category by name."""
        category = self._categories.get(category_name)
        if not category and create_if_not_exists:
            logger.debug("Category '%s' not found, creating it dynamically.", category_name)
            new_category: ConfigCategory[Any] = ConfigCategory(category_name, {})
            self.register_category(new_category)
            return new_category
        return category

    def list_categories(self) -> list[str]:
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from JSON file.

        Returns False (and keeps defaults) when the file cannot be read or parsed.
        """
        with self._lock:
            if DEBUG_RESET_CONFIG and self.config_file.exists():
                logger.info("[DEBUG] Deleting config file for fresh start: %s", self.config_file)
                self.config_file.unlink()
                if self.backup_file.exists():
                    self.backup_file.unlink()

            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            if not isinstance(data, dict):
                logger.error(
                    "[JSONConfigManager] Ignoring config file with %s at top level",
                    type(data).__name__,
                )
                return False

            for category_name, category in self._categories.items():
                section = data.get(category_name)
                if isinstance(section, dict):
                    category.from_dict(section)

            self._dirty = False
            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to JSON file."""
        with self._lock:
            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                data: dict[str, Any] = {
                    name: category.to_dict() for name, category in self._categories.items()
                }
                data["_metadata"] = {
                    "last_saved": datetime.now().isoformat(),
                    "version": f"v{APP_VERSION}",
                    "app_name": self.app_name,
                }

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            self._dirty = False
            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True

    def mark_dirty(self) -> None:
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def save_immediate(self, force: bool = True) -> bool:
        """Save now (used on app close).

        Args:
            force: If True, always save. If False, only save if dirty.

        """
        with self._lock:
            if force or self._dirty:
                logger.info("[JSONConfigManager] Immediate save requested")
                return self.save()

            logger.debug("[JSONConfigManager] Immediate save skipped (not dirty)")
            return True

    def get_config_info(self) -> dict[str, Any]:
        """Get information about configuration file and categories."""
        info: dict[str, Any] = {
            "config_file": str(self.config_file),
            "backup_file": str(self.backup_file),
            "file_exists": self.config_file.exists(),
            "backup_exists": self.backup_file.exists(),
            "app_name": self.app_name,
            "categories": {name: len(cat.to_dict()) for name, cat in self._categories.items()},
        }

        if self.config_file.exists():
            stat = self.config_file.stat()
            info["file_size"] = stat.st_size
            info["last_modified"] = datetime.fromtimestamp(stat.st_mtime).isoformat()

        return info


def create_app_config_manager(
    app_name: str = APP_NAME, config_dir: str | None = None
) -> JSONConfigManager:
    """Create a JSONConfigManager with the default application categories and load it."""
    manager = JSONConfigManager(app_name=app_name, config_dir=config_dir)
    manager.register_category(SourceConfig())
    manager.register_category(SelectionConfig())
    manager.load()
    return manager


_global_manager: JSONConfigManager | None = None


def get_app_config_manager() -> JSONConfigManager:
    """Get the global application configuration manager."""
    global _global_manager
    if _global_manager is None:
        _global_manager = create_app_config_manager()
    return _global_manager
