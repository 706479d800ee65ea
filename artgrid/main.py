"""
Module: main.py

Date: 2026-10-19

Entry point for the artgrid application.
Sets up logging, loads the user configuration, builds the artworks page
source and table controller, shows the main window and runs the Qt event loop.

Functions:
    parse_args: Command-line options overriding the stored configuration.
    build_controller: Wires page source and controller from settings.
    main: Runs the application.
"""

import argparse
import logging
import platform
import sys

from artgrid.config import APP_NAME, APP_VERSION, CONFIG_SAVE_ON_EXIT
from artgrid.controllers.table_controller import TableController
from artgrid.infra.artworks_source import ArtworksPageSource
from artgrid.utils.logging.logger_setup import ConfigureLogger
from artgrid.utils.paths import AppPaths
from artgrid.utils.shared.json_config_manager import (
    JSONConfigManager,
    SelectionConfig,
    SourceConfig,
    get_app_config_manager,
)

logger = logging.getLogger(APP_NAME)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a value >= 1, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Browse artworks page by page and select rows across pages.",
    )
    parser.add_argument("--base-url", help="Artworks API base URL (overrides config)")
    parser.add_argument("--page-size", type=_positive_int, help="Records per page (overrides config)")
    parser.add_argument("--limit", type=_positive_int, help="Initial bulk selection limit")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser.parse_args(argv)


def build_controller(
    args: argparse.Namespace, config: JSONConfigManager
) -> tuple[TableController, ArtworksPageSource]:
    """Create the page source and controller from stored settings and CLI overrides."""
    source_cfg = config.get_category("source")
    selection_cfg = config.get_category("selection")
    if not isinstance(source_cfg, SourceConfig) or not isinstance(selection_cfg, SelectionConfig):
        raise RuntimeError("Application config is missing the source/selection categories")

    base_url = args.base_url or source_cfg.get("base_url")
    page_size = args.page_size or source_cfg.get_page_size()
    limit = args.limit or selection_cfg.get_default_limit()

    source = ArtworksPageSource(base_url=base_url, timeout=source_cfg.get_timeout())
    controller = TableController(source, page_size=page_size, selection_limit=limit)

    def remember_limit(value: int) -> None:
        selection_cfg.set("default_limit", value)
        config.mark_dirty()

    controller.selection_limit_changed.connect(remember_limit)

    logger.info("Source: %s (page size %d, limit %d)", source.url, page_size, limit)
    return controller, source


def main(argv: list[str] | None = None) -> int:
    """Run the artworks table application. Returns the process exit code."""
    args = parse_args(argv)

    ConfigureLogger(log_name=APP_NAME, log_dir=str(AppPaths.get_logs_dir()))
    logger.info("%s %s starting on %s %s", APP_NAME, APP_VERSION, platform.system(), platform.release())
    logger.debug("Python version: %s", sys.version, extra={"dev_only": True})

    config = get_app_config_manager()
    controller, source = build_controller(args, config)

    from PyQt5.QtWidgets import QApplication

    from artgrid.ui.main_window import ArtworkTableWindow

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setStyle("Fusion")

    window = ArtworkTableWindow(controller)
    window.show()
    window.load()

    try:
        return app.exec_()
    finally:
        source.close()
        if CONFIG_SAVE_ON_EXIT:
            config.save_immediate(force=not config.config_file.exists())
        logger.info("%s exited", APP_NAME)
