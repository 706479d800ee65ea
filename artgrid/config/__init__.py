"""Module: artgrid.config

Date: 2026-10-19

Configuration package for the artgrid application.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- data: Artworks API endpoint, pagination and selection defaults

All settings are re-exported from this module:
    from artgrid.config import APP_NAME, DEFAULT_PAGE_SIZE
"""

from artgrid.config.app import *  # noqa: F401, F403
from artgrid.config.data import *  # noqa: F401, F403
