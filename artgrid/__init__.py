"""artgrid - paginated artworks table with cross-page row selection."""

from artgrid.config import APP_VERSION

__version__ = APP_VERSION
