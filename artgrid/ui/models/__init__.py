"""Qt item models."""

from artgrid.ui.models.artwork_table_model import ArtworkTableModel

__all__ = ["ArtworkTableModel"]
