"""Infrastructure: concrete page sources."""

from artgrid.infra.artworks_source import ArtworksPageSource

__all__ = ["ArtworksPageSource"]
