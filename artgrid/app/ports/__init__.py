"""Ports - Protocol interfaces for infrastructure dependencies.

- PageSource: page-based record listing (implemented by infra.artworks_source)
"""

from artgrid.app.ports.page_source import PageSource

__all__ = ["PageSource"]
