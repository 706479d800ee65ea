"""PyQt5 rendering surface for the artworks table."""
