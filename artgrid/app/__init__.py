"""Application layer: ports and session state."""
