"""Custom widgets."""

from artgrid.ui.widgets.selection_limit_panel import SelectionLimitPanel

__all__ = ["SelectionLimitPanel"]
