"""Session state holders."""

from artgrid.app.state.selection_reconciler import SelectionReconciler

__all__ = ["SelectionReconciler"]
