"""Event system.

Pure Python event/signal implementation for decoupling observers from state
changes. Used in the non-UI layers (core, app, controllers) instead of
PyQt5 QObject/pyqtSignal.
"""

from artgrid.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
