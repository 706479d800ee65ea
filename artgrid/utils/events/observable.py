"""Module: observable.py

Date: 2026-10-19

Observable - Pure Python Observer pattern implementation.

Provides Qt signal-like functionality without Qt dependency:
- Signal descriptor for defining events
- Observable base class for state holders (page cache, selection reconciler)
- connect/disconnect/emit interface plus signal blocking
- Thread-safe callback registration

Lets the core notify the rendering surface without importing PyQt5.
"""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Callable, Iterator
from typing import Any

from artgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or getattr(callback, "__name__", repr(callback))


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class PageCache(Observable):
            page_loaded = Signal(object)
            total_changed = Signal(int)

        cache = PageCache(source)
        cache.page_loaded.connect(on_page)
        cache.page_loaded.emit(page)
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types (documentation only)."""
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()
        self._blocked = False

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal. Connecting the same callback twice is a no-op."""
        with self._lock:
            if callback in self._callbacks:
                return
            self._callbacks.append(callback)

        logger.debug(
            "Signal connected: %s -> %s",
            self.name,
            _callback_name(callback),
            extra={"dev_only": True},
        )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        with self._lock:
            if callback is None:
                count = len(self._callbacks)
                self._callbacks.clear()
                logger.debug(
                    "All callbacks disconnected from %s (count: %d)",
                    self.name,
                    count,
                    extra={"dev_only": True},
                )
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def receiver_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def is_blocked(self) -> bool:
        return self._blocked

    @contextlib.contextmanager
    def blocked(self) -> Iterator[None]:
        """Suppress emission while the block is active (like QObject.blockSignals)."""
        previous = self._blocked
        self._blocked = True
        try:
            yield
        finally:
            self._blocked = previous

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        Exceptions raised by a callback are logged and do not reach the
        emitter or stop delivery to the remaining callbacks.
        """
        if self._blocked:
            return

        with self._lock:
            callbacks = self._callbacks.copy()

        # Call outside lock so callbacks may connect/disconnect
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )


class Observable:
    """Base class for objects with observable signals.

    Use the Signal descriptor to define events:

        class SelectionReconciler(Observable):
            global_selection_changed = Signal(list)

            def deselect_all(self):
                self._global.clear()
                self.global_selection_changed.emit([])
    """

    def __init__(self) -> None:
        super().__init__()

    def disconnect_all(self) -> None:
        """Disconnect every callback from every signal declared on the class."""
        for klass in type(self).__mro__:
            for attr in vars(klass).values():
                if isinstance(attr, Signal):
                    attr.__get__(self).disconnect()
