"""A countdown timer driven by the update loop."""

from __future__ import annotations

from typing import Any, Callable, Optional

from jengine.objects import Object


class Timer(Object):
    """Calls a callback after ``timeout`` seconds of accumulated update time.

    With ``restart`` set the timer keeps running after firing; otherwise it stops.
    """

    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.timeout = timeout
        self.restart = False
        self._running = False
        self._offset = 0.0
        self._callback: Optional[Callable[[Any], None]] = None
        self._data: Any = None

    def update(self, dt: float) -> None:
        if not self._running:
            return
        self._offset += dt
        if self._offset >= self.timeout:
            self._running = self.restart
            self._offset = 0.0
            if self._callback is not None:
                self._callback(self._data)

    def start(self) -> None:
        self._running = True
        self._offset = 0.0

    def stop(self) -> None:
        self._running = False
        self._offset = 0.0

    def is_running(self) -> bool:
        return self._running

    def set_callback(self, callback: Callable[[Any], None], data: Any = None) -> None:
        """Set the function called on expiry and the value passed to it."""
        self._callback = callback
        self._data = data