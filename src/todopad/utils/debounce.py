"""Debounce helper built on the asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class Debouncer:
    """Delay a callback until calls stop arriving for `delay` seconds.

    Each call() cancels the previously scheduled run. With delay 0 the
    callback runs immediately, which keeps synchronous callers simple.
    """

    def __init__(self, callback: Callable[[], None], delay: float):
        self.callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def scheduled(self) -> bool:
        return self._handle is not None

    def call(self) -> None:
        self.cancel()
        if self.delay <= 0:
            self.callback()
            return
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> None:
        """Run a scheduled callback now."""
        if self._handle is not None:
            self.cancel()
            self.callback()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.callback()
