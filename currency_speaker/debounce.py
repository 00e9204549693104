"""
Debounced, latest-request-wins scheduling for input changes.

Every keystroke restarts the timer; only the value that was current when
the user paused is delivered to the callback.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestRequestScheduler(Generic[T]):
    """Deliver the most recent submitted value after a quiet period.

    Usage:
        scheduler = LatestRequestScheduler(0.5, handle_amount)
        scheduler.submit("$1")
        scheduler.submit("$12")   # "$1" is dropped
        scheduler.flush()         # run "$12" now instead of waiting
    """

    def __init__(self, delay: float, callback: Callable[[T], None]):
        self.delay = delay
        self._callback = callback
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[int, T] | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def submit(self, value: T) -> None:
        """Replace any pending request with ``value`` and restart the timer."""
        with self._lock:
            self._stop_timer()
            self._generation += 1
            generation = self._generation
            self._pending = (generation, value)
            self._timer = threading.Timer(self.delay, self._fire, args=(generation,))
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> bool:
        """Run the pending request immediately on the calling thread.

        Returns:
            True if a request was pending and has been delivered.
        """
        with self._lock:
            self._stop_timer()
            pending = self._pending
            self._pending = None
        if pending is None:
            return False
        self._callback(pending[1])
        return True

    def cancel(self) -> None:
        """Drop the pending request, if any."""
        with self._lock:
            self._stop_timer()
            self._pending = None

    # ─── Internals ──────────────────────────────────────────────────

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A newer submit (or flush/cancel) won the race with this timer
            if self._pending is None or self._pending[0] != generation:
                return
            value = self._pending[1]
            self._pending = None
            self._timer = None
        try:
            self._callback(value)
        except Exception:
            logger.exception("Debounced callback failed")
