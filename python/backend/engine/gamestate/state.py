"""Elapsed-time clock owned by the frontend, not by the board."""

from __future__ import annotations

import time


class GameClock:
    """Counts whole seconds while a board is active.

    The clock advances one second per :meth:`tick`.  GUI frontends call
    ``tick()`` from a periodic one-second timer; polling frontends call
    :meth:`catch_up` with the current monotonic time instead.
    """

    def __init__(self, *, running: bool = True) -> None:
        self.seconds: int = 0
        self._running: bool = False
        self._next_tick: float = 0.0
        if running:
            self.start()

    @property
    def is_running(self) -> bool:
        return self._running

    # -- control --------------------------------------------------------------

    def start(self, now: float | None = None) -> None:
        if self._running:
            return
        self._running = True
        self._next_tick = (time.monotonic() if now is None else now) + 1.0

    def stop(self) -> None:
        """Freeze the clock. Safe to call any number of times."""
        self._running = False

    def reset(self, now: float | None = None) -> None:
        """Zero the clock and start it again for a fresh board."""
        self.stop()
        self.seconds = 0
        self.start(now)

    # -- advancing ------------------------------------------------------------

    def tick(self) -> None:
        if self._running:
            self.seconds += 1

    def catch_up(self, now: float | None = None) -> bool:
        """Apply every tick that fell due before *now*.

        Returns True if the displayed time changed.
        """
        if not self._running:
            return False
        now = time.monotonic() if now is None else now
        changed = False
        while now >= self._next_tick:
            self.tick()
            self._next_tick += 1.0
            changed = True
        return changed
