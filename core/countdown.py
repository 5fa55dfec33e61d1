"""
core/countdown.py — Cancellable repeating action for the session clock.

A Countdown fires a callback once per fixed interval while it is active.
It does not know what the callback does. engine.py owns at most one
Countdown at a time and drops its reference when the countdown is
cancelled.

Time is fed in from outside, frame by frame, the same way the game loop
feeds delta time to everything else. Nothing here sleeps or spawns a
thread, so every firing runs to completion on the caller's thread.

Usage:
    countdown = Countdown(0.2, on_fire)

    # each frame:
    countdown.update(dt)

    # when done:
    countdown.cancel()
"""

from typing import Callable


class Countdown:
    """Fixed-interval repeating action driven by delta time.

    Attributes:
        _interval: Seconds between firings.
        _on_fire:  Zero-argument callback run once per elapsed interval.
        _pending:  Seconds accumulated since the last firing.
        _active:   False once cancel() has been called.
    """

    def __init__(self, interval: float, on_fire: Callable[[], None]) -> None:
        """Create an active countdown with no accumulated time.

        Args:
            interval: Seconds between firings. Must be positive.
            on_fire:  Callback run on every firing.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval: float = interval
        self._on_fire          = on_fire
        self._pending:  float = 0.0
        self._active:   bool  = True

    def update(self, dt: float) -> int:
        """Advance the countdown by dt seconds and run any due firings.

        A callback that cancels the countdown stops the remaining due
        firings of the same update.

        Args:
            dt: Delta time in seconds since the last update. Negative
                values are treated as zero.

        Returns:
            Number of firings run during this update.
        """
        if not self._active:
            return 0

        self._pending += max(0.0, dt)
        fired = 0
        # Small epsilon so 0.2 + 0.2 + ... accumulations land on the boundary
        while self._active and self._pending + 1e-9 >= self._interval:
            self._pending -= self._interval
            fired += 1
            self._on_fire()
        return fired

    def cancel(self) -> None:
        """Stop the countdown. Further updates are no-ops."""
        self._active  = False
        self._pending = 0.0

    def is_active(self) -> bool:
        """Return True until cancel() has been called."""
        return self._active
