"""
core/engine.py — Resumable session state engine for Code in the Dark.

SessionEngine owns everything about one timed coding session:
    - Persisted fields (running, finished, user name, remaining seconds,
      level, code, score, selected challenge), mirrored to the store on
      every mutation
    - The countdown: one Countdown handle driving the progress ticker and
      the fine tick, which in turn decrements remaining seconds
    - The recovery path that rebuilds state from the store after a reload

Lifecycle:
    engine = SessionEngine(store)
    engine.resume()                          # pick up a session left in the store
    engine.start(SessionSetup("ada", 60))    # or begin a fresh one

    # on every editor change:
    engine.update(code)
    engine.update_score(score)

    # each frame:
    engine.advance(dt)

    engine.dispose()                         # end the session, clear the store

Countdown protocol:
    Every TICK_INTERVAL_S the countdown fires once. A firing with the
    progress ticker already at 0 is the expiry: score and level drop to
    0 and the countdown stops. Otherwise the progress ticker drops by one
    and the fine tick advances; every TICK firings one coarse second is
    taken off remaining seconds and persisted. update() refills both to
    the session's full time, so the clock only runs out when the player
    stops typing.

    Expiry does NOT finish the session. Only dispose() does that.

The engine never raises on bad input. Unreadable store values fall back
to defaults, out-of-range levels are ignored, unknown challenge names are
ignored. Calls in an unexpected order (update() before start()) are
accepted and mutate state as usual.

Concurrency:
    The countdown is driven by advance(dt) from the caller's loop, so
    firings and caller operations never overlap. There is no lock.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from challenges.base import ChallengeConfig
from challenges.registry import default_challenge, find_challenge
from core.coerce import to_bool, to_int, to_str
from core.countdown import Countdown
from core.store import KeyValueStore
from settings import (
    TICK, TICK_INTERVAL_S,
    SCORE_PER_LEVEL, MAX_LEVEL,
    START_CODE,
    KEY_USER_NAME, KEY_GAME_TIMER, KEY_FULL_TIME, KEY_SCORE, KEY_CODE,
    KEY_LEVEL, KEY_GAME_STARTED, KEY_FINISH, KEY_CHALLENGE,
    SESSION_KEYS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSetup:
    """Parameters for start().

    Attributes:
        user_name:     Display name of the player.
        total_seconds: Full countdown duration; every edit refills to this.
    """

    user_name:     str
    total_seconds: int


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of the engine's observable state."""

    running:           bool
    finished:          bool
    user_name:         str
    remaining_seconds: int
    full_time:         int
    level:             int
    code:              str
    score:             int
    challenge:         ChallengeConfig
    fine_tick:         int
    progress_ticker:   int


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


class SessionEngine:
    """Stateful engine for one session, persisted through a key-value store.

    Attributes:
        _store:           Key-value collaborator. Written synchronously.
        _running:         True between start()/resume() and dispose().
        _finished:        True when no session is active. Initially True.
        _user_name:       Player display name.
        _remaining:       Coarse countdown in whole seconds ("gameTimer").
        _full_time:       Configured session duration in seconds.
        _level:           0..MAX_LEVEL, derived from score.
        _code:            Current editor contents.
        _score:           Current score.
        _challenge:       Selected ChallengeConfig.
        _fine_tick:       TICK..0 sub-second counter, in memory only.
        _progress_ticker: Firings left before expiry, in memory only.
        _countdown:       The active Countdown handle, or None.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """Create an idle engine and re-apply a persisted challenge choice.

        Args:
            store: Key-value store the session is mirrored to.
        """
        self._store = store

        self._running:   bool = False
        self._finished:  bool = True
        self._user_name: str  = ""
        self._remaining: int  = 0
        self._full_time: int  = 0
        self._level:     int  = 0
        self._code:      str  = START_CODE
        self._score:     int  = 0
        self._challenge: ChallengeConfig = default_challenge()

        self._fine_tick:       int = TICK
        self._progress_ticker: int = 0
        self._countdown: Countdown | None = None

        self._apply_persisted_challenge()

    # ── Read accessors ────────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._running

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def full_time(self) -> int:
        return self._full_time

    @property
    def code(self) -> str:
        return self._code

    @property
    def score(self) -> int:
        return self._score

    @property
    def challenge(self) -> ChallengeConfig:
        return self._challenge

    @property
    def fine_tick(self) -> int:
        return self._fine_tick

    @property
    def progress_ticker(self) -> int:
        return self._progress_ticker

    def progress_fill(self) -> float:
        """Return the progress ticker as a fraction of a full refill.

        Returns:
            Float in [0.0, 1.0]. 0.0 when no full time is configured.
        """
        full = self._full_time * TICK
        if full <= 0:
            return 0.0
        return max(0.0, min(1.0, self._progress_ticker / full))

    @property
    def countdown_active(self) -> bool:
        """True while a countdown handle is held."""
        return self._countdown is not None

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, level: int) -> None:
        """Set and persist the level. Values outside 0..MAX_LEVEL are ignored."""
        if 0 <= level <= MAX_LEVEL:
            self._level = level
            self._store.set(KEY_LEVEL, level)

    def snapshot(self) -> SessionState:
        """Return the current observable state as an immutable value."""
        return SessionState(
            running=self._running,
            finished=self._finished,
            user_name=self._user_name,
            remaining_seconds=self._remaining,
            full_time=self._full_time,
            level=self._level,
            code=self._code,
            score=self._score,
            challenge=self._challenge,
            fine_tick=self._fine_tick,
            progress_ticker=self._progress_ticker,
        )

    # ── Session transitions ───────────────────────────────────────────────────

    def start(self, setup: SessionSetup) -> None:
        """Begin a new session and persist every field.

        The countdown is NOT started here. It starts on the first update(),
        so the clock does not run before the player types anything.

        Args:
            setup: Player name and full session duration.
        """
        self._running   = True
        self._user_name = setup.user_name
        self._remaining = 0
        self._level     = 0
        self._score     = 0
        self._full_time = setup.total_seconds
        self._finished  = False
        self._progress_ticker = self._remaining * TICK
        self.set_challenge(self._challenge)

        self._store.set(KEY_USER_NAME, setup.user_name)
        self._store.set(KEY_GAME_TIMER, setup.total_seconds)
        self._store.set(KEY_FULL_TIME, setup.total_seconds)
        self._store.set(KEY_SCORE, 0)
        self._store.set(KEY_CODE, self._code)
        self._store.set(KEY_LEVEL, self._level)
        self._store.set(KEY_GAME_STARTED, _bool_str(True))
        self._store.set(KEY_FINISH, _bool_str(self._finished))

        logger.info(
            "Session started: user=%r total=%ss challenge=%s",
            setup.user_name, setup.total_seconds, self._challenge.name,
        )

    def resume(self) -> None:
        """Rebuild state from the store and restart the countdown if needed.

        Absent keys fall back to the construction defaults, unreadable ones
        to zero/false. Resuming an empty store gives the same idle state as
        a freshly constructed engine.
        """
        get = self._store.get

        self._running   = to_bool(get(KEY_GAME_STARTED), default=False)
        self._remaining = max(0, to_int(get(KEY_GAME_TIMER)))
        self.level      = to_int(get(KEY_LEVEL))
        self._code      = to_str(get(KEY_CODE), default=START_CODE)
        self._score     = max(0, to_int(get(KEY_SCORE)))
        self._full_time = max(0, to_int(get(KEY_FULL_TIME)))
        self._user_name = to_str(get(KEY_USER_NAME))
        self._finished  = to_bool(get(KEY_FINISH), default=True)

        self._progress_ticker = self._remaining * TICK
        self._fine_tick       = TICK

        self._apply_persisted_challenge()

        if self._running and not self._finished:
            self._start_countdown()
            logger.info(
                "Session resumed: user=%r remaining=%ss score=%s level=%s",
                self._user_name, self._remaining, self._score, self._level,
            )
        else:
            logger.debug("Nothing to resume (running=%s finished=%s)",
                         self._running, self._finished)

    def update(self, code: str) -> None:
        """Record an editor change and refill the countdown.

        Starts the countdown if none is active. Remaining seconds and the
        progress ticker are reset to the full session time on every call.

        Args:
            code: Latest editor contents.
        """
        if self._countdown is None:
            self._start_countdown()

        self._code = code
        self._store.set(KEY_CODE, code)

        self._remaining       = self._full_time
        self._progress_ticker = self._full_time * TICK
        self._fine_tick       = TICK
        self._store.set(KEY_GAME_TIMER, self._remaining)

    def update_score(self, score: int) -> None:
        """Set and persist the score, deriving level = score // SCORE_PER_LEVEL.

        Scores past the last level leave the level where it was.

        Args:
            score: New score, >= 0.
        """
        self._score = score
        self._store.set(KEY_SCORE, score)
        self.level = score // SCORE_PER_LEVEL

    def set_challenge(self, config: ChallengeConfig) -> None:
        """Select a challenge and persist its name.

        Args:
            config: Entry from challenges/registry.py.
        """
        self._challenge = config
        self._store.set(KEY_CHALLENGE, config.name)

    def dispose(self) -> None:
        """End the session: reset to idle and clear per-session keys.

        The challenge selection and level stay in the store. Safe to call
        repeatedly.
        """
        self._running   = False
        self._user_name = ""
        self._remaining = 0
        self._finished  = True
        self._score     = 0
        self._code      = START_CODE
        self._progress_ticker = 0
        self._fine_tick       = TICK

        for key in SESSION_KEYS:
            self._store.remove(key)

        self._stop_countdown()
        logger.info("Session disposed")

    # ── Countdown ─────────────────────────────────────────────────────────────

    def advance(self, dt: float) -> int:
        """Feed elapsed time to the countdown.

        No-op while no countdown is active.

        Args:
            dt: Delta time in seconds since the last call.

        Returns:
            Number of countdown firings run.
        """
        if self._countdown is None:
            return 0
        return self._countdown.update(dt)

    def _start_countdown(self) -> None:
        """Create the countdown handle unless one is already active."""
        if self._countdown is not None:
            return
        self._countdown = Countdown(TICK_INTERVAL_S, self._on_interval)
        logger.debug("Countdown started (progress=%s)", self._progress_ticker)

    def _stop_countdown(self) -> None:
        """Cancel and drop the countdown handle, if any."""
        if self._countdown is None:
            return
        self._countdown.cancel()
        self._countdown = None
        logger.debug("Countdown stopped")

    def _on_interval(self) -> None:
        """One countdown firing: expire, or consume one progress unit."""
        if self._progress_ticker <= 0:
            self._expire()
            return
        self._progress_ticker -= 1
        self._step_fine_tick()

    def _step_fine_tick(self) -> None:
        """Advance the fine tick; every TICK steps take one second off."""
        self._fine_tick -= 1
        if self._fine_tick > 0:
            return
        self._remaining = max(0, self._remaining - 1)
        self._store.set(KEY_GAME_TIMER, self._remaining)
        self._fine_tick = TICK
        logger.debug("Coarse tick: remaining=%ss", self._remaining)

    def _expire(self) -> None:
        """Time ran out: zero score and level, stop the countdown."""
        self._score = 0
        self.level  = 0
        self._store.set(KEY_SCORE, 0)
        self._progress_ticker = 0
        self._stop_countdown()
        logger.info("Countdown expired for %r; score and level reset", self._user_name)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _apply_persisted_challenge(self) -> None:
        """Re-select the challenge named in the store, if it still exists."""
        name = self._store.get(KEY_CHALLENGE)
        if not name:
            return
        config = find_challenge(str(name))
        if config is None:
            logger.warning("Unknown challenge %r in store; keeping %s",
                           name, self._challenge.name)
            return
        self.set_challenge(config)
