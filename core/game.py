"""
core/game.py — Keyboard front-end for the session engine.

Game turns pygame input into engine calls and draws the HUD:
    - Typed text, ENTER, TAB and BACKSPACE edit the code and call
      engine.update(); every edit also scores one point via
      engine.update_score()
    - F2 cycles through the challenge registry
    - ESC disposes the session and asks main.py to quit

Closing the window WITHOUT pressing ESC leaves the session in the store,
so the next launch resumes it.

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility.
"""

from __future__ import annotations
import logging
import pygame

from challenges.registry import CHALLENGE_REGISTRY
from core.engine import SessionEngine, SessionSetup
from renderer import ui
from settings import COLOR

logger = logging.getLogger(__name__)

# Points awarded per edit
_POINTS_PER_EDIT = 1


class Game:
    """Bridges pygame events and frames to a SessionEngine.

    Attributes:
        engine:         The session engine being driven.
        quit_requested: Set when the player pressed ESC.
        _expired:       True after the countdown ran out, until the next edit.
    """

    def __init__(self, engine: SessionEngine) -> None:
        self.engine = engine
        self.quit_requested: bool = False
        self._expired:       bool = False

    def open(self, user_name: str, total_seconds: int) -> None:
        """Resume a stored session, or start a new one if none is active."""
        self.engine.resume()
        if self.engine.running and not self.engine.finished:
            return
        self.engine.start(SessionSetup(user_name, total_seconds))

    # ── Input ─────────────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event to the engine."""
        if event.type == pygame.TEXTINPUT:
            self._edit(self.engine.code + event.text)

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.engine.dispose()
                self.quit_requested = True
            elif event.key == pygame.K_F2:
                self._next_challenge()
            elif event.key == pygame.K_BACKSPACE:
                if self.engine.code:
                    self._edit(self.engine.code[:-1])
            elif event.key == pygame.K_RETURN:
                self._edit(self.engine.code + "\n")
            elif event.key == pygame.K_TAB:
                self._edit(self.engine.code + "  ")

    def _edit(self, code: str) -> None:
        self._expired = False
        self.engine.update(code)
        self.engine.update_score(self.engine.score + _POINTS_PER_EDIT)

    def _next_challenge(self) -> None:
        names = [c.name for c in CHALLENGE_REGISTRY]
        idx = names.index(self.engine.challenge.name) if self.engine.challenge.name in names else -1
        config = CHALLENGE_REGISTRY[(idx + 1) % len(CHALLENGE_REGISTRY)]
        self.engine.set_challenge(config)
        logger.info("Challenge switched to %s", config.name)

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float) -> None:
        """Advance the session clock by dt seconds."""
        was_active = self.engine.countdown_active
        self.engine.advance(dt)
        if was_active and not self.engine.countdown_active:
            self._expired = True

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the HUD and code panel onto the game surface."""
        engine = self.engine
        surface.fill(COLOR["background"])

        ui.draw_header(
            surface,
            user_name=engine.user_name,
            challenge_title=engine.challenge.title,
            score=engine.score,
            level=engine.level,
        )
        ui.draw_progress_bar(surface, fill=engine.progress_fill())
        ui.draw_palette(surface, engine.challenge.colors)
        if self._expired:
            ui.draw_expired(surface)
        ui.draw_code(surface, engine.code)
