"""
main.py — Entry point and game loop for Code in the Dark.

Responsibilities:
    - Configure logging
    - Open the JSON save file and build the SessionEngine on top of it
    - Resume the stored session, or start a new one
    - Run the main loop: handle events → update → render → flip
    - Manage pygame.Clock and delta time
    - Wrap the loop in async for pygbag (WASM export)

Architecture note:
    main.py is intentionally thin. It owns the pygame lifecycle and the
    window, nothing else. Session logic lives in core/engine.py, input
    handling and drawing in core/game.py.

Usage (local):
    python main.py

    CITD_PLAYER_NAME=ada CITD_GAME_TIME_S=30 python main.py
"""

import asyncio
import logging
import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE, PLAYER_NAME, GAME_TIME_S, STORE_PATH
from core.engine import SessionEngine
from core.game import Game
from core.store import JsonFileStore

logger = logging.getLogger(__name__)


async def main() -> None:
    """Async main loop, compatible with both CPython and pygbag WASM.

    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(TITLE)
    pygame.key.start_text_input()

    # ── Subsystems ────────────────────────────────────────────────────────────
    clock  = pygame.Clock()
    store  = JsonFileStore(STORE_PATH)
    engine = SessionEngine(store)
    game   = Game(engine)
    game.open(PLAYER_NAME, GAME_TIME_S)
    logger.info("Store: %s", STORE_PATH)

    # ── Main loop ─────────────────────────────────────────────────────────────
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0   # seconds since last frame
        dt = min(dt, 0.5)               # clamp so a stalled window does not drain the clock at once

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                game.handle_event(event)

        if game.quit_requested:
            running = False

        game.update(dt)
        game.render(window)
        pygame.display.flip()

        await asyncio.sleep(0)

    pygame.quit()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
