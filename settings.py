"""
settings.py — Global constants for Code in the Dark.

All magic numbers live here. No other module should hardcode timing
values, level rules, store keys, or colors. Import what you need with:
    from settings import TICK, SESSION_KEYS, ...
"""

import os

# ── Countdown ─────────────────────────────────────────────────────────────────
TICK            = 5      # fine ticks per coarse second
TICK_INTERVAL_S = 0.2    # seconds between countdown firings (TICK * 0.2 = 1s)

# ── Score → level ─────────────────────────────────────────────────────────────
SCORE_PER_LEVEL = 50
MAX_LEVEL       = 5      # level assignments above this are rejected, not clamped

# ── Player defaults (env-overridable) ─────────────────────────────────────────
PLAYER_NAME = os.environ.get("CITD_PLAYER_NAME", "player")
GAME_TIME_S = int(os.environ.get("CITD_GAME_TIME_S", "10"))
STORE_PATH  = os.environ.get("CITD_STORE_PATH", "citd_session.json")

# ── Store keys ────────────────────────────────────────────────────────────────
KEY_USER_NAME    = "userName"
KEY_GAME_TIMER   = "gameTimer"
KEY_FULL_TIME    = "timer"
KEY_SCORE        = "score"
KEY_CODE         = "code"
KEY_LEVEL        = "level"
KEY_GAME_STARTED = "gameStarted"
KEY_FINISH       = "finish"
KEY_CHALLENGE    = "challenge"

# Removed by dispose(). Challenge and level are sticky across sessions.
SESSION_KEYS = (
    KEY_SCORE,
    KEY_USER_NAME,
    KEY_GAME_TIMER,
    KEY_FULL_TIME,
    KEY_GAME_STARTED,
    KEY_CODE,
    KEY_FINISH,
)

# ── Editor ────────────────────────────────────────────────────────────────────
START_CODE = (
    "<html>\n"
    "  <head>\n"
    '    <style type="text/css">\n'
    "       body {\n"
    "          padding: 0;\n"
    "          margin: 0;\n"
    "       }\n"
    "    </style>\n"
    "  </head>\n"
    "  <body>\n"
    "\n"
    "  </body>\n"
    "</html>"
)

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 640
SCREEN_H = 480
FPS      = 60
TITLE    = "Code in the Dark"

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":  ( 24,  24,  27),   # #18181B
    "chrome":      ( 63,  63,  70),   # #3F3F46 — header bar
    "tile_border": ( 82,  82,  91),   # #52525B
    "progress":    (234, 179,   8),   # #EAB308 — progress ticker bar
    "text":        (228, 228, 231),   # #E4E4E7
    "text_dim":    (161, 161, 170),   # #A1A1AA
    "level":       ( 34, 197,  94),   # #22C55E
}

# ── UI Layout ─────────────────────────────────────────────────────────────────
HEADER_H       = 56    # px — player, score, level, challenge title
PROGRESS_BAR_H = 10    # px — thin bar below header
BAR_BEVEL      = 3     # px — lighter top strip and darker end of the progress bar
CODE_MARGIN    = 12    # px — left/top padding of the code panel

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_FAMILY  = "couriernew"
FONT_SIZE_LG = 18
FONT_SIZE_MD = 14
FONT_SIZE_SM = 12
