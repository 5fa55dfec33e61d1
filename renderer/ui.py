"""
renderer/ui.py — HUD rendering for Code in the Dark.

Draws everything on screen:
    - Header bar (player, challenge title, score, level)
    - Progress bar (progress ticker as a shrinking raised bar)
    - Challenge palette swatches
    - Code panel (the editor contents, bottom lines when it overflows)

All functions are stateless: they take explicit data arguments and draw
to the provided surface. They never touch the engine.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H,
    HEADER_H, PROGRESS_BAR_H, BAR_BEVEL, CODE_MARGIN,
    MAX_LEVEL,
    COLOR,
    FONT_FAMILY, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
)
from utils.color import lighter, darker, hex_to_rgb


# ── Font cache ────────────────────────────────────────────────────────────────
_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    """Return a cached monospace font at the given size."""
    if size not in _fonts:
        _fonts[size] = pygame.font.SysFont(FONT_FAMILY, size)
    return _fonts[size]


# ── Header ────────────────────────────────────────────────────────────────────

def draw_header(
    surface: pygame.Surface,
    user_name: str,
    challenge_title: str,
    score: int,
    level: int,
) -> None:
    """Draw the top header bar.

    Args:
        surface:         Game surface.
        user_name:       Player name, top left.
        challenge_title: Selected challenge, below the name.
        score:           Current score, top right.
        level:           Current level, drawn as "LV n/MAX_LEVEL".
    """
    pygame.draw.rect(surface, COLOR["chrome"], (0, 0, SCREEN_W, HEADER_H))

    name = _font(FONT_SIZE_LG).render(user_name or "-", True, COLOR["text"])
    surface.blit(name, (CODE_MARGIN, 8))

    title = _font(FONT_SIZE_SM).render(challenge_title, True, COLOR["text_dim"])
    surface.blit(title, (CODE_MARGIN, 34))

    meta = _font(FONT_SIZE_MD)
    score_surf = meta.render(f"Score {score}", True, COLOR["text"])
    level_surf = meta.render(f"LV {level}/{MAX_LEVEL}", True, COLOR["level"])
    surface.blit(score_surf, (SCREEN_W - score_surf.get_width() - CODE_MARGIN, 8))
    surface.blit(level_surf, (SCREEN_W - level_surf.get_width() - CODE_MARGIN, 30))


# ── Progress bar ──────────────────────────────────────────────────────────────

def draw_progress_bar(surface: pygame.Surface, fill: float) -> None:
    """Draw the progress ticker bar immediately below the header.

    The filled part is raised: a lighter strip on top and a darker edge
    on its right end.

    Args:
        surface: Game surface.
        fill:    Ratio in [0.0, 1.0]. 1.0 = just refilled.
    """
    fill = max(0.0, min(1.0, fill))
    y = HEADER_H
    pygame.draw.rect(surface, COLOR["tile_border"], (0, y, SCREEN_W, PROGRESS_BAR_H))

    filled_w = int(SCREEN_W * fill)
    if filled_w <= 0:
        return
    base = COLOR["progress"]
    depth = min(BAR_BEVEL, PROGRESS_BAR_H // 2)
    pygame.draw.rect(surface, base, (0, y, filled_w, PROGRESS_BAR_H))
    pygame.draw.rect(surface, lighter(base), (0, y, filled_w, depth))
    pygame.draw.rect(surface, darker(base),
                     (max(0, filled_w - depth), y, min(depth, filled_w), PROGRESS_BAR_H))


# ── Palette ───────────────────────────────────────────────────────────────────

def draw_palette(surface: pygame.Surface, colors: tuple[str, ...]) -> None:
    """Draw the challenge palette as small swatches, right-aligned.

    Args:
        surface: Game surface.
        colors:  Hex strings from ChallengeConfig.colors.
    """
    size, gap = 14, 6
    y = HEADER_H + PROGRESS_BAR_H + 8
    x = SCREEN_W - CODE_MARGIN - len(colors) * (size + gap) + gap
    for hex_color in colors:
        pygame.draw.rect(surface, hex_to_rgb(hex_color), (x, y, size, size))
        pygame.draw.rect(surface, COLOR["tile_border"], (x, y, size, size), 1)
        x += size + gap


# ── Code panel ────────────────────────────────────────────────────────────────

def draw_code(surface: pygame.Surface, code: str) -> None:
    """Draw the editor contents, keeping the last lines visible.

    Args:
        surface: Game surface.
        code:    Full editor text.
    """
    font = _font(FONT_SIZE_MD)
    line_h = font.get_linesize()
    top = HEADER_H + PROGRESS_BAR_H + 30
    max_lines = max(1, (SCREEN_H - top - CODE_MARGIN) // line_h)

    lines = code.split("\n")[-max_lines:]
    for i, line in enumerate(lines):
        # Tabs do not render in pygame fonts
        text = font.render(line.replace("\t", "    "), True, COLOR["text"])
        surface.blit(text, (CODE_MARGIN, top + i * line_h))


def draw_expired(surface: pygame.Surface) -> None:
    """Draw the hint shown after the countdown ran out."""
    hint = _font(FONT_SIZE_SM).render(
        "Out of time. Keep typing to restart the clock.", True, COLOR["text_dim"]
    )
    surface.blit(hint, (CODE_MARGIN, HEADER_H + PROGRESS_BAR_H + 8))
