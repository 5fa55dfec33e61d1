"""
utils/color.py — Color helpers for Code in the Dark.

Used by renderer/ui.py to shade the progress bar and to turn challenge
palette strings ("#F97316") into pygame colors.
"""

from typing import Tuple

RGBColor = Tuple[int, int, int]


def clamp(value: int, lo: int = 0, hi: int = 255) -> int:
    """Clamp an integer value to [lo, hi]."""
    return max(lo, min(hi, value))


def lighter(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return color with every channel raised by amount, clamped to 255."""
    r, g, b = color
    return (clamp(r + amount), clamp(g + amount), clamp(b + amount))


def darker(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return color with every channel lowered by amount, clamped to 0."""
    r, g, b = color
    return (clamp(r - amount), clamp(g - amount), clamp(b - amount))


def hex_to_rgb(value: str, fallback: RGBColor = (0, 0, 0)) -> RGBColor:
    """Parse a "#RRGGBB" or "#RGB" string.

    Args:
        value:    Hex color, with or without the leading "#".
        fallback: Returned when value is not a valid hex color.

    Returns:
        RGB tuple.
    """
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return fallback
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError:
        return fallback
