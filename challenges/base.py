"""
challenges/base.py — Static description of one coding challenge.

A challenge is the thing the player tries to reproduce: a target page
given as markup plus the palette it uses. Challenges are plain data.
They do NOT touch score, level, or the countdown. Those live in
core/engine.py.

The engine identifies a challenge by its name only. That name is what
gets persisted, so it must be unique across challenges/registry.py.

Adding a new challenge:
    1. Build a ChallengeConfig with a new unique name
    2. Append it to CHALLENGE_REGISTRY in challenges/registry.py
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChallengeConfig:
    """Immutable challenge definition.

    Attributes:
        name:          Unique identifier. Persisted as the challenge selection.
        title:         Human-readable title shown in the header.
        target_markup: HTML the player is trying to reproduce.
        colors:        Hex colors used by the target, shown as hints.
    """

    name:          str
    title:         str
    target_markup: str
    colors:        tuple[str, ...] = field(default_factory=tuple)
