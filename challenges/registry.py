"""
challenges/registry.py — Ordered catalog of all available challenges.

This is the ONLY file that needs to change when adding a new challenge.
Append one ChallengeConfig to CHALLENGE_REGISTRY below.

Registry rules:
    - Order matters: the first entry is the default selection for a
      player who has never picked a challenge.
    - Names must be unique. core/engine.py persists the name and looks
      it up here on recovery; a name that is no longer listed is ignored.
"""

from __future__ import annotations
from challenges.base import ChallengeConfig

# ── Registry ──────────────────────────────────────────────────────────────────
CHALLENGE_REGISTRY: tuple[ChallengeConfig, ...] = (
    ChallengeConfig(
        name="landing",
        title="Landing page",
        target_markup=(
            '<header class="hero"><h1>Ship it</h1>'
            '<a class="cta" href="#">Get started</a></header>'
        ),
        colors=("#0F172A", "#F8FAFC", "#F97316"),
    ),
    ChallengeConfig(
        name="pricing",
        title="Pricing cards",
        target_markup=(
            '<section class="plans">'
            '<div class="plan">Free</div>'
            '<div class="plan featured">Pro</div>'
            '<div class="plan">Team</div>'
            "</section>"
        ),
        colors=("#FFFFFF", "#6366F1", "#1E293B"),
    ),
    ChallengeConfig(
        name="profile",
        title="Profile card",
        target_markup=(
            '<article class="card"><img class="avatar" alt="">'
            "<h2>Ada Lovelace</h2><p>Analyst</p></article>"
        ),
        colors=("#FDF2F8", "#DB2777", "#111827"),
    ),
    ChallengeConfig(
        name="login",
        title="Login form",
        target_markup=(
            '<form class="login"><input placeholder="email">'
            '<input type="password"><button>Sign in</button></form>'
        ),
        colors=("#ECFDF5", "#059669", "#064E3B"),
    ),
)

# Name index built once at import time
_BY_NAME: dict[str, ChallengeConfig] = {c.name: c for c in CHALLENGE_REGISTRY}

if len(_BY_NAME) != len(CHALLENGE_REGISTRY):
    raise RuntimeError("Duplicate challenge names in CHALLENGE_REGISTRY.")


def default_challenge() -> ChallengeConfig:
    """Return the first registry entry.

    Raises:
        RuntimeError: If CHALLENGE_REGISTRY is empty. This should never
                      happen in a correctly configured registry.
    """
    if not CHALLENGE_REGISTRY:
        raise RuntimeError("CHALLENGE_REGISTRY is empty.")
    return CHALLENGE_REGISTRY[0]


def find_challenge(name: str | None) -> ChallengeConfig | None:
    """Look a challenge up by name.

    Args:
        name: Persisted challenge name. None or empty returns None.

    Returns:
        The matching ChallengeConfig, or None if no entry has that name.
    """
    if not name:
        return None
    return _BY_NAME.get(name)
