"""Fundamental odds mathematics — the single source of truth.

Every function here is **pure**: no I/O, no logging, no side effects.
Import from this module; never reimplement locally in services or models.

The pillars exposed are:

1. **Odds conversion** — American moneyline → implied probability.
2. **Vig removal** — proportional two-way normalisation.
3. **Rounding and clamping** helpers shared by the pick engine.

Design decisions
----------------
* Vig is removed by proportional normalisation (divide each raw implied
  probability by their sum).  No favourite-longshot correction is applied;
  the underdog bump in the pick engine is the only dog-side adjustment.
* A moneyline of exactly 0 does not exist in American odds.  Callers treat
  it as "no market"; :func:`moneyline_to_probability` rejects it rather
  than dividing by a meaningless number.

Run tests with::

    pytest tests/test_odds_math.py -v
"""

from __future__ import annotations

import math
from typing import Final

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

#: Fair coin-flip probability returned for an unusable two-way market.
COIN_FLIP: Final[float] = 0.5


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def clamp01(x: float) -> float:
    """Clamp ``x`` into ``[0, 1]``."""
    return max(0.0, min(1.0, x))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, sending exact halves upward.

    Python's built-in :func:`round` uses banker's rounding
    (``round(0.5) == 0``, ``round(2.5) == 2``).  Confidence scores are
    displayed to users and must not flip between adjacent integers
    depending on parity, so halves always go up::

        round_half_up(42.5)  → 43
        round_half_up(-0.5)  →  0
    """
    return int(math.floor(x + 0.5))


# ---------------------------------------------------------------------------
# Odds conversion
# ---------------------------------------------------------------------------


def moneyline_to_probability(ml: int | float) -> float:
    """Raw implied probability from an American moneyline (vig-inclusive).

    * Underdog (``ml > 0``): ``100 / (ml + 100)``
    * Favourite (``ml < 0``): ``-ml / (-ml + 100)``

    Args:
        ml: American odds.  Must not be 0.

    Returns:
        Implied probability strictly inside ``(0, 1)``.  The two sides of a
        market sum to more than 1.0 because of the bookmaker's margin; use
        :func:`devig_two_way` to remove it.

    Raises:
        ValueError: If ``ml == 0``.

    Examples::

        moneyline_to_probability(-150) → 0.6000
        moneyline_to_probability(+130) → 0.4348
    """
    if ml == 0:
        raise ValueError(
            "Moneyline 0 is not a valid American price; "
            "treat it as a missing market upstream."
        )
    if ml > 0:
        return 100.0 / (ml + 100.0)
    return -ml / (-ml + 100.0)


# ---------------------------------------------------------------------------
# Vig removal
# ---------------------------------------------------------------------------


def devig_two_way(p_home: float, p_away: float) -> tuple[float, float]:
    """Remove the bookmaker margin from a two-outcome market.

    Args:
        p_home: Raw implied probability for the home side.
        p_away: Raw implied probability for the away side.

    Returns:
        ``(p_home', p_away')`` — each raw probability divided by their
        sum and clamped to ``[0, 1]``.  When the sum is ``<= 0`` the market
        carries no information and ``(0.5, 0.5)`` is returned.

    Examples::

        devig_two_way(0.6, 0.4348) → (0.5798, 0.4202)
        devig_two_way(0.0, 0.0)    → (0.5, 0.5)
    """
    overround = p_home + p_away
    if overround <= 0.0:
        return COIN_FLIP, COIN_FLIP
    return clamp01(p_home / overround), clamp01(p_away / overround)
