"""Team-strength score from season statistics.

Pure functions: no I/O, no logging.

Each of the four stats is min-max scaled into ``[0, 1]`` using the
configured bounds, goals-against is inverted (fewer allowed is better), and
the four scaled values are combined with the configured weights.  The
result is a single comparable "team quality" number per side that knows
nothing about market pricing.

Run tests with::

    pytest tests/test_stat_strength.py -v
"""

from __future__ import annotations

from backend.core.odds_math import clamp01
from backend.core.pick_config import Bounds, PickConfig
from backend.core.pick_types import TeamStats

#: Value returned by :func:`normalize01` when the bounds have zero width.
DEGENERATE_BOUNDS_VALUE = 0.5


def normalize01(value: float, bounds: Bounds) -> float:
    """Linearly scale ``value`` from ``bounds`` into ``[0, 1]``, clamped.

    Returns exactly ``0.5`` when ``bounds.min == bounds.max``.

    Examples::

        normalize01(3.1, Bounds(2.2, 4.0)) → 0.5
        normalize01(5.0, Bounds(2.2, 4.0)) → 1.0   (clamped)
    """
    if bounds.max == bounds.min:
        return DEGENERATE_BOUNDS_VALUE
    return clamp01((value - bounds.min) / (bounds.max - bounds.min))


def stat_strength(config: PickConfig, stats: TeamStats | None) -> float:
    """Weighted ``[0, 1]`` strength score for one team.

    Args:
        config: Resolved engine configuration.
        stats: Team statistics; ``None`` or any ``None`` field falls back to
            ``config.stats_defaults`` independently per stat.

    Returns:
        Strength score clamped to ``[0, 1]``.
    """
    stats = stats or TeamStats()
    d = config.stats_defaults
    b = config.stats_bounds
    w = config.stat_weights

    gf = _or_default(stats.goals_for_per_game, d.goals_for_per_game)
    ga = _or_default(stats.goals_against_per_game, d.goals_against_per_game)
    pp = _or_default(stats.power_play_pct, d.power_play_pct)
    pk = _or_default(stats.penalty_kill_pct, d.penalty_kill_pct)

    gf01 = normalize01(gf, b.gf_per_game)
    ga01 = 1.0 - normalize01(ga, b.ga_per_game)  # lower GA is better
    pp01 = normalize01(pp, b.pp_pct)
    pk01 = normalize01(pk, b.pk_pct)

    return clamp01(w.gf * gf01 + w.ga * ga01 + w.pp * pp01 + w.pk * pk01)


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value
