"""
Siggy's Picks engine - moneyline lean and underdog puckline.

Blends the de-vigged moneyline market with a stats-based strength signal,
nudges close games toward a long-priced underdog, and optionally recommends
the underdog at +1.5 on the puckline.

The engine is a pure function of (match, config): no I/O, no shared state.
Each call builds its own result, so concurrent calls need no coordination.
"""

import logging
import math
from typing import Any, List, Optional, Tuple

from backend.core.odds_math import (
    clamp01,
    devig_two_way,
    moneyline_to_probability,
    round_half_up,
)
from backend.core.pick_config import PickConfig
from backend.core.pick_types import (
    AWAY,
    HOME,
    MatchInput,
    PickResult,
    PucklinePick,
    Side,
)
from backend.core.stat_strength import stat_strength
from backend.services.pick_config import resolve_config

logger = logging.getLogger(__name__)


def _pct(p: float) -> int:
    return round_half_up(p * 100)


def _usable_moneyline(ml: Optional[float]) -> Optional[float]:
    """A moneyline of 0, NaN or inf is not a price; treat it like a missing one."""
    if ml is None or ml == 0 or not math.isfinite(ml):
        return None
    return ml


class PickEngine:
    """
    Moneyline + puckline pick engine.

    Construct once with a resolved :class:`PickConfig` and call
    :meth:`suggest` per game, or use :func:`suggest_pick` to resolve a
    config from raw overrides on every call.
    """

    def __init__(self, config: Optional[PickConfig] = None):
        self.config = config or PickConfig.default()

    def suggest(self, match: MatchInput) -> PickResult:
        """
        Produce the pick for one game.

        Steps, each appending one rationale line as it runs:

        1. Market read: de-vigged moneyline probabilities (or 0.5/0.5 when
           either moneyline is missing).
        2. Stats read: strength score per side.
        3. Blend market and stats probabilities by ``market_weight``.
        4. Underdog bump for a close-on-paper, juicy-priced dog.
        5. Moneyline pick and confidence.
        6. Underdog puckline recommendation.
        """
        cfg = self.config
        rationale: List[str] = []

        # 1. Market read
        home_ml = _usable_moneyline(match.home.moneyline)
        away_ml = _usable_moneyline(match.away.moneyline)
        has_market = home_ml is not None and away_ml is not None

        if has_market:
            p_home_mkt, p_away_mkt = devig_two_way(
                moneyline_to_probability(home_ml),
                moneyline_to_probability(away_ml),
            )
            rationale.append(
                f"Market says Home {_pct(p_home_mkt)}%, Away {_pct(p_away_mkt)}%."
            )
        else:
            p_home_mkt, p_away_mkt = 0.5, 0.5
            rationale.append("Moneylines missing; falling back to stats only.")

        # 2. Stats read
        s_home = stat_strength(cfg, match.home.stats)
        s_away = stat_strength(cfg, match.away.stats)
        rationale.append(
            f"Stats strength Home {_pct(s_home)}%, Away {_pct(s_away)}%."
        )

        # 3. Blend
        p_home, p_away = self.blend(p_home_mkt, s_home, s_away)

        # 4. Underdog bump
        underdog = self.underdog_side(home_ml, away_ml) if has_market else None
        stats_close = abs(s_home - s_away) <= cfg.siggy.stats_close_threshold

        if has_market and stats_close:
            if underdog is not None:
                dog_ml = home_ml if underdog == HOME else away_ml
                if dog_ml >= cfg.siggy.juicy_underdog_min_ml:
                    bump = cfg.siggy.underdog_bump
                    if underdog == HOME:
                        p_home, p_away = p_home + bump, p_away - bump
                    else:
                        p_home, p_away = p_home - bump, p_away + bump
                    rationale.append(
                        f"Siggy bump: {underdog.lower()} dog close on stats."
                    )
            p_home, p_away = clamp01(p_home), clamp01(p_away)

        # 5. Moneyline decision
        moneyline_pick: Side = HOME if p_home >= p_away else AWAY
        moneyline_confidence = round_half_up(100 * abs(p_home - p_away))
        rationale.append(f"ML lean: {moneyline_pick} (conf {moneyline_confidence}).")

        # 6. Underdog puckline
        underdog_puckline = None
        if has_market and underdog is not None:
            dog_mkt = p_home_mkt if underdog == HOME else p_away_mkt
            underdog_puckline = self.underdog_puckline(
                match, underdog, dog_mkt, stats_close
            )
            if underdog_puckline is not None:
                rationale.append(
                    f"Siggy likes {'a home' if underdog == HOME else 'an away'} "
                    f"dog +{underdog_puckline.line:g}."
                )

        result = PickResult(
            moneyline_pick=moneyline_pick,
            moneyline_confidence=moneyline_confidence,
            win_lean=moneyline_pick,
            win_confidence=moneyline_confidence,
            underdog_puckline=underdog_puckline,
            rationale=tuple(rationale),
        )
        logger.debug(
            "Pick: p_home=%.4f p_away=%.4f s_home=%.4f s_away=%.4f -> %r",
            p_home, p_away, s_home, s_away, result,
        )
        return result

    def blend(
        self, p_home_mkt: float, s_home: float, s_away: float
    ) -> Tuple[float, float]:
        """
        Blend the market's home probability with the stats signal.

        The strength pair becomes a side probability ``s_home / (s_home +
        s_away)`` (0.5 when both are zero), mixed with the market by
        ``market_weight``.  Returns ``(p_home, p_away)``.
        """
        total = s_home + s_away
        p_home_stats = s_home / total if total > 0 else 0.5
        w = self.config.market_weight
        p_home = clamp01(w * p_home_mkt + (1 - w) * p_home_stats)
        return p_home, clamp01(1 - p_home)

    @staticmethod
    def underdog_side(home_ml: float, away_ml: float) -> Optional[Side]:
        """
        Side with the numerically larger moneyline, or None if they're equal.

        Compares the raw prices, not implied probabilities: +160 beats -190,
        and -105 beats -115.
        """
        if home_ml > away_ml:
            return HOME
        if away_ml > home_ml:
            return AWAY
        return None

    def underdog_puckline(
        self,
        match: MatchInput,
        underdog: Side,
        dog_market_prob: float,
        stats_close: bool,
    ) -> Optional[PucklinePick]:
        """
        Recommend the underdog at ``+standard_line``, or return None.

        The dog's line comes from the quoted spread when present, otherwise
        ``+standard_line`` if ``assume_standard_if_missing``.  A quoted line
        other than ``+standard_line`` (an alternate line) gets no
        recommendation.  The dog qualifies when its no-vig market
        probability is at most ``dog_viable_market_prob_max`` or the stats
        call the game close.
        """
        pl = self.config.puckline
        quoted = match.home_point_spread if underdog == HOME else match.away_point_spread
        if quoted is not None:
            dog_line: Optional[float] = quoted
        elif pl.assume_standard_if_missing:
            dog_line = +pl.standard_line
        else:
            dog_line = None

        if dog_line is not None and dog_line != +pl.standard_line:
            return None
        if not (dog_market_prob <= pl.dog_viable_market_prob_max or stats_close):
            return None

        close_bonus = pl.extra_conf_if_stats_close if stats_close else 0.0
        raw = round_half_up((pl.dog_target_prob - dog_market_prob + close_bonus) * pl.conf_scale)
        confidence = max(pl.min_confidence, min(100, raw))
        return PucklinePick(side=underdog, line=+pl.standard_line, confidence=confidence)


def suggest_pick(match: MatchInput, overrides: Optional[Any] = None) -> PickResult:
    """
    Resolve a fresh config from ``overrides`` and run the engine once.

    Bad overrides are discarded (see
    :func:`backend.services.pick_config.resolve_config`); this never fails
    because of configuration.
    """
    return PickEngine(resolve_config(overrides)).suggest(match)
