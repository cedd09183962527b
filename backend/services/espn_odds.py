"""
Odds extraction from ESPN game-summary payloads.

Fetching is the caller's job; this module only turns an already-decoded
summary JSON into numbers the pick engine can use.

The ``pickcenter`` array holds one entry per book; entry 0 is the first
book / consensus line and is the one we read:

  provider                       -> GameOdds.provider
  overUnder / overOdds           -> GameOdds.over_under / over_odds
  homeTeamOdds.moneyLine         -> GameOdds.home.moneyline
  homeTeamOdds.spreadOdds        -> GameOdds.home.spread_odds
  pointSpread.home.open.line     -> GameOdds.home.point_spread
  (same for away)

ESPN sometimes sends prices as strings ("-112", "+250"); :func:`to_num`
parses those leniently and maps anything unparsable to None.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from backend.core.pick_types import MatchInput, TeamInput, TeamStats

logger = logging.getLogger(__name__)

_STRIP_RE = re.compile(r"[^\d\-.+]")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


@dataclass(frozen=True)
class TeamOdds:
    moneyline: Optional[float] = None
    point_spread: Optional[float] = None
    spread_odds: Optional[float] = None


@dataclass(frozen=True)
class GameOdds:
    provider: Optional[str]
    over_under: Optional[float]
    over_odds: Optional[float]
    away: TeamOdds
    home: TeamOdds


def to_num(value: Any) -> Optional[float]:
    """
    Parse a number that may arrive as int, float or a decorated string.

    Non-numeric characters are stripped and the leading number is read, so
    "+250" -> 250.0 and "o6.5" -> 6.5.  None, booleans, NaN/inf and
    strings without digits return None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        n = float(value)
    else:
        match = _NUMBER_RE.match(_STRIP_RE.sub("", str(value)))
        if not match:
            return None
        n = float(match.group(0))
    return n if math.isfinite(n) else None


def _get(obj: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def parse_pickcenter(summary: Dict) -> Optional[GameOdds]:
    """
    Extract the first pickcenter entry of an ESPN summary payload.

    Returns None when the payload has no (or an empty) pickcenter array,
    which is normal for games the books haven't priced yet.
    """
    pickcenter = summary.get("pickcenter") if isinstance(summary, dict) else None
    if not isinstance(pickcenter, list) or not pickcenter:
        logger.debug("No pickcenter odds in summary payload")
        return None

    entry = pickcenter[0]
    provider = _get(entry, "provider")
    # ESPN sends provider either as a bare string or as {"name": ...}
    if isinstance(provider, dict):
        provider = provider.get("name")

    return GameOdds(
        provider=provider if isinstance(provider, str) else None,
        over_under=to_num(_get(entry, "overUnder")),
        over_odds=to_num(_get(entry, "overOdds")),
        away=_team_odds(entry, "away"),
        home=_team_odds(entry, "home"),
    )


def _team_odds(entry: Dict, side: str) -> TeamOdds:
    return TeamOdds(
        moneyline=to_num(_get(entry, f"{side}TeamOdds", "moneyLine")),
        point_spread=to_num(_get(entry, "pointSpread", side, "open", "line")),
        spread_odds=to_num(_get(entry, f"{side}TeamOdds", "spreadOdds")),
    )


def match_input_from_odds(
    odds: Optional[GameOdds],
    home_stats: Optional[TeamStats] = None,
    away_stats: Optional[TeamStats] = None,
) -> MatchInput:
    """
    Assemble a :class:`MatchInput` from parsed odds and fetched team stats.

    ``odds`` may be None (unpriced game); the engine then picks on stats only.
    """
    if odds is None:
        return MatchInput(
            home=TeamInput(stats=home_stats),
            away=TeamInput(stats=away_stats),
        )
    return MatchInput(
        home=TeamInput(stats=home_stats, moneyline=odds.home.moneyline),
        away=TeamInput(stats=away_stats, moneyline=odds.away.moneyline),
        home_point_spread=odds.home.point_spread,
        away_point_spread=odds.away.point_spread,
    )
