"""
Slate-level picks: run the engine over every game on a calendar day.

Input is a DataFrame with one row per game.  Only ``game_id`` is required;
every other column is optional and NaN means "unknown":

  home_ml, away_ml                    American moneylines
  home_spread, away_spread            quoted puckline per side
  home_gf, home_ga, home_pp, home_pk  home season stats
  away_gf, away_ga, away_pp, away_pk  away season stats

Output is a flat DataFrame (one row per game) suitable for CSV export or the
dashboard tables.
"""

import logging
from typing import Any, Optional

import pandas as pd

from backend.core.pick_config import PickConfig
from backend.core.pick_types import MatchInput, TeamInput, TeamStats
from backend.pick_engine import PickEngine
from backend.services.espn_odds import to_num

logger = logging.getLogger(__name__)

SLATE_COLUMNS = [
    "game_id",
    "moneyline_pick",
    "moneyline_confidence",
    "puckline_side",
    "puckline_line",
    "puckline_confidence",
    "rationale",
]


def _value(row: pd.Series, column: str) -> Optional[float]:
    """Numeric cell value; blanks and unparsable text such as "PK" are None."""
    raw: Any = row.get(column)
    if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
        return None
    return to_num(raw)


def _team(row: pd.Series, prefix: str) -> TeamInput:
    stats = TeamStats(
        goals_for_per_game=_value(row, f"{prefix}_gf"),
        goals_against_per_game=_value(row, f"{prefix}_ga"),
        power_play_pct=_value(row, f"{prefix}_pp"),
        penalty_kill_pct=_value(row, f"{prefix}_pk"),
    )
    return TeamInput(stats=stats, moneyline=_value(row, f"{prefix}_ml"))


def row_to_match(row: pd.Series) -> MatchInput:
    """Build the engine input for one slate row."""
    return MatchInput(
        home=_team(row, "home"),
        away=_team(row, "away"),
        home_point_spread=_value(row, "home_spread"),
        away_point_spread=_value(row, "away_spread"),
    )


def suggest_slate(games: pd.DataFrame, config: Optional[PickConfig] = None) -> pd.DataFrame:
    """
    Pick every game in ``games``.

    Raises:
        KeyError: If the ``game_id`` column is missing.
    """
    if "game_id" not in games.columns:
        raise KeyError("Slate frame must have a 'game_id' column")

    engine = PickEngine(config)
    rows = []
    for _, row in games.iterrows():
        pick = engine.suggest(row_to_match(row))
        dog = pick.underdog_puckline
        rows.append({
            "game_id": row["game_id"],
            "moneyline_pick": pick.moneyline_pick,
            "moneyline_confidence": pick.moneyline_confidence,
            "puckline_side": dog.side if dog else None,
            "puckline_line": dog.line if dog else None,
            "puckline_confidence": dog.confidence if dog else None,
            "rationale": " ".join(pick.rationale),
        })

    logger.info(
        "Slate: %d games picked, %d puckline recommendations",
        len(rows), sum(1 for r in rows if r["puckline_side"] is not None),
    )
    return pd.DataFrame(rows, columns=SLATE_COLUMNS)
