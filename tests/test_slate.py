"""
Tests for slate-level picks
Run with: pytest tests/test_slate.py -v
"""

import math

import pandas as pd
import pytest

from backend.core.pick_config import PickConfig, merge_config
from backend.services.slate import SLATE_COLUMNS, row_to_match, suggest_slate


@pytest.fixture
def slate():
    return pd.DataFrame([
        {"game_id": 401, "home_ml": -150, "away_ml": 130},
        {"game_id": 402, "home_ml": 160, "away_ml": -190, "home_spread": 1.5, "away_spread": -1.5},
        {"game_id": 403, "home_gf": 3.8, "home_ga": 2.4, "home_pp": 26.0, "home_pk": 85.0},
    ])


class TestRowToMatch:
    """NaN cells become None"""

    def test_nan_is_missing(self, slate):
        match = row_to_match(slate.iloc[2])
        assert match.home.moneyline is None
        assert match.away.moneyline is None
        assert match.home.stats.goals_for_per_game == 3.8
        assert match.away.stats.goals_for_per_game is None

    def test_unparsable_cells_are_missing(self):
        row = pd.Series({"game_id": 9, "home_ml": "PK", "away_ml": "+120", "home_gf": "n/a"})
        match = row_to_match(row)
        assert match.home.moneyline is None
        assert match.away.moneyline == 120.0
        assert match.home.stats.goals_for_per_game is None

    def test_spreads(self, slate):
        match = row_to_match(slate.iloc[1])
        assert match.home_point_spread == 1.5
        assert match.away_point_spread == -1.5


class TestSuggestSlate:
    """One output row per game"""

    def test_columns_and_rows(self, slate):
        picks = suggest_slate(slate)
        assert list(picks.columns) == SLATE_COLUMNS
        assert list(picks["game_id"]) == [401, 402, 403]

    def test_picks(self, slate):
        picks = suggest_slate(slate).set_index("game_id")
        assert picks.loc[401, "moneyline_pick"] == "HOME"
        assert picks.loc[401, "moneyline_confidence"] == 10
        assert picks.loc[402, "moneyline_pick"] == "AWAY"
        assert picks.loc[402, "puckline_side"] == "HOME"
        assert picks.loc[402, "puckline_confidence"] == 42
        assert picks.loc[403, "moneyline_pick"] == "HOME"

    def test_stats_only_game_has_no_puckline(self, slate):
        picks = suggest_slate(slate).set_index("game_id")
        side = picks.loc[403, "puckline_side"]
        assert side is None or (isinstance(side, float) and math.isnan(side))
        assert picks.loc[403, "rationale"].startswith("Moneylines missing")

    def test_config_is_used(self, slate):
        cfg = merge_config(PickConfig.default(), {"market_weight": 1.0})
        picks = suggest_slate(slate, cfg).set_index("game_id")
        # Pure market on game 401: 0.5798 vs 0.4202
        assert picks.loc[401, "moneyline_confidence"] == 16

    def test_bad_cell_does_not_abort_slate(self):
        games = pd.DataFrame([
            {"game_id": 1, "home_ml": "PK", "away_ml": "130"},
            {"game_id": 2, "home_ml": "-150", "away_ml": "130"},
        ])
        picks = suggest_slate(games).set_index("game_id")
        assert picks.loc[1, "rationale"].startswith("Moneylines missing")
        assert picks.loc[2, "moneyline_confidence"] == 10

    def test_missing_game_id(self):
        with pytest.raises(KeyError):
            suggest_slate(pd.DataFrame([{"home_ml": -150}]))

    def test_empty_slate(self):
        picks = suggest_slate(pd.DataFrame(columns=["game_id"]))
        assert picks.empty
        assert list(picks.columns) == SLATE_COLUMNS
