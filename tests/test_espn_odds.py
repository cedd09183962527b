"""
Tests for ESPN pickcenter odds extraction
Run with: pytest tests/test_espn_odds.py -v
"""

import math

import pytest

from backend.core.pick_types import TeamStats
from backend.services.espn_odds import (
    GameOdds,
    TeamOdds,
    match_input_from_odds,
    parse_pickcenter,
    to_num,
)

SUMMARY = {
    "pickcenter": [
        {
            "provider": {"name": "ESPN BET"},
            "overUnder": 6.5,
            "overOdds": "-115",
            "awayTeamOdds": {"moneyLine": 160, "spreadOdds": "-180"},
            "homeTeamOdds": {"moneyLine": "-190", "spreadOdds": 150},
            "pointSpread": {
                "away": {"open": {"line": "+1.5"}},
                "home": {"open": {"line": "-1.5"}},
            },
        },
        {"provider": "Other book"},
    ]
}


class TestToNum:
    """Lenient number parsing"""

    @pytest.mark.parametrize("raw, expected", [
        (-112, -112.0),
        (6.5, 6.5),
        ("-112", -112.0),
        ("+250", 250.0),
        ("o6.5", 6.5),
        (" 1.5 ", 1.5),
    ])
    def test_parses(self, raw, expected):
        assert to_num(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "EVEN", "N/A", True, math.nan, math.inf])
    def test_unparsable_is_none(self, raw):
        assert to_num(raw) is None


class TestParsePickcenter:
    """First pickcenter entry → GameOdds"""

    def test_full_entry(self):
        odds = parse_pickcenter(SUMMARY)
        assert odds == GameOdds(
            provider="ESPN BET",
            over_under=6.5,
            over_odds=-115.0,
            away=TeamOdds(moneyline=160.0, point_spread=1.5, spread_odds=-180.0),
            home=TeamOdds(moneyline=-190.0, point_spread=-1.5, spread_odds=150.0),
        )

    def test_string_provider(self):
        odds = parse_pickcenter({"pickcenter": [{"provider": "consensus"}]})
        assert odds.provider == "consensus"

    def test_missing_fields_are_none(self):
        odds = parse_pickcenter({"pickcenter": [{"homeTeamOdds": {"moneyLine": -120}}]})
        assert odds.provider is None
        assert odds.home.moneyline == -120.0
        assert odds.home.point_spread is None
        assert odds.away == TeamOdds()

    @pytest.mark.parametrize("summary", [{}, {"pickcenter": []}, {"pickcenter": None}, {"pickcenter": {}}])
    def test_no_pickcenter(self, summary):
        assert parse_pickcenter(summary) is None


class TestMatchInputFromOdds:
    """Parsed odds + stats → engine input"""

    def test_with_odds(self):
        stats = TeamStats(goals_for_per_game=3.3)
        match = match_input_from_odds(parse_pickcenter(SUMMARY), home_stats=stats)
        assert match.home.moneyline == -190.0
        assert match.away.moneyline == 160.0
        assert match.home.stats == stats
        assert match.away.stats is None
        assert match.away_point_spread == 1.5
        assert match.home_point_spread == -1.5

    def test_unpriced_game(self):
        match = match_input_from_odds(None, away_stats=TeamStats(power_play_pct=25.0))
        assert match.home.moneyline is None
        assert match.away.moneyline is None
        assert match.away.stats.power_play_pct == 25.0
