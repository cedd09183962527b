"""
Tests for wire schemas (camelCase payloads in and out)
Run with: pytest tests/test_schemas.py -v
"""

import json

import pytest
from pydantic import ValidationError

from backend.core.pick_types import MatchInput, TeamInput, TeamStats
from backend.pick_engine import suggest_pick
from backend.schemas import MatchRequest, PickConfigOverrides, PickResponse


class TestPickResponse:
    """Serialized picks keep the field names the UI reads"""

    def test_field_names(self):
        pick = suggest_pick(MatchInput(home=TeamInput(moneyline=160), away=TeamInput(moneyline=-190)))
        wire = PickResponse.from_result(pick).to_wire()
        assert set(wire) == {
            "moneylinePick",
            "moneylineConfidence",
            "winLean",
            "winConfidence",
            "underdogPuckline",
            "rationale",
        }
        assert wire["underdogPuckline"] == {"side": "HOME", "line": 1.5, "confidence": 42}
        assert wire["moneylinePick"] == "AWAY"
        assert isinstance(wire["rationale"], list)

    def test_absent_puckline_omitted(self):
        pick = suggest_pick(MatchInput())
        wire = PickResponse.from_result(pick).to_wire()
        assert "underdogPuckline" not in wire

    def test_json_serializable(self):
        pick = suggest_pick(MatchInput(home=TeamInput(moneyline=-150), away=TeamInput(moneyline=130)))
        payload = json.loads(json.dumps(PickResponse.from_result(pick).to_wire()))
        assert payload["moneylineConfidence"] == 10


class TestMatchRequest:
    """Incoming match payloads"""

    def test_camel_case_payload(self):
        request = MatchRequest.model_validate({
            "home": {"moneyline": -150, "stats": {"goalsForPerGame": 3.4, "penaltyKillPct": None}},
            "away": {"moneyline": 130},
            "homePointSpread": -1.5,
            "awayPointSpread": 1.5,
        })
        match = request.to_match_input()
        assert match.home.moneyline == -150
        assert match.home.stats == TeamStats(goals_for_per_game=3.4)
        assert match.away.stats is None
        assert match.home_point_spread == -1.5
        assert match.away_point_spread == 1.5

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_moneyline_rejected(self, bad):
        with pytest.raises(ValidationError):
            MatchRequest.model_validate({"home": {"moneyline": bad}, "away": {"moneyline": 130}})

    def test_empty_payload(self):
        assert MatchRequest.model_validate({}).to_match_input() == MatchInput()

    def test_from_json(self):
        request = MatchRequest.model_validate_json('{"home": {"moneyline": 160}, "away": {"moneyline": -190}}')
        pick = suggest_pick(request.to_match_input())
        assert pick.moneyline_pick == "AWAY"

    def test_non_numeric_moneyline_rejected(self):
        with pytest.raises(ValidationError):
            MatchRequest.model_validate({"home": {"moneyline": "pick'em"}})


class TestPickConfigOverrides:
    """Only supplied fields become merge changes"""

    def test_only_set_fields(self):
        overrides = PickConfigOverrides.model_validate({"statsBounds": {"ppPct": {"max": 32}}})
        assert overrides.to_changes() == {"stats_bounds": {"pp_pct": {"max": 32.0}}}

    def test_empty(self):
        assert PickConfigOverrides.model_validate({}).to_changes() == {}

    def test_range_checks(self):
        with pytest.raises(ValidationError):
            PickConfigOverrides.model_validate({"puckline": {"minConfidence": 150}})
