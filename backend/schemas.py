"""
Pydantic request/response schemas for the pick engine.

Wire payloads use the camelCase names the browser app already consumes
(``moneylinePick``, ``statsBounds.gfPerGame``, ...).  Python code works with
the snake_case dataclasses in ``backend.core``; these schemas are the only
place the two naming schemes meet.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.core.pick_types import MatchInput, PickResult, TeamInput, TeamStats


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Partial configuration overrides
# ---------------------------------------------------------------------------

class BoundsOverride(_WireModel):
    min: Optional[float] = None
    max: Optional[float] = None


class StatsDefaultsOverride(_WireModel):
    goals_for_per_game: Optional[float] = Field(None, alias="goalsForPerGame")
    goals_against_per_game: Optional[float] = Field(None, alias="goalsAgainstPerGame")
    power_play_pct: Optional[float] = Field(None, alias="powerPlayPct")
    penalty_kill_pct: Optional[float] = Field(None, alias="penaltyKillPct")


class StatsBoundsOverride(_WireModel):
    gf_per_game: Optional[BoundsOverride] = Field(None, alias="gfPerGame")
    ga_per_game: Optional[BoundsOverride] = Field(None, alias="gaPerGame")
    pp_pct: Optional[BoundsOverride] = Field(None, alias="ppPct")
    pk_pct: Optional[BoundsOverride] = Field(None, alias="pkPct")


class StatWeightsOverride(_WireModel):
    gf: Optional[float] = Field(None, ge=0)
    ga: Optional[float] = Field(None, ge=0)
    pp: Optional[float] = Field(None, ge=0)
    pk: Optional[float] = Field(None, ge=0)


class SiggyOverride(_WireModel):
    stats_close_threshold: Optional[float] = Field(None, ge=0, alias="statsCloseThreshold")
    juicy_underdog_min_ml: Optional[float] = Field(None, alias="juicyUnderdogMinML")
    underdog_bump: Optional[float] = Field(None, ge=0, le=1, alias="underdogBump")


class PucklineOverride(_WireModel):
    assume_standard_if_missing: Optional[bool] = Field(None, alias="assumeStandardIfMissing")
    standard_line: Optional[float] = Field(None, gt=0, alias="standardLine")
    dog_viable_market_prob_max: Optional[float] = Field(
        None, ge=0, le=1, alias="dogViableMarketProbMax"
    )
    min_confidence: Optional[int] = Field(None, ge=0, le=100, alias="minConfidence")
    extra_conf_if_stats_close: Optional[float] = Field(None, alias="extraConfIfStatsClose")
    conf_scale: Optional[float] = Field(None, alias="confScale")
    dog_target_prob: Optional[float] = Field(None, ge=0, le=1, alias="dogTargetProb")


class PickConfigOverrides(_WireModel):
    """
    Partial configuration payload.

    Every field is optional; omitted (or null) fields inherit the default.
    Unknown keys are ignored so older engines accept newer config files.
    """

    market_weight: Optional[float] = Field(None, ge=0, le=1, alias="marketWeight")
    stats_defaults: Optional[StatsDefaultsOverride] = Field(None, alias="statsDefaults")
    stats_bounds: Optional[StatsBoundsOverride] = Field(None, alias="statsBounds")
    stat_weights: Optional[StatWeightsOverride] = Field(None, alias="statWeights")
    siggy: Optional[SiggyOverride] = None
    puckline: Optional[PucklineOverride] = None

    def to_changes(self) -> dict:
        """Nested snake_case dict of only the fields the payload supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Match request
# ---------------------------------------------------------------------------

class TeamStatsPayload(_WireModel):
    goals_for_per_game: Optional[float] = Field(None, alias="goalsForPerGame")
    goals_against_per_game: Optional[float] = Field(None, alias="goalsAgainstPerGame")
    power_play_pct: Optional[float] = Field(None, alias="powerPlayPct")
    penalty_kill_pct: Optional[float] = Field(None, alias="penaltyKillPct")


class TeamPayload(_WireModel):
    stats: Optional[TeamStatsPayload] = None
    moneyline: Optional[float] = Field(None, description="American odds, e.g. -150 or 130")


class MatchRequest(_WireModel):
    """Payload describing one game, as produced by the odds/stats fetchers."""

    home: TeamPayload = Field(default_factory=TeamPayload)
    away: TeamPayload = Field(default_factory=TeamPayload)
    home_point_spread: Optional[float] = Field(None, alias="homePointSpread")
    away_point_spread: Optional[float] = Field(None, alias="awayPointSpread")

    def to_match_input(self) -> MatchInput:
        return MatchInput(
            home=_team_input(self.home),
            away=_team_input(self.away),
            home_point_spread=self.home_point_spread,
            away_point_spread=self.away_point_spread,
        )


def _team_input(team: TeamPayload) -> TeamInput:
    stats = TeamStats(**team.stats.model_dump()) if team.stats is not None else None
    return TeamInput(stats=stats, moneyline=team.moneyline)


# ---------------------------------------------------------------------------
# Pick response
# ---------------------------------------------------------------------------

class PucklineResponse(_WireModel):
    side: Literal["HOME", "AWAY"]
    line: float
    confidence: int = Field(..., ge=0, le=100)


class PickResponse(_WireModel):
    """
    Serialized pick, field-for-field what the UI renders.

    Dump with ``model_dump(by_alias=True, exclude_none=True)`` so an absent
    puckline is omitted rather than sent as ``null``.
    """

    moneyline_pick: Literal["HOME", "AWAY"] = Field(..., alias="moneylinePick")
    moneyline_confidence: int = Field(..., ge=0, le=100, alias="moneylineConfidence")
    win_lean: Literal["HOME", "AWAY"] = Field(..., alias="winLean")
    win_confidence: int = Field(..., ge=0, le=100, alias="winConfidence")
    underdog_puckline: Optional[PucklineResponse] = Field(None, alias="underdogPuckline")
    rationale: List[str]

    @classmethod
    def from_result(cls, result: PickResult) -> "PickResponse":
        dog = result.underdog_puckline
        return cls(
            moneyline_pick=result.moneyline_pick,
            moneyline_confidence=result.moneyline_confidence,
            win_lean=result.win_lean,
            win_confidence=result.win_confidence,
            underdog_puckline=(
                PucklineResponse(side=dog.side, line=dog.line, confidence=dog.confidence)
                if dog is not None
                else None
            ),
            rationale=list(result.rationale),
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
