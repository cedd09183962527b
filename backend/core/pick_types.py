"""Data-transfer objects for the pick engine.

:class:`MatchInput` is what callers hand to
:func:`backend.pick_engine.suggest_pick`; :class:`PickResult` is what they
get back.  Everything here is frozen and slotted so results can be cached
and shared across threads without copying.

Missing data is represented by ``None`` on every numeric field.  The engine
substitutes configured defaults; it never raises on a ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Side = Literal["HOME", "AWAY"]

HOME: Side = "HOME"
AWAY: Side = "AWAY"


@dataclass(frozen=True, slots=True)
class TeamStats:
    """Season statistics for one team.  Any field may be unknown.

    Attributes:
        goals_for_per_game: Goals scored per game.
        goals_against_per_game: Goals allowed per game.
        power_play_pct: Power-play conversion, percent.
        penalty_kill_pct: Penalty-kill success, percent.
    """

    goals_for_per_game: float | None = None
    goals_against_per_game: float | None = None
    power_play_pct: float | None = None
    penalty_kill_pct: float | None = None


@dataclass(frozen=True, slots=True)
class TeamInput:
    """One side of a matchup: optional stats and optional moneyline."""

    stats: TeamStats | None = None
    moneyline: float | None = None


@dataclass(frozen=True, slots=True)
class MatchInput:
    """Both sides of a matchup plus any quoted point spreads."""

    home: TeamInput = field(default_factory=TeamInput)
    away: TeamInput = field(default_factory=TeamInput)
    home_point_spread: float | None = None
    away_point_spread: float | None = None


@dataclass(frozen=True, slots=True)
class PucklinePick:
    """Secondary recommendation: take the underdog on the spread."""

    side: Side
    line: float
    confidence: int


@dataclass(frozen=True, slots=True)
class PickResult:
    """Complete engine output.

    Attributes:
        moneyline_pick: Side the engine leans to win outright.
        moneyline_confidence: ``round(100 × |p_home − p_away|)``, 0–100.
        win_lean: Mirrors ``moneyline_pick``.
        win_confidence: Mirrors ``moneyline_confidence``.
        underdog_puckline: Present only when the dog-spread heuristic fires.
        rationale: One line per reasoning step, in evaluation order.
    """

    moneyline_pick: Side
    moneyline_confidence: int
    win_lean: Side
    win_confidence: int
    underdog_puckline: PucklinePick | None
    rationale: tuple[str, ...]

    def __repr__(self) -> str:
        dog = (
            f"{self.underdog_puckline.side} +{self.underdog_puckline.line} "
            f"({self.underdog_puckline.confidence})"
            if self.underdog_puckline is not None
            else None
        )
        return (
            f"PickResult(ml={self.moneyline_pick} "
            f"({self.moneyline_confidence}), puckline={dog})"
        )
