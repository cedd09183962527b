"""Pick-engine configuration — every tunable constant in one place.

This module is the **registry** for the weights, bounds and thresholds the
pick engine uses.  Nowhere else in the codebase should the market weight,
stat bounds, or puckline constants be hard-coded.

Architecture
------------
:class:`PickConfig` is a frozen dataclass composed of one frozen section
per concern (:class:`StatsDefaults`, :class:`StatsBounds`,
:class:`StatWeights`, :class:`SiggyConfig`, :class:`PucklineConfig`).
:meth:`PickConfig.default` returns the canonical constants.

Partial overrides are applied with :func:`merge_config`, which walks the
override mapping section by section and uses :func:`dataclasses.replace`
at every level, so overriding ``stats_bounds.gf_per_game.max`` keeps
``gf_per_game.min`` and the other three bound pairs intact.

Typical usage::

    from backend.core.pick_config import PickConfig, merge_config

    cfg = PickConfig.default()
    tuned = merge_config(cfg, {"market_weight": 0.8,
                               "siggy": {"underdog_bump": 0.02}})
    tuned.validate()

Field names here are snake_case.  The camelCase wire names used by JSON
override payloads are mapped in :mod:`backend.schemas`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, TypeVar

_C = TypeVar("_C")


@dataclass(frozen=True)
class Bounds:
    """Inclusive ``[min, max]`` range used to scale a raw stat into [0, 1]."""

    min: float
    max: float


@dataclass(frozen=True)
class StatsDefaults:
    """Fallback values substituted for a team's unknown statistics.

    Attributes:
        goals_for_per_game: Goals scored per game.  League average ≈ 3.0.
        goals_against_per_game: Goals allowed per game.  League average ≈ 3.0.
        power_play_pct: Power-play conversion, in percent (20.0 = 20%).
        penalty_kill_pct: Penalty-kill success, in percent.
    """

    goals_for_per_game: float = 3.0
    goals_against_per_game: float = 3.0
    power_play_pct: float = 20.0
    penalty_kill_pct: float = 78.0


@dataclass(frozen=True)
class StatsBounds:
    """Per-statistic normalisation ranges (roughly the league's spread)."""

    gf_per_game: Bounds = Bounds(2.2, 4.0)
    ga_per_game: Bounds = Bounds(2.0, 4.0)
    pp_pct: Bounds = Bounds(12.0, 30.0)
    pk_pct: Bounds = Bounds(70.0, 88.0)


@dataclass(frozen=True)
class StatWeights:
    """Weights of the four normalised stats in the strength score.

    They need not sum to 1; the strength score is clamped after weighting.
    """

    gf: float = 0.38
    ga: float = 0.32
    pp: float = 0.18
    pk: float = 0.12


@dataclass(frozen=True)
class SiggyConfig:
    """Underdog-bump heuristic.

    Attributes:
        stats_close_threshold: Largest ``|strength_home − strength_away|``
            still treated as an even matchup on paper.
        juicy_underdog_min_ml: Smallest underdog moneyline (e.g. +150) that
            makes the dog worth backing.
        underdog_bump: Probability mass moved from favourite to underdog
            when a close, juicy dog is found.
    """

    stats_close_threshold: float = 0.07
    juicy_underdog_min_ml: float = 150
    underdog_bump: float = 0.018


@dataclass(frozen=True)
class PucklineConfig:
    """Constants for the secondary underdog puckline (+1.5) pick.

    Attributes:
        assume_standard_if_missing: When no spread is quoted, assume the
            dog is ``+standard_line`` and the favourite ``-standard_line``.
        standard_line: Conventional hockey spread, 1.5 goals.
        dog_viable_market_prob_max: Dog is worth a look when its no-vig
            market probability is at or below this.
        min_confidence: Floor for the puckline confidence score.
        extra_conf_if_stats_close: Probability-scale bonus when the stats
            call the game close.
        conf_scale: Multiplier from probability gap to confidence points.
        dog_target_prob: Reference probability the dog's market price is
            measured against.
    """

    assume_standard_if_missing: bool = True
    standard_line: float = 1.5
    dog_viable_market_prob_max: float = 0.45
    min_confidence: int = 40
    extra_conf_if_stats_close: float = 0.03
    conf_scale: float = 200
    dog_target_prob: float = 0.55


@dataclass(frozen=True)
class PickConfig:
    """Immutable configuration bundle for one pick-engine run.

    Attributes:
        market_weight: Share of the blended probability taken from the
            de-vigged market; the rest comes from the stats signal.
    """

    market_weight: float = 0.62
    stats_defaults: StatsDefaults = StatsDefaults()
    stats_bounds: StatsBounds = StatsBounds()
    stat_weights: StatWeights = StatWeights()
    siggy: SiggyConfig = SiggyConfig()
    puckline: PucklineConfig = PucklineConfig()

    @classmethod
    def default(cls) -> PickConfig:
        """Return the canonical default configuration."""
        return cls()

    def validate(self) -> None:
        """Check the invariants the engine relies on.

        Raises:
            ValueError: If ``market_weight`` is outside ``[0, 1]``, any
                bound is non-finite or has ``min > max``, any stat weight
                is negative or non-finite, or
                ``puckline.min_confidence`` is outside ``[0, 100]``.
        """
        if not (0.0 <= self.market_weight <= 1.0):
            raise ValueError(
                f"market_weight must be in [0, 1], got {self.market_weight!r}."
            )
        for f in fields(self.stats_bounds):
            bounds: Bounds = getattr(self.stats_bounds, f.name)
            if not (math.isfinite(bounds.min) and math.isfinite(bounds.max)):
                raise ValueError(f"stats_bounds.{f.name} must be finite, got {bounds!r}.")
            if bounds.min > bounds.max:
                raise ValueError(
                    f"stats_bounds.{f.name}: min {bounds.min!r} > max {bounds.max!r}."
                )
        for f in fields(self.stat_weights):
            weight = getattr(self.stat_weights, f.name)
            if not math.isfinite(weight) or weight < 0:
                raise ValueError(f"stat_weights.{f.name} must be finite and non-negative.")
        if not (0 <= self.puckline.min_confidence <= 100):
            raise ValueError(
                "puckline.min_confidence must be in [0, 100], "
                f"got {self.puckline.min_confidence!r}."
            )


def merge_config(base: _C, overrides: Mapping[str, Any]) -> _C:
    """Return ``base`` with ``overrides`` applied field by field.

    Nested dataclass sections are merged recursively; a leaf value in
    ``overrides`` replaces the corresponding field, and omitted fields keep
    their value from ``base``.  ``base`` is never modified.

    Args:
        base: A frozen config dataclass (any level of :class:`PickConfig`).
        overrides: Mapping of snake_case field names to replacement values
            or nested mappings.

    Raises:
        ValueError: On an unknown field name, or when a nested section is
            given something other than a mapping.
    """
    known = {f.name for f in fields(base)}
    changes: dict[str, Any] = {}
    for name, value in overrides.items():
        if name not in known:
            raise ValueError(f"Unknown config field {name!r} for {type(base).__name__}.")
        current = getattr(base, name)
        if is_dataclass(current):
            if not isinstance(value, Mapping):
                raise ValueError(
                    f"Config section {name!r} must be a mapping, got {type(value).__name__}."
                )
            changes[name] = merge_config(current, value)
        else:
            changes[name] = value
    return replace(base, **changes)
