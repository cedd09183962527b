"""Core mathematics and configuration for the Siggy's Picks engine.

This package contains pure building blocks:

- ``odds_math``     — moneyline → probability, de-vig, clamping/rounding
- ``pick_config``   — tunable constants, defaults and field-wise merge
- ``pick_types``    — DTOs flowing into and out of the pick engine
- ``stat_strength`` — per-team [0, 1] strength score from season stats

Nothing in this package imports from ``backend.services`` or ``backend.schemas``.
All modules are side-effect-free and unit-testable in isolation.
"""
