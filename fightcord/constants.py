"""Shared scoring constants.

Centralises the formula coefficients referenced by the stat and BMI
engines so they have a single source of truth.  Lookup tables that map
form choices to numbers live in ``rules/score_model.json`` instead.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Stat boundaries
# ---------------------------------------------------------------------------
MIN_STAT: float = 0.0
"""Lower bound enforced on strength, speed and endurance."""

MAX_STAT: float = 100.0
"""Upper bound applied to every score once bonuses are added."""

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
INCHES_PER_FOOT: int = 12
METERS_PER_INCH: float = 0.0254
KG_PER_POUND: float = 0.453592

BMI_DECIMALS: int = 2
"""BMI is reported rounded to this many decimals and never clamped."""

# ---------------------------------------------------------------------------
# Body-composition formulas
# ---------------------------------------------------------------------------
STRENGTH_PER_POUND: float = 0.4

PRIME_AGE: int = 20
"""Age at which speed and endurance start to decline."""

SPEED_DECLINE_PER_YEAR: float = 1.5
ENDURANCE_DECLINE_PER_YEAR: float = 1.0

BMI_PENALTY_THRESHOLD: float = 25.0
"""BMI above this value penalises strength and speed."""

BMI_PENALTY_PER_POINT: float = 2.0
SPEED_PENALTY_MULTIPLIER: float = 1.5

# ---------------------------------------------------------------------------
# Form input
# ---------------------------------------------------------------------------
AGE_RANGE: tuple[int, int] = (5, 99)
"""Suggested age bounds offered by the form widgets (not enforced)."""

DEFAULT_HEIGHT: str = "5'10"
"""Placeholder height shown by the form front ends."""
