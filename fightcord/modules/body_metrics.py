"""Height parsing and body-mass index.

Heights come from the form as ``feet'inches`` strings (``5'10``).  No
validation happens here: unparseable feet or weight produce ``nan``
rather than an error, and a zero height divides the IEEE way.
"""

from __future__ import annotations

import math

from fightcord.constants import INCHES_PER_FOOT, KG_PER_POUND, METERS_PER_INCH
from fightcord.utils import parse_number, safe_divide


def parse_height(height: str) -> tuple[float, float]:
    """Split ``feet'inches`` into ``(feet, inches)``.

    Missing or non-numeric inches count as ``0`` (``5'`` and ``5'10"``
    both keep their feet).  Non-numeric feet give ``nan``.
    """
    parts = str(height).split("'")
    feet = parse_number(parts[0])
    inches = parse_number(parts[1]) if len(parts) > 1 else 0.0
    if math.isnan(inches):
        inches = 0.0
    return feet, inches


def height_in_inches(height: str) -> float:
    feet, inches = parse_height(height)
    return feet * INCHES_PER_FOOT + inches


def compute_bmi(height: str, weight: str) -> float:
    """Return the unrounded BMI for a ``feet'inches`` height and pound weight."""
    height_m = height_in_inches(height) * METERS_PER_INCH
    weight_kg = parse_number(weight) * KG_PER_POUND
    return safe_divide(weight_kg, height_m * height_m)
