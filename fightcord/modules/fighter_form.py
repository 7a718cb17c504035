"""Fighter form validation.

Turns raw form fields into a ``FighterProfile``.  Only presence and the
closed choice fields are checked here; numeric ranges are left alone and
malformed numbers are handled downstream by the stat engine.
"""

from __future__ import annotations

from typing import Iterable

from fightcord.models import (
    Athletic,
    Discipline,
    FighterProfile,
    FightExperience,
    FormChoice,
    Gender,
    Personality,
)


class ProfileValidationError(ValueError):
    """Raised when submitted form fields cannot form a profile."""


def _required(value: object, label: str) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise ProfileValidationError(f"{label} is required.")
    return text


def _choice(choice_type: type[FormChoice], value: object, label: str) -> FormChoice:
    if isinstance(value, choice_type):
        return value
    text = "" if value is None else str(value).strip()
    if not text:
        raise ProfileValidationError(f"{label} is required.")
    try:
        return choice_type.from_label(text)
    except ValueError as exc:
        allowed = ", ".join(choice_type.labels())
        raise ProfileValidationError(f"{label} must be one of: {allowed}.") from exc


def validate_disciplines(values: Iterable[object] | None) -> frozenset[Discipline]:
    """Return the set of disciplines named by *values*, rejecting unknown ones."""
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(_choice(Discipline, value, "Fighting discipline") for value in values)


def build_profile(
    *,
    height: object,
    weight: object,
    age: object,
    gender: object,
    athletic: object,
    fight_experience: object,
    personality: object,
    fighting_disciplines: Iterable[object] | None = None,
) -> FighterProfile:
    """Validate raw form values and build an immutable profile.

    Raises ``ProfileValidationError`` naming the first invalid field.
    """
    return FighterProfile(
        height=_required(height, "Height"),
        weight=_required(weight, "Weight"),
        age=_required(age, "Age"),
        gender=_choice(Gender, gender, "Gender"),
        athletic=_choice(Athletic, athletic, "Athletic"),
        fight_experience=_choice(FightExperience, fight_experience, "Fight experience"),
        personality=_choice(Personality, personality, "Personality"),
        fighting_disciplines=validate_disciplines(fighting_disciplines),
    )
