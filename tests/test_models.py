from dataclasses import FrozenInstanceError

import pytest

from fightcord.models import (
    Discipline,
    FighterProfile,
    FighterStats,
    FightExperience,
    Gender,
    Personality,
)


def _payload() -> dict[str, object]:
    return {
        "height": "6'1",
        "weight": "190",
        "age": "31",
        "gender": "Male",
        "athletic": "No",
        "fightExperience": "One",
        "personality": "Pacifist/Non-confrontational",
        "fightingDisciplines": ["Wrestling", "Boxing"],
    }


def test_profile_from_dict_reads_form_payload() -> None:
    profile = FighterProfile.from_dict(_payload())

    assert profile.gender is Gender.MALE
    assert profile.fight_experience is FightExperience.ONE
    assert profile.personality is Personality.PACIFIST
    assert profile.has_discipline(Discipline.WRESTLING)
    assert not profile.has_discipline(Discipline.MMA)
    # Disciplines serialise in canonical order regardless of input order.
    assert profile.to_dict()["fightingDisciplines"] == ["Boxing", "Wrestling"]


def test_profile_from_dict_accepts_missing_disciplines() -> None:
    payload = _payload()
    payload.pop("fightingDisciplines")

    assert FighterProfile.from_dict(payload).fighting_disciplines == frozenset()

    payload["fightingDisciplines"] = None
    assert FighterProfile.from_dict(payload).fighting_disciplines == frozenset()


def test_profile_from_dict_rejects_unknown_labels() -> None:
    payload = _payload()
    payload["gender"] = "Robot"

    with pytest.raises(ValueError, match="Expected one of: Male, Female"):
        FighterProfile.from_dict(payload)


def test_profile_is_immutable() -> None:
    profile = FighterProfile.from_dict(_payload())

    with pytest.raises(FrozenInstanceError):
        profile.age = "40"  # type: ignore[misc]


def test_stats_total_includes_bmi() -> None:
    stats = FighterStats(
        strength=10.0,
        speed=20.0,
        technique=30.0,
        experience=30.0,
        endurance=40.0,
        agility=25.0,
        power=15.0,
        mental_toughness=66.0,
        bmi=22.5,
    )

    assert stats.total() == pytest.approx(258.5)
    assert list(stats.to_dict())[-2:] == ["mentalToughness", "bmi"]
    assert [label for label, _ in stats.score_items()][-1] == "Mental Toughness"
    assert len(stats.score_items()) == 8
