import pytest

from fightcord.models import Athletic, Discipline, FightExperience, Gender, Personality
from fightcord.modules.fighter_form import ProfileValidationError, build_profile, validate_disciplines


def _fields(**overrides: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "height": "5'10",
        "weight": "170",
        "age": "25",
        "gender": "Female",
        "athletic": "Yes",
        "fight_experience": "2 to 4",
        "personality": "Aggressive/Outspoken",
    }
    fields.update(overrides)
    return fields


def test_build_profile_maps_labels_to_choices() -> None:
    profile = build_profile(**_fields(height=" 5'10 ", fighting_disciplines=["MMA", "Boxing"]))

    assert profile.height == "5'10"
    assert profile.gender is Gender.FEMALE
    assert profile.athletic is Athletic.YES
    assert profile.fight_experience is FightExperience.TWO_TO_FOUR
    assert profile.personality is Personality.AGGRESSIVE
    assert profile.fighting_disciplines == frozenset({Discipline.MMA, Discipline.BOXING})


@pytest.mark.parametrize(
    ("field", "message"),
    [("height", "Height is required"), ("weight", "Weight is required"), ("age", "Age is required")],
)
def test_build_profile_requires_measurements(field: str, message: str) -> None:
    with pytest.raises(ProfileValidationError, match=message):
        build_profile(**_fields(**{field: "   "}))


def test_build_profile_rejects_unknown_choice() -> None:
    with pytest.raises(ProfileValidationError, match="Personality must be one of"):
        build_profile(**_fields(personality="Grumpy"))


def test_build_profile_requires_choice_fields() -> None:
    with pytest.raises(ProfileValidationError, match="Gender is required"):
        build_profile(**_fields(gender=None))


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        build_profile(**_fields(fight_experience="Dozens"))


def test_disciplines_are_optional_and_deduplicated() -> None:
    assert build_profile(**_fields()).fighting_disciplines == frozenset()
    assert validate_disciplines(None) == frozenset()
    assert validate_disciplines(["Boxing", "Boxing", "Wrestling"]) == frozenset(
        {Discipline.BOXING, Discipline.WRESTLING}
    )


def test_unknown_discipline_is_rejected() -> None:
    with pytest.raises(ProfileValidationError, match="Fighting discipline must be one of"):
        validate_disciplines(["Karate"])


def test_numeric_ranges_are_not_checked() -> None:
    profile = build_profile(**_fields(weight="-40", age="150"))

    assert profile.weight == "-40"
    assert profile.age == "150"
