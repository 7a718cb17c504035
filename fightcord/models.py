from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class FormChoice(str, Enum):
    """Closed set of form labels; the value is the label shown to users."""

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_label(cls, label: str) -> "FormChoice":
        try:
            return cls(label)
        except ValueError as exc:
            allowed = ", ".join(cls.labels())
            raise ValueError(f"Unknown {cls.__name__} '{label}'. Expected one of: {allowed}.") from exc


class Gender(FormChoice):
    MALE = "Male"
    FEMALE = "Female"


class Athletic(FormChoice):
    YES = "Yes"
    NO = "No"


class FightExperience(FormChoice):
    NONE = "None"
    ONE = "One"
    TWO_TO_FOUR = "2 to 4"
    FIVE_PLUS = "5+ Fights"


class Personality(FormChoice):
    LAID_BACK = "Laid back/Chill"
    PACIFIST = "Pacifist/Non-confrontational"
    AGGRESSIVE = "Aggressive/Outspoken"


class Discipline(FormChoice):
    BOXING = "Boxing"
    WRESTLING = "Wrestling"
    MMA = "MMA"


def _disciplines(values: Iterable[Discipline | str] | None) -> frozenset[Discipline]:
    if not values:
        return frozenset()
    return frozenset(
        value if isinstance(value, Discipline) else Discipline.from_label(str(value))
        for value in values
    )


@dataclass(frozen=True)
class FighterProfile:
    height: str
    weight: str
    age: str
    gender: Gender
    athletic: Athletic
    fight_experience: FightExperience
    personality: Personality
    fighting_disciplines: frozenset[Discipline] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of disciplines but always store a frozenset.
        object.__setattr__(self, "fighting_disciplines", _disciplines(self.fighting_disciplines))

    def has_discipline(self, discipline: Discipline) -> bool:
        return discipline in self.fighting_disciplines

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "weight": self.weight,
            "age": self.age,
            "gender": self.gender.value,
            "athletic": self.athletic.value,
            "fightExperience": self.fight_experience.value,
            "personality": self.personality.value,
            "fightingDisciplines": [
                discipline.value for discipline in Discipline if discipline in self.fighting_disciplines
            ],
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "FighterProfile":
        return cls(
            height=str(payload["height"]),
            weight=str(payload["weight"]),
            age=str(payload["age"]),
            gender=Gender.from_label(str(payload["gender"])),
            athletic=Athletic.from_label(str(payload["athletic"])),
            fight_experience=FightExperience.from_label(str(payload["fightExperience"])),
            personality=Personality.from_label(str(payload["personality"])),
            fighting_disciplines=_disciplines(payload.get("fightingDisciplines")),
        )


STAT_LABELS: dict[str, str] = {
    "strength": "Strength",
    "speed": "Speed",
    "technique": "Technique",
    "experience": "Experience",
    "endurance": "Endurance",
    "agility": "Agility",
    "power": "Power",
    "mental_toughness": "Mental Toughness",
}
"""Display labels for the eight bounded scores, in chart order."""


@dataclass(frozen=True)
class FighterStats:
    strength: float
    speed: float
    technique: float
    experience: float
    endurance: float
    agility: float
    power: float
    mental_toughness: float
    bmi: float

    def score_items(self) -> list[tuple[str, float]]:
        """Return ``(label, value)`` for the eight scores, excluding BMI."""
        return [(label, float(getattr(self, key))) for key, label in STAT_LABELS.items()]

    def total(self) -> float:
        """Sum every field, BMI included."""
        return (
            self.strength
            + self.speed
            + self.technique
            + self.experience
            + self.endurance
            + self.agility
            + self.power
            + self.mental_toughness
            + self.bmi
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "strength": self.strength,
            "speed": self.speed,
            "technique": self.technique,
            "experience": self.experience,
            "endurance": self.endurance,
            "agility": self.agility,
            "power": self.power,
            "mentalToughness": self.mental_toughness,
            "bmi": self.bmi,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "FighterStats":
        return cls(
            strength=float(payload["strength"]),
            speed=float(payload["speed"]),
            technique=float(payload["technique"]),
            experience=float(payload["experience"]),
            endurance=float(payload["endurance"]),
            agility=float(payload["agility"]),
            power=float(payload["power"]),
            mental_toughness=float(payload["mentalToughness"]),
            bmi=float(payload["bmi"]),
        )
