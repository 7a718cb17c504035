"""Fighter stat derivation.

Turns a ``FighterProfile`` into a ``FighterStats`` block.  Base stats are
computed first, discipline bonuses are stacked on top, and a single
``MAX_STAT`` cap is applied at the very end.  Agility and power are taken
from the pre-bonus technique/strength/speed values and are not
recomputed after bonuses.  Lookup tables come from
``rules/score_model.json``.
"""

from __future__ import annotations

import logging

from fightcord.constants import (
    BMI_DECIMALS,
    BMI_PENALTY_PER_POINT,
    BMI_PENALTY_THRESHOLD,
    ENDURANCE_DECLINE_PER_YEAR,
    MAX_STAT,
    MIN_STAT,
    PRIME_AGE,
    SPEED_DECLINE_PER_YEAR,
    SPEED_PENALTY_MULTIPLIER,
    STRENGTH_PER_POUND,
)
from fightcord.models import Discipline, FighterProfile, FighterStats, FightExperience, Personality
from fightcord.modules.body_metrics import compute_bmi
from fightcord.rules_registry import load_rule_set, rule_entry
from fightcord.utils import cap, floor, parse_leading_int, round_half_up

logger = logging.getLogger(__name__)

_BONUS_STATS = ("strength", "technique", "endurance", "agility", "power")


def experience_level(fight_experience: FightExperience) -> float:
    """Return the shared technique/experience base for a fight-count bucket."""
    return float(rule_entry("score_model", "fight_experience_levels", fight_experience.value))


def personality_toughness(personality: Personality) -> float:
    return float(rule_entry("score_model", "personality_toughness", personality.value))


def discipline_bonuses(disciplines: frozenset[Discipline]) -> dict[str, float]:
    """Sum the configured bonuses for every discipline in *disciplines*.

    Bonuses from different disciplines stack; the result only holds stats
    that received at least one bonus.
    """
    totals: dict[str, float] = {}
    for discipline in Discipline:
        if discipline not in disciplines:
            continue
        bonuses = rule_entry("score_model", "discipline_bonuses", discipline.value)
        for stat_name, bonus in bonuses.items():
            if stat_name not in _BONUS_STATS:
                raise ValueError(f"Discipline bonus targets unknown stat: {stat_name}")
            totals[stat_name] = totals.get(stat_name, 0.0) + float(bonus)
    return totals


def derive_stats(profile: FighterProfile) -> FighterStats:
    """Derive the eight capped scores and BMI for *profile*.

    Malformed numeric fields propagate as ``nan`` through every step
    instead of raising.
    """
    rules = load_rule_set("score_model")
    bmi = compute_bmi(profile.height, profile.weight)
    weight = parse_leading_int(profile.weight)
    age = parse_leading_int(profile.age)

    strength = cap(weight * STRENGTH_PER_POUND, MAX_STAT)
    speed = floor(MAX_STAT - (age - PRIME_AGE) * SPEED_DECLINE_PER_YEAR, MIN_STAT)

    if bmi > BMI_PENALTY_THRESHOLD:
        penalty = (bmi - BMI_PENALTY_THRESHOLD) * BMI_PENALTY_PER_POINT
        strength = floor(strength - penalty, MIN_STAT)
        speed = floor(speed - penalty * SPEED_PENALTY_MULTIPLIER, MIN_STAT)

    technique = experience_level(profile.fight_experience)
    experience = technique

    endurance = floor(MAX_STAT - (age - PRIME_AGE) * ENDURANCE_DECLINE_PER_YEAR, MIN_STAT)
    agility = (speed + technique) / 2
    power = (strength + speed) / 2

    mental_toughness = personality_toughness(profile.personality)
    mental_toughness += experience * float(rules["experience_toughness_factor"])

    bonuses = discipline_bonuses(profile.fighting_disciplines)
    strength += bonuses.get("strength", 0.0)
    technique += bonuses.get("technique", 0.0)
    endurance += bonuses.get("endurance", 0.0)
    agility += bonuses.get("agility", 0.0)
    power += bonuses.get("power", 0.0)

    stats = FighterStats(
        strength=cap(strength, MAX_STAT),
        speed=cap(speed, MAX_STAT),
        technique=cap(technique, MAX_STAT),
        experience=cap(experience, MAX_STAT),
        endurance=cap(endurance, MAX_STAT),
        agility=cap(agility, MAX_STAT),
        power=cap(power, MAX_STAT),
        mental_toughness=cap(mental_toughness, MAX_STAT),
        bmi=round_half_up(bmi, BMI_DECIMALS),
    )
    logger.debug("Derived stats %s from profile %s", stats.to_dict(), profile.to_dict())
    return stats
