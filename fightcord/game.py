from __future__ import annotations

import argparse
import logging
import math

from fightcord.constants import AGE_RANGE, DEFAULT_HEIGHT
from fightcord.models import (
    Athletic,
    Discipline,
    FighterProfile,
    FightExperience,
    FormChoice,
    Gender,
    Personality,
)
from fightcord.modules.fight_analysis import FightAnalysis, analyze_fight, format_stat_value, stat_lines
from fightcord.modules.fighter_form import ProfileValidationError, build_profile
from fightcord.utils import parse_number

logger = logging.getLogger(__name__)


def _prompt_non_empty(prompt: str) -> str:
    while True:
        value = input(prompt).strip()
        if value:
            return value
        print("Input cannot be empty.")


def _prompt_int(prompt: str, minimum: int, maximum: int) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print("Please enter a whole number.")
            continue

        if minimum <= value <= maximum:
            return value
        print(f"Value must be between {minimum} and {maximum}.")


def _prompt_number(prompt: str) -> str:
    while True:
        raw = _prompt_non_empty(prompt)
        if math.isfinite(parse_number(raw)):
            return raw
        print("Please enter a number.")


def _prompt_choice(prompt: str, choice_type: type[FormChoice]) -> str:
    labels = choice_type.labels()
    print(prompt)
    for idx, label in enumerate(labels, start=1):
        print(f"{idx}. {label}")
    choice = _prompt_int("Choose option: ", 1, len(labels))
    return labels[choice - 1]


def _prompt_yes_no(prompt: str) -> bool:
    while True:
        answer = input(prompt).strip().lower()
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no", ""}:
            return False
        print("Please answer y or n.")


def _prompt_profile(title: str) -> FighterProfile:
    while True:
        print(f"\n{title}")
        height = _prompt_non_empty(f"Height (feet'inches, e.g. {DEFAULT_HEIGHT}): ")
        weight = _prompt_number("Weight (lbs): ")
        age = _prompt_int("Age: ", *AGE_RANGE)
        gender = _prompt_choice("Gender:", Gender)
        athletic = _prompt_choice("Are you athletic?", Athletic)
        fight_experience = _prompt_choice("How many fights have you been in?", FightExperience)
        personality = _prompt_choice("What is your overall personality type?", Personality)
        disciplines = [
            discipline.value
            for discipline in Discipline
            if _prompt_yes_no(f"Do you train {discipline.value}? (y/n): ")
        ]

        try:
            return build_profile(
                height=height,
                weight=weight,
                age=str(age),
                gender=gender,
                athletic=athletic,
                fight_experience=fight_experience,
                personality=personality,
                fighting_disciplines=disciplines,
            )
        except ProfileValidationError as exc:
            print(f"Invalid profile: {exc}")


def _render_analysis(analysis: FightAnalysis) -> None:
    print("\n== Fight Analysis ==")
    print(analysis.headline)

    print("\nYour Stats:")
    for line in stat_lines(analysis.user_stats):
        print(f"  - {line}")
    print("\nOpponent Stats:")
    for line in stat_lines(analysis.opponent_stats):
        print(f"  - {line}")

    print("\nComparison:")
    for label, user_value, opponent_value in analysis.comparison_rows():
        print(
            f"  {label:<17} You {format_stat_value(user_value):>6} | "
            f"Opponent {format_stat_value(opponent_value):>6}"
        )
    print(
        f"\nTotal Score: You {analysis.user_score:.2f} | "
        f"Opponent {analysis.opponent_score:.2f} | "
        f"Difference {analysis.score_difference:+.2f}"
    )


def _new_comparison() -> FightAnalysis:
    user = _prompt_profile("Enter Your Details")
    opponent = _prompt_profile("Enter Opponent's Details")
    analysis = analyze_fight(user, opponent)
    _render_analysis(analysis)
    return analysis


def run() -> None:
    while True:
        print("\n=== FightCord ===")
        print("1. New comparison")
        print("2. Quit")

        choice = _prompt_int("Choose option: ", 1, 2)

        if choice == 1:
            _new_comparison()
        elif choice == 2:
            print("Goodbye.")
            return


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare your fighting potential against an opponent.")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted by user")
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
