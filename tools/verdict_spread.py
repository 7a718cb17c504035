#!/usr/bin/env python3
"""Verdict spread simulation for scoring calibration.

Builds seeded random profile pairs across the full range of form inputs
and reports how often each verdict comes up.  A healthy model spreads
matchups over every band instead of collapsing into one or two.
"""

from __future__ import annotations

import argparse
import random
import statistics
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path


def _bootstrap_project_path() -> None:
    root = Path(__file__).resolve().parents[1]
    candidate = str(root)
    if candidate not in sys.path:
        sys.path.insert(0, candidate)


_bootstrap_project_path()

from fightcord.constants import AGE_RANGE
from fightcord.models import (
    Athletic,
    Discipline,
    FighterProfile,
    FightExperience,
    Gender,
    Personality,
)
from fightcord.modules.fight_analysis import analyze_fight
from fightcord.modules.verdict_engine import fallback_verdict, verdict_bands


@dataclass(frozen=True)
class MatchupSample:
    verdict: str
    score_difference: float
    user_bmi: float
    opponent_bmi: float


def random_profile(rng: random.Random) -> FighterProfile:
    return FighterProfile(
        height=f"{rng.randint(4, 6)}'{rng.randint(0, 11)}",
        weight=str(rng.randint(95, 300)),
        age=str(rng.randint(16, 60)),
        gender=rng.choice(list(Gender)),
        athletic=rng.choice(list(Athletic)),
        fight_experience=rng.choice(list(FightExperience)),
        personality=rng.choice(list(Personality)),
        fighting_disciplines=frozenset(
            discipline for discipline in Discipline if rng.random() < 0.3
        ),
    )


def simulate_matchup(seed: int) -> MatchupSample:
    rng = random.Random(seed)
    analysis = analyze_fight(random_profile(rng), random_profile(rng))
    return MatchupSample(
        verdict=analysis.verdict,
        score_difference=analysis.score_difference,
        user_bmi=analysis.user_stats.bmi,
        opponent_bmi=analysis.opponent_stats.bmi,
    )


def summarize(samples: list[MatchupSample]) -> dict[str, object]:
    differences = [sample.score_difference for sample in samples]
    bmis = [sample.user_bmi for sample in samples] + [sample.opponent_bmi for sample in samples]
    return {
        "runs": len(samples),
        "verdicts": Counter(sample.verdict for sample in samples),
        "difference_mean": statistics.fmean(differences),
        "difference_stdev": statistics.pstdev(differences),
        "bmi_max": max(bmis),
    }


def _print_report(report: dict[str, object]) -> None:
    runs = int(report["runs"])
    verdicts: Counter[str] = report["verdicts"]  # type: ignore[assignment]
    print(f"\n== Verdict spread over {runs} matchups ==")
    ordered = [band.verdict for band in verdict_bands()] + [fallback_verdict()]
    for verdict in ordered:
        count = verdicts.get(verdict, 0)
        print(f"  {verdict:<45} {count:>6} ({count / runs:.1%})")
    print(
        "Score difference "
        f"mean {report['difference_mean']:+.2f} "
        f"(stdev {report['difference_stdev']:.2f})"
    )
    print(f"Highest BMI seen: {report['bmi_max']:.2f}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run random matchup verdict simulations.")
    parser.add_argument(
        "--runs",
        type=int,
        default=1000,
        help="Number of deterministic seeds to run (default: 1000).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.runs < 10:
        raise SystemExit("--runs must be >= 10")

    samples = [simulate_matchup(seed) for seed in range(args.runs)]
    print(
        "Random matchup simulation across the form input space.\n"
        f"Ages {AGE_RANGE[0]}-{AGE_RANGE[1]} allowed by the form; sampled 16-60."
    )
    _print_report(summarize(samples))


if __name__ == "__main__":
    main()
