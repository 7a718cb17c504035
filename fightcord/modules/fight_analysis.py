"""Side-by-side fight analysis.

Derives stats for both fighters, reduces them to a verdict, and exposes
the rows the front ends render as stat lists and comparison charts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fightcord.models import STAT_LABELS, FighterProfile, FighterStats
from fightcord.modules.stat_engine import derive_stats
from fightcord.modules.verdict_engine import compare_and_verdict, headline_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FightAnalysis:
    user_stats: FighterStats
    opponent_stats: FighterStats
    verdict: str

    @property
    def user_score(self) -> float:
        return self.user_stats.total()

    @property
    def opponent_score(self) -> float:
        return self.opponent_stats.total()

    @property
    def score_difference(self) -> float:
        return self.user_score - self.opponent_score

    @property
    def headline(self) -> str:
        return headline_for(self.verdict)

    def comparison_rows(self) -> list[tuple[str, float, float]]:
        """Return ``(label, user_value, opponent_value)`` for each chart axis."""
        return [
            (label, float(getattr(self.user_stats, key)), float(getattr(self.opponent_stats, key)))
            for key, label in STAT_LABELS.items()
        ]


def analyze_fight(user: FighterProfile, opponent: FighterProfile) -> FightAnalysis:
    user_stats = derive_stats(user)
    opponent_stats = derive_stats(opponent)
    analysis = FightAnalysis(
        user_stats=user_stats,
        opponent_stats=opponent_stats,
        verdict=compare_and_verdict(user_stats, opponent_stats),
    )
    logger.info(
        "Fight analysed: you %.2f vs opponent %.2f -> %s",
        analysis.user_score,
        analysis.opponent_score,
        analysis.verdict,
    )
    return analysis


def format_stat_name(key: str) -> str:
    """Capitalise a ``to_dict`` key the way the stat lists display it."""
    return key[:1].upper() + key[1:]


def format_stat_value(value: float) -> str:
    return f"{value:.1f}"


def stat_lines(stats: FighterStats) -> list[str]:
    """Render every stat, BMI included, as ``Name: value`` lines."""
    return [
        f"{format_stat_name(key)}: {format_stat_value(value)}"
        for key, value in stats.to_dict().items()
    ]
