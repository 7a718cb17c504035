"""Comparative fight verdict.

Reduces two ``FighterStats`` blocks to a single verdict string.  Each
side's score is the plain sum of all nine stat fields; BMI is included
unclamped, so an extreme BMI can swing the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fightcord.models import FighterStats
from fightcord.rules_registry import load_rule_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerdictBand:
    """A verdict selected when the score difference exceeds ``min_exclusive``.

    ``headline_prefix`` overrides the rule set's shared prefix for this band.
    """

    min_exclusive: float
    verdict: str
    headline_prefix: str | None = None


def verdict_bands() -> list[VerdictBand]:
    """Return the configured bands ordered from highest threshold to lowest."""
    payload = load_rule_set("score_model")
    bands = [
        VerdictBand(
            min_exclusive=float(raw["min_exclusive"]),
            verdict=str(raw["verdict"]),
            headline_prefix=raw.get("headline_prefix"),
        )
        for raw in payload["verdict_bands"]
    ]
    return sorted(bands, key=lambda band: band.min_exclusive, reverse=True)


def fallback_verdict() -> str:
    return str(load_rule_set("score_model")["fallback_verdict"])


def headline_for(verdict: str) -> str:
    """Prefix *verdict* with its band's headline text, or the shared one."""
    prefix = str(load_rule_set("score_model")["headline_prefix"])
    for band in verdict_bands():
        if band.verdict == verdict and band.headline_prefix is not None:
            prefix = band.headline_prefix
            break
    return f"{prefix}{verdict}"


def score_difference(user_stats: FighterStats, opponent_stats: FighterStats) -> float:
    return user_stats.total() - opponent_stats.total()


def verdict_for_difference(difference: float) -> str:
    """Pick the first band whose threshold *difference* strictly exceeds.

    Differences at or below every threshold, including ``nan``, get the
    fallback verdict.
    """
    for band in verdict_bands():
        if difference > band.min_exclusive:
            return band.verdict
    return fallback_verdict()


def compare_and_verdict(user_stats: FighterStats, opponent_stats: FighterStats) -> str:
    difference = score_difference(user_stats, opponent_stats)
    verdict = verdict_for_difference(difference)
    logger.debug("Score difference %.2f -> %s", difference, verdict)
    return verdict
