"""Aggregation of dimension scores into an overall score and classifications."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple, TypeVar

from .models import ScoreDimension, SkillLevel, Tier

_T = TypeVar("_T")

# Inclusive lower bounds, evaluated from the top down.
SKILL_LEVEL_THRESHOLDS: Tuple[Tuple[float, SkillLevel], ...] = (
    (85, SkillLevel.EXPERT),
    (70, SkillLevel.ADVANCED),
    (50, SkillLevel.INTERMEDIATE),
)
TIER_THRESHOLDS: Tuple[Tuple[float, Tier], ...] = (
    (90, Tier.PLATINUM),
    (75, Tier.GOLD),
    (60, Tier.SILVER),
)
SCORE_DESCRIPTIONS: Tuple[Tuple[float, str], ...] = (
    (90, "Exceptional quality"),
    (75, "Strong performance"),
    (60, "Good foundation"),
    (40, "Room for improvement"),
)


def total_score(dimensions: Iterable[ScoreDimension]) -> Tuple[int, int]:
    """Return ``(overall_score, max_score)`` summed across dimensions."""
    overall = 0
    maximum = 0
    for dimension in dimensions:
        overall += dimension.score
        maximum += dimension.max_score
    return overall, maximum


def percentage(score: int, max_score: int) -> float:
    if max_score <= 0:
        return 0.0
    return score / max_score * 100


def _classify(value: float, thresholds: Sequence[Tuple[float, _T]], default: _T) -> _T:
    for bound, label in thresholds:
        if value >= bound:
            return label
    return default


def skill_level_for(pct: float) -> SkillLevel:
    return _classify(pct, SKILL_LEVEL_THRESHOLDS, SkillLevel.BEGINNER)


def tier_for(pct: float) -> Tier:
    return _classify(pct, TIER_THRESHOLDS, Tier.BRONZE)


def score_description(pct: float) -> str:
    """Short human label for an overall percentage, used by reports."""
    return _classify(pct, SCORE_DESCRIPTIONS, "Needs significant work")


__all__ = [
    "percentage",
    "score_description",
    "skill_level_for",
    "tier_for",
    "total_score",
]
