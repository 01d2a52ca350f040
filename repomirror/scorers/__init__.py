"""Dimension scorer implementations and the fixed scorer table."""

from __future__ import annotations

from typing import Callable, Dict, List

from .base import Scorer, ScoringContext
from .code_quality import CodeQualityScorer
from .documentation import DocumentationScorer
from .practices import DevelopmentPracticesScorer
from .project_structure import ProjectStructureScorer
from .relevance import RealWorldRelevanceScorer
from .testing import TestingScorer

# Insertion order is the reporting order of the dimensions.
SCORERS: Dict[str, Callable[[], Scorer]] = {
    "code_quality": CodeQualityScorer,
    "project_structure": ProjectStructureScorer,
    "documentation": DocumentationScorer,
    "testing": TestingScorer,
    "real_world_relevance": RealWorldRelevanceScorer,
    "development_practices": DevelopmentPracticesScorer,
}

DIMENSION_NAMES = tuple(SCORERS)


def build_scorers() -> List[Scorer]:
    """Return one instance of every scorer in reporting order."""
    scorers: List[Scorer] = []
    for name, factory in SCORERS.items():
        instance = factory()
        if instance.name != name:
            raise TypeError(f"Scorer registered as '{name}' reports name '{instance.name}'")
        scorers.append(instance)
    return scorers


def get_scorer(name: str) -> Scorer:
    try:
        factory = SCORERS[name]
    except KeyError as exc:
        known = ", ".join(DIMENSION_NAMES)
        raise ValueError(f"Unknown dimension '{name}'. Expected one of: {known}") from exc
    return factory()


__all__ = [
    "CodeQualityScorer",
    "DIMENSION_NAMES",
    "DevelopmentPracticesScorer",
    "DocumentationScorer",
    "ProjectStructureScorer",
    "RealWorldRelevanceScorer",
    "SCORERS",
    "Scorer",
    "ScoringContext",
    "TestingScorer",
    "build_scorers",
    "get_scorer",
]
