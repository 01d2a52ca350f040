"""Base classes for dimension scorers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List

from ..models import CommitHistory, RepositoryMetadata, ScoreDimension
from ..timeutils import days_since


@dataclass(frozen=True)
class ScoringContext:
    """Inputs shared by every scorer during one analysis run."""

    metadata: RepositoryMetadata
    history: CommitHistory
    now: datetime

    def days_since(self, timestamp: datetime) -> int:
        return days_since(timestamp, self.now)


class Scorer(ABC):
    """Contract for scorers that evaluate one quality dimension."""

    name: str
    title: str
    max_score: int

    @abstractmethod
    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        """Append feedback lines in evaluation order and return the raw score."""

    def score(self, context: ScoringContext) -> ScoreDimension:
        feedback: List[str] = []
        raw = self.evaluate(context, feedback)
        return ScoreDimension(
            name=self.name,
            title=self.title,
            score=max(0, min(raw, self.max_score)),
            max_score=self.max_score,
            feedback=tuple(feedback),
        )
