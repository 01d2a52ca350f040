"""Development practices scorer."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .base import Scorer, ScoringContext
from ..models import Commit
from ..timeutils import ensure_aware

STANDARD_BRANCHES = ("main", "master")

_MIN_CADENCE_SAMPLE = 5
_CADENCE_WINDOW = 10
_SECONDS_PER_DAY = 24 * 60 * 60


def average_commit_gap_days(commits: Sequence[Commit]) -> Optional[float]:
    """Average gap in days across the newest ``_CADENCE_WINDOW`` commits.

    Returns None when the sample is too small to judge cadence.
    """
    if len(commits) < _MIN_CADENCE_SAMPLE:
        return None
    timestamps = [ensure_aware(commit.authored_at) for commit in commits[:_CADENCE_WINDOW]]
    gaps = [
        (newer - older).total_seconds()
        for newer, older in zip(timestamps, timestamps[1:])
    ]
    return sum(gaps) / len(gaps) / _SECONDS_PER_DAY


class DevelopmentPracticesScorer(Scorer):
    """Rates commit volume, cadence, branch conventions, and upkeep."""

    name = "development_practices"
    title = "Development Practices"
    max_score = 15

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        metadata = context.metadata
        history = context.history
        score = 0

        if history.total_count > 50:
            score += 5
            feedback.append("✓ Strong commit history (50+ commits)")
        elif history.total_count > 10:
            score += 3
            feedback.append("⚠ Moderate commit history")
        elif history.total_count > 0:
            score += 1
            feedback.append("✗ Limited commit history - needs more development")

        gap_days = average_commit_gap_days(history.commits)
        if gap_days is not None:
            if gap_days < 14:
                score += 3
                feedback.append("✓ Regular commit cadence (commits every 2 weeks or less)")
            elif gap_days < 30:
                score += 2
                feedback.append("⚠ Irregular commit pattern")
            else:
                score += 1
                feedback.append(
                    "✗ Infrequent commits - establish a regular development schedule"
                )

        if metadata.default_branch in STANDARD_BRANCHES:
            score += 2
            feedback.append(f"✓ Standard default branch name: {metadata.default_branch}")

        repository_age = context.days_since(metadata.created_at)
        update_age = context.days_since(metadata.updated_at)
        if update_age < repository_age * 0.1:
            score += 3
            feedback.append("✓ Actively maintained throughout its lifetime")
        elif update_age < repository_age * 0.5:
            score += 2
            feedback.append("⚠ Some periods of inactivity")
        else:
            feedback.append("✗ Long periods without updates")

        if metadata.license is not None:
            score += 2
            feedback.append("✓ Proper licensing encourages collaboration")
        else:
            feedback.append("✗ Add a license for legal clarity")

        return score
