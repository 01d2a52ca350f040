"""Code quality scorer based on languages, activity, commits, size, and licensing."""

from __future__ import annotations

from typing import List, Sequence

from .base import Scorer, ScoringContext
from ..models import Commit
from ..textutils import text_length

_LOW_EFFORT_PREFIX = "Update "
_MIN_MESSAGE_LENGTH = 10


def is_good_commit(message: str) -> bool:
    """Return True for descriptive messages that are not default web-editor titles."""
    return text_length(message) > _MIN_MESSAGE_LENGTH and not message.startswith(_LOW_EFFORT_PREFIX)


def good_commit_percentage(commits: Sequence[Commit]) -> float:
    if not commits:
        return 0.0
    good = sum(1 for commit in commits if is_good_commit(commit.message))
    return good / len(commits) * 100


class CodeQualityScorer(Scorer):
    """Scores signals that correlate with a healthy, maintained codebase."""

    name = "code_quality"
    title = "Code Quality"
    max_score = 20

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        metadata = context.metadata
        score = 0

        if metadata.language:
            score += 3
            feedback.append(f"✓ Primary language identified: {metadata.language}")
        else:
            feedback.append("✗ No primary programming language detected")

        language_count = len(metadata.languages)
        if language_count > 1:
            score += 2
            feedback.append(
                f"✓ Uses {language_count} programming languages, showing technical diversity"
            )

        days_since_update = context.days_since(metadata.updated_at)
        if days_since_update < 30:
            score += 5
            feedback.append("✓ Recently updated (within last 30 days)")
        elif days_since_update < 90:
            score += 3
            feedback.append("⚠ Updated within last 90 days")
        else:
            feedback.append("✗ No recent updates - repository may be abandoned")

        commits = context.history.commits
        if commits:
            quality = good_commit_percentage(commits)
            if quality > 70:
                score += 5
                feedback.append("✓ Good commit message quality (descriptive and meaningful)")
            elif quality > 40:
                score += 3
                feedback.append("⚠ Commit messages could be more descriptive")
            else:
                score += 1
                feedback.append("✗ Poor commit message quality - use meaningful descriptions")

        if metadata.size > 1000:
            score += 3
            feedback.append("✓ Substantial codebase size indicating significant development")
        elif metadata.size > 100:
            score += 2
            feedback.append("⚠ Moderate codebase size")
        else:
            feedback.append("✗ Small codebase - may lack comprehensive features")

        if metadata.license is not None:
            score += 2
            feedback.append(f"✓ Licensed under {metadata.license.name}")
        else:
            feedback.append("✗ No license file - important for open source projects")

        return score
