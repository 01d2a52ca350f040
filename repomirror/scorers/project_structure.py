"""Project structure scorer."""

from __future__ import annotations

from typing import List

from .base import Scorer, ScoringContext
from ..textutils import text_length


class ProjectStructureScorer(Scorer):
    """Rates the description, enabled collaboration features, and community reach."""

    name = "project_structure"
    title = "Project Structure"
    max_score = 15

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        metadata = context.metadata
        score = 0

        description = metadata.description
        if description and text_length(description) > 20:
            score += 4
            feedback.append("✓ Clear and descriptive project description")
        elif description:
            score += 2
            feedback.append("⚠ Project description is too brief")
        else:
            feedback.append("✗ Missing project description - add one to explain the purpose")

        if metadata.has_issues:
            score += 3
            feedback.append("✓ Issues enabled for bug tracking and feature requests")
        if metadata.has_wiki:
            score += 2
            feedback.append("✓ Wiki enabled for extended documentation")
        if metadata.has_projects:
            score += 2
            feedback.append("✓ Projects enabled for task management")

        if metadata.stars > 10:
            score += 2
            feedback.append(f"✓ {metadata.stars} stars - community interest demonstrated")
        elif metadata.stars > 0:
            score += 1
            feedback.append(f"⚠ {metadata.stars} stars - limited community engagement")
        else:
            feedback.append("✗ No stars - consider promoting the project")

        if metadata.forks > 0:
            score += 2
            feedback.append(f"✓ {metadata.forks} forks - code is being reused")
        else:
            feedback.append("⚠ No forks yet")

        return score
