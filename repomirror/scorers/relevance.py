"""Real-world relevance scorer."""

from __future__ import annotations

from typing import List

from .base import Scorer, ScoringContext


class RealWorldRelevanceScorer(Scorer):
    """Rates adoption, push activity, issue backlog, and project maturity."""

    name = "real_world_relevance"
    title = "Real-World Relevance"
    max_score = 10

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        metadata = context.metadata
        score = 0

        if metadata.stars > 100:
            score += 4
            feedback.append("✓ Significant community interest (100+ stars)")
        elif metadata.stars > 10:
            score += 3
            feedback.append("⚠ Moderate community interest")
        elif metadata.stars > 0:
            score += 1
            feedback.append("⚠ Limited community adoption")
        else:
            feedback.append("✗ No community engagement yet")

        days_since_push = context.days_since(metadata.pushed_at)
        if days_since_push < 7:
            score += 3
            feedback.append("✓ Very recent activity (within 7 days)")
        elif days_since_push < 30:
            score += 2
            feedback.append("✓ Recent activity (within 30 days)")
        else:
            feedback.append("⚠ No recent commits - project may be stagnant")

        if metadata.open_issues == 0:
            score += 2
            feedback.append("✓ No open issues - well maintained")
        elif metadata.open_issues < 10:
            score += 1
            feedback.append(f"⚠ {metadata.open_issues} open issues")
        else:
            feedback.append(f"✗ {metadata.open_issues} open issues - may need attention")

        # Only projects older than a year earn the maturity point.
        age = context.days_since(metadata.created_at)
        if age > 365:
            score += 1
            feedback.append("✓ Mature project (over 1 year old)")
        elif age > 90:
            feedback.append("⚠ Relatively new project")
        else:
            feedback.append("⚠ Very new project - still establishing")

        return score
