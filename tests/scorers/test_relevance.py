"""Tests for the real-world relevance scorer."""

from __future__ import annotations

from repomirror.scorers import RealWorldRelevanceScorer, ScoringContext
from tests._fixtures.metadata_builder import MetadataBuilder


def _score(builder: MetadataBuilder, **overrides):
    context = ScoringContext(builder.metadata(**overrides), builder.history(0), builder.now)
    return RealWorldRelevanceScorer().score(context)


def test_relevance_full_marks(builder: MetadataBuilder) -> None:
    result = _score(builder, stars=150, pushed_at=builder.days_ago(2), open_issues=0)

    assert result.score == 10
    assert result.feedback == (
        "✓ Significant community interest (100+ stars)",
        "✓ Very recent activity (within 7 days)",
        "✓ No open issues - well maintained",
        "✓ Mature project (over 1 year old)",
    )


def test_relevance_young_project(builder: MetadataBuilder) -> None:
    result = _score(
        builder,
        stars=5,
        pushed_at=builder.days_ago(10),
        open_issues=3,
        created_at=builder.days_ago(100),
    )

    assert result.score == 1 + 2 + 1
    assert result.feedback == (
        "⚠ Limited community adoption",
        "✓ Recent activity (within 30 days)",
        "⚠ 3 open issues",
        "⚠ Relatively new project",
    )


def test_relevance_stagnant_project(builder: MetadataBuilder) -> None:
    result = _score(
        builder,
        stars=0,
        pushed_at=builder.days_ago(60),
        open_issues=12,
        created_at=builder.days_ago(30),
        updated_at=builder.days_ago(20),
    )

    assert result.score == 0
    assert result.feedback == (
        "✗ No community engagement yet",
        "⚠ No recent commits - project may be stagnant",
        "✗ 12 open issues - may need attention",
        "⚠ Very new project - still establishing",
    )


def test_maturity_branches_below_one_year_award_nothing(builder: MetadataBuilder) -> None:
    relatively_new = _score(builder, stars=11, created_at=builder.days_ago(200))
    very_new = _score(builder, stars=11, created_at=builder.days_ago(10))

    assert relatively_new.score == very_new.score == 3 + 3 + 2
