"""Narrative Markdown summary for an analysis."""

from __future__ import annotations

from datetime import datetime
from typing import List, Mapping

from .aggregate import percentage
from .models import RepositoryMetadata, ScoreDimension
from .textutils import text_length
from .timeutils import days_since

STRENGTH_THRESHOLD = 70
WEAKNESS_THRESHOLD = 40


def split_strengths(
    scores: Mapping[str, ScoreDimension],
) -> tuple[List[str], List[str]]:
    """Return ``(strengths, weaknesses)`` as dimension titles in reporting order."""
    strengths: List[str] = []
    weaknesses: List[str] = []
    for dimension in scores.values():
        if dimension.percentage >= STRENGTH_THRESHOLD:
            strengths.append(dimension.title)
        elif dimension.percentage < WEAKNESS_THRESHOLD:
            weaknesses.append(dimension.title)
    return strengths, weaknesses


def generate_summary(
    metadata: RepositoryMetadata,
    scores: Mapping[str, ScoreDimension],
    overall_score: int,
    max_score: int,
    *,
    now: datetime,
) -> str:
    """Compose the evaluation narrative shown above the score breakdown."""
    pct = percentage(overall_score, max_score)
    strengths, weaknesses = split_strengths(scores)
    score_text = f"**{overall_score}/{max_score} ({pct:.1f}%)**"

    parts: List[str] = ["## Professional Repository Evaluation\n\n"]

    if pct >= 80:
        parts.append(
            f"This repository demonstrates **excellent** software engineering practices with a score of {score_text}. "
        )
    elif pct >= 65:
        parts.append(
            f"This repository shows **strong** development practices with a score of {score_text}. "
        )
    elif pct >= 50:
        parts.append(f"This repository has a **solid foundation** with a score of {score_text}. ")
    else:
        parts.append(
            f"This repository has **significant room for improvement** with a score of {score_text}. "
        )

    if strengths:
        parts.append(f"The codebase excels in {', '.join(strengths).lower()}")
        parts.append(
            ". " if len(strengths) == 1 else ", demonstrating professional quality in these areas. "
        )

    if weaknesses:
        parts.append(f"However, there are notable gaps in {', '.join(weaknesses).lower()}")
        parts.append(". " if len(weaknesses) == 1 else " that should be addressed. ")

    parts.append("\n\n### Key Observations\n\n")
    parts.extend(_observations(metadata, scores, now=now))

    parts.append("\n### Recommendation\n\n")
    parts.append(_recommendation(pct, weaknesses))

    return "".join(parts)


def _observations(
    metadata: RepositoryMetadata,
    scores: Mapping[str, ScoreDimension],
    *,
    now: datetime,
) -> List[str]:
    lines: List[str] = []

    if metadata.readme and text_length(metadata.readme) > 1000:
        lines.append(
            "- **Documentation**: Comprehensive README provides clear project information\n"
        )
    elif not metadata.readme:
        lines.append(
            "- **Documentation**: Missing README file is a critical issue that must be addressed immediately\n"
        )

    code_quality = scores.get("code_quality")
    if code_quality is not None and code_quality.ratio > 0.7:
        lines.append(
            "- **Code Quality**: Shows consistent development practices and meaningful commit history\n"
        )

    testing = scores.get("testing")
    if testing is not None and testing.ratio < 0.4:
        lines.append(
            "- **Testing**: Lacks visible testing infrastructure - implement automated tests and CI/CD\n"
        )

    if metadata.stars > 10 or metadata.forks > 5:
        lines.append(
            f"- **Community**: Gaining traction with {metadata.stars} stars and {metadata.forks} forks\n"
        )

    days_since_update = days_since(metadata.updated_at, now)
    if days_since_update > 90:
        lines.append(
            f"- **Activity**: Repository appears inactive (last updated {days_since_update} days ago)\n"
        )
    elif days_since_update < 7:
        lines.append("- **Activity**: Actively maintained with recent updates\n")

    return lines


def _recommendation(pct: float, weaknesses: List[str]) -> str:
    if pct >= 75:
        focus = " and ".join(weaknesses).lower() if weaknesses else "minor areas"
        return (
            "This repository is well-positioned for professional use or portfolio inclusion. "
            f"Focus on maintaining current standards while addressing any remaining gaps in {focus}."
        )
    if pct >= 60:
        focus = weaknesses[0].lower() if weaknesses else "weaker dimensions"
        return (
            "The repository has strong potential but requires improvements in key areas. "
            f"Prioritize enhancing {focus} to meet professional standards."
        )
    focus = weaknesses[0].lower() if weaknesses else "foundational improvements"
    return (
        "Significant improvements are needed before this repository can be considered "
        "production-ready or portfolio-worthy. Start with the high-priority items in the "
        f"roadmap below, focusing particularly on {focus}."
    )


__all__ = ["generate_summary", "split_strengths"]
