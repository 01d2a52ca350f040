"""Rendering of analysis results as Markdown or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .aggregate import score_description
from .models import AnalysisResult, RoadmapItem, ScoreDimension

_BAR_WIDTH = 20


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Return a JSON-serialisable representation of ``result``."""
    return {
        "repository": result.repository,
        "overall_score": result.overall_score,
        "max_score": result.max_score,
        "percentage": round(result.percentage, 1),
        "skill_level": result.skill_level.value,
        "tier": result.tier.value,
        "scores": {name: _dimension_to_dict(dim) for name, dim in result.scores.items()},
        "summary": result.summary,
        "roadmap": [_roadmap_item_to_dict(item) for item in result.roadmap],
        "analyzed_at": result.analyzed_at.isoformat().replace("+00:00", "Z"),
    }


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, sort_keys=True, ensure_ascii=False)


def render_markdown(result: AnalysisResult) -> str:
    """Render a standalone Markdown report for ``result``."""
    pct = result.percentage
    lines: List[str] = [
        f"# {result.repository}",
        "",
        f"**{result.tier.value} Tier** · **{result.skill_level.value}**",
        "",
        f"Overall score: **{result.overall_score}/{result.max_score}** "
        f"({pct:.1f}% - {score_description(pct)})",
        "",
        result.summary.strip(),
        "",
        "## Scores",
        "",
    ]

    for dimension in result.scores.values():
        lines.extend(_dimension_section(dimension))

    lines.append("## Improvement Roadmap")
    lines.append("")
    for index, item in enumerate(result.roadmap, start=1):
        lines.append(f"### {index}. {item.title} ({item.priority.value} priority)")
        lines.append("")
        lines.append(item.description)
        lines.append("")
        lines.extend(f"- [ ] {action}" for action in item.action_items)
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def render(result: AnalysisResult, fmt: str = "markdown") -> str:
    if fmt == "json":
        return render_json(result) + "\n"
    if fmt == "markdown":
        return render_markdown(result)
    raise ValueError(f"Unsupported report format: {fmt}")


def save_report(result: AnalysisResult, path: Path, fmt: str = "markdown") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(result, fmt), encoding="utf-8")
    return path


def _dimension_section(dimension: ScoreDimension) -> List[str]:
    filled = round(dimension.ratio * _BAR_WIDTH)
    bar = "█" * filled + "░" * (_BAR_WIDTH - filled)
    lines = [
        f"### {dimension.title}: {dimension.score}/{dimension.max_score}",
        "",
        f"`{bar}` {dimension.percentage:.1f}%",
        "",
    ]
    lines.extend(f"- {entry}" for entry in dimension.feedback)
    lines.append("")
    return lines


def _dimension_to_dict(dimension: ScoreDimension) -> Dict[str, Any]:
    return {
        "title": dimension.title,
        "score": dimension.score,
        "max_score": dimension.max_score,
        "feedback": list(dimension.feedback),
    }


def _roadmap_item_to_dict(item: RoadmapItem) -> Dict[str, Any]:
    return {
        "priority": item.priority.value,
        "title": item.title,
        "description": item.description,
        "action_items": list(item.action_items),
    }


__all__ = ["render", "render_json", "render_markdown", "result_to_dict", "save_report"]
