"""Improvement roadmap built from under-performing dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from .models import Priority, RoadmapItem, ScoreDimension

MAX_ROADMAP_ITEMS = 5


@dataclass(frozen=True)
class RoadmapRule:
    """Adds ``item`` when ``dimension`` scores below ``cutoff`` (as a ratio)."""

    dimension: str
    cutoff: float
    item: RoadmapItem

    def applies(self, scores: Mapping[str, ScoreDimension]) -> bool:
        dimension = scores.get(self.dimension)
        return dimension is not None and dimension.ratio < self.cutoff


RULES: Tuple[RoadmapRule, ...] = (
    RoadmapRule(
        dimension="documentation",
        cutoff=0.6,
        item=RoadmapItem(
            priority=Priority.HIGH,
            title="Enhance Documentation",
            description="Comprehensive documentation is critical for project adoption and collaboration.",
            action_items=(
                "Create or expand README with project overview, purpose, and key features",
                "Add installation and setup instructions with prerequisites",
                "Include usage examples and code samples",
                "Add screenshots or GIFs demonstrating functionality",
                "Document API or main interfaces",
                "Create CONTRIBUTING.md for collaboration guidelines",
            ),
        ),
    ),
    RoadmapRule(
        dimension="testing",
        cutoff=0.5,
        item=RoadmapItem(
            priority=Priority.HIGH,
            title="Implement Testing Strategy",
            description="Testing is essential for code quality and maintainability in professional projects.",
            action_items=(
                "Choose and set up appropriate testing framework for your language",
                "Write unit tests for core functionality (aim for 70%+ coverage)",
                "Add integration tests for critical workflows",
                "Set up CI/CD pipeline (GitHub Actions, Travis, CircleCI)",
                "Add test coverage reporting and badges",
                "Document how to run tests in README",
            ),
        ),
    ),
    RoadmapRule(
        dimension="code_quality",
        cutoff=0.6,
        item=RoadmapItem(
            priority=Priority.HIGH,
            title="Improve Code Quality",
            description="Clean, well-organized code demonstrates professional development practices.",
            action_items=(
                "Establish consistent code formatting standards",
                "Add linting configuration (.eslintrc, .pylintrc, etc.)",
                "Write meaningful commit messages (use conventional commits)",
                "Refactor long functions into smaller, testable units",
                "Add code comments for complex logic",
                "Remove dead code and unused dependencies",
            ),
        ),
    ),
    RoadmapRule(
        dimension="project_structure",
        cutoff=0.6,
        item=RoadmapItem(
            priority=Priority.MEDIUM,
            title="Optimize Project Structure",
            description="Well-organized projects are easier to navigate and maintain.",
            action_items=(
                "Create clear folder structure (src/, tests/, docs/, etc.)",
                "Add .gitignore for language/framework-specific files",
                "Include LICENSE file if missing",
                "Enable GitHub Issues for bug tracking",
                "Add project description and topics/tags",
                "Create issue and PR templates",
            ),
        ),
    ),
    RoadmapRule(
        dimension="development_practices",
        cutoff=0.6,
        item=RoadmapItem(
            priority=Priority.MEDIUM,
            title="Establish Development Workflow",
            description="Consistent development practices improve collaboration and code quality.",
            action_items=(
                "Commit code regularly with meaningful messages",
                "Use feature branches for new development",
                "Implement code review process via pull requests",
                "Add CHANGELOG.md to track version history",
                "Consider semantic versioning for releases",
                "Set up branch protection rules",
            ),
        ),
    ),
    RoadmapRule(
        dimension="real_world_relevance",
        cutoff=0.5,
        item=RoadmapItem(
            priority=Priority.LOW,
            title="Increase Project Visibility and Impact",
            description="Make your project discoverable and useful to others.",
            action_items=(
                "Add relevant topics/tags to repository",
                "Share project on developer communities (Reddit, Hacker News, etc.)",
                "Write blog post or tutorial about the project",
                "Add project to awesome-lists or curated collections",
                "Engage with issues and feature requests promptly",
                "Consider creating a project website or demo",
            ),
        ),
    ),
)

CONTINUE_EXCELLENCE = RoadmapItem(
    priority=Priority.LOW,
    title="Continue Excellence",
    description="Maintain current high standards while exploring new improvements.",
    action_items=(
        "Keep dependencies up to date",
        "Monitor and address security vulnerabilities",
        "Expand test coverage to 90%+",
        "Add performance benchmarks",
        "Consider internationalization (i18n)",
        "Explore advanced CI/CD features",
    ),
)


def generate_roadmap(scores: Mapping[str, ScoreDimension]) -> Tuple[RoadmapItem, ...]:
    """Return between one and ``MAX_ROADMAP_ITEMS`` items in rule order."""
    items: List[RoadmapItem] = [rule.item for rule in RULES if rule.applies(scores)]
    if not items:
        items.append(CONTINUE_EXCELLENCE)
    return tuple(items[:MAX_ROADMAP_ITEMS])


__all__ = ["CONTINUE_EXCELLENCE", "MAX_ROADMAP_ITEMS", "RULES", "RoadmapRule", "generate_roadmap"]
