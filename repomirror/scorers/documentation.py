"""Documentation scorer driven entirely by README content."""

from __future__ import annotations

from typing import List, Sequence

from .base import Scorer, ScoringContext
from ..textutils import text_length

MISSING_README_FEEDBACK = (
    "✗ README file is missing - this is critical for any repository",
    "✗ Without README, potential users cannot understand the project",
)


def _mentions(text: str, needles: Sequence[str]) -> bool:
    return any(needle in text for needle in needles)


class DocumentationScorer(Scorer):
    """Rates README length and the presence of conventional sections."""

    name = "documentation"
    title = "Documentation"
    max_score = 25

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        readme = context.metadata.readme
        if not readme:
            feedback.extend(MISSING_README_FEEDBACK)
            return 0

        score = 0
        length = text_length(readme)
        if length > 2000:
            score += 10
            feedback.append("✓ Comprehensive README (2000+ characters)")
        elif length > 500:
            score += 6
            feedback.append("⚠ Moderate README length - consider adding more details")
        else:
            score += 3
            feedback.append("✗ README is too brief - expand with setup, usage, and examples")

        text = readme.lower()

        if _mentions(text, ("install", "setup")):
            score += 3
            feedback.append("✓ Installation/setup instructions included")
        else:
            feedback.append("✗ Missing installation instructions")

        if _mentions(text, ("usage", "example")):
            score += 3
            feedback.append("✓ Usage examples provided")
        else:
            feedback.append("✗ No usage examples - add code samples")

        if _mentions(text, ("contributing", "contribution")):
            score += 2
            feedback.append("✓ Contribution guidelines included")

        if "license" in text:
            score += 2
            feedback.append("✓ License information in README")

        if _mentions(text, ("![", "<img")):
            score += 2
            feedback.append("✓ Includes images/screenshots for visual clarity")
        else:
            feedback.append("⚠ Consider adding screenshots or diagrams")

        if _mentions(text, ("```", "`")):
            score += 2
            feedback.append("✓ Code examples formatted properly")

        if _mentions(text, ("badge", "shields.io", "img.shields.io")):
            score += 1
            feedback.append("✓ Status badges present")

        return score
