"""Testing scorer.

Without access to the file tree, testing maturity is estimated from what the README
says about tests, continuous integration, and test frameworks.
"""

from __future__ import annotations

from typing import List

from .base import Scorer, ScoringContext

CI_KEYWORDS = ("travis", "circleci", "github actions", "build passing", "workflow")
TEST_FRAMEWORKS = ("jest", "mocha", "pytest", "junit", "rspec", "phpunit", "unittest")

_FLOOR_THRESHOLD = 5
_FLOOR_BONUS = 2


class TestingScorer(Scorer):
    """Rates visible testing and CI practices mentioned in the README."""

    __test__ = False  # keep pytest from collecting this class

    name = "testing"
    title = "Testing"
    max_score = 15

    def evaluate(self, context: ScoringContext, feedback: List[str]) -> int:
        text = (context.metadata.readme or "").lower()
        score = 0

        if "test" in text and "coverage" in text:
            score += 5
            feedback.append("✓ Test coverage mentioned in documentation")
        elif "test" in text:
            score += 3
            feedback.append("⚠ Testing mentioned but coverage unclear")
        else:
            feedback.append("✗ No testing information in documentation")

        if any(keyword in text for keyword in CI_KEYWORDS):
            score += 5
            feedback.append("✓ CI/CD pipeline detected")
        else:
            feedback.append("✗ No CI/CD pipeline detected - consider adding automated tests")

        if any(framework in text for framework in TEST_FRAMEWORKS):
            score += 3
            feedback.append("✓ Testing framework mentioned")

        if score < _FLOOR_THRESHOLD:
            feedback.append("⚠ Consider adding unit and integration tests")
            feedback.append("⚠ Set up automated testing with CI/CD")
            score += _FLOOR_BONUS

        return score
