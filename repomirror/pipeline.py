"""End-to-end evaluation: parse a URL, fetch metadata, and run the engine."""

from __future__ import annotations

from datetime import datetime

from .engine import AnalysisEngine
from .github import GitHubClient, parse_repository_url
from .logging import get_logger
from .models import AnalysisResult

_logger = get_logger("pipeline")


def evaluate_repository(
    url: str,
    *,
    client: GitHubClient | None = None,
    engine: AnalysisEngine | None = None,
    now: datetime | None = None,
) -> AnalysisResult:
    """Evaluate the GitHub repository at ``url``.

    Raises ``InvalidInput`` for malformed URLs and lets ``NotFound``,
    ``RateLimited``, and ``FetchFailed`` from the client propagate unchanged.
    """
    ref = parse_repository_url(url)
    client = client or GitHubClient()
    engine = engine or AnalysisEngine()

    _logger.info("Fetching %s", ref.full_name)
    metadata, history = client.fetch(ref)
    _logger.debug(
        "Fetched %s: readme=%s, %d languages, %d commits",
        ref.full_name,
        "yes" if metadata.readme else "no",
        len(metadata.languages),
        len(history.commits),
    )
    return engine.analyze(metadata, history, ref.full_name, now=now)


__all__ = ["evaluate_repository"]
