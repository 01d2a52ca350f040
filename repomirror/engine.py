"""Analysis engine: validation, scoring, aggregation, summary, and roadmap."""

from __future__ import annotations

from datetime import datetime
from numbers import Integral
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .aggregate import percentage, skill_level_for, tier_for, total_score
from .errors import InvalidInput
from .logging import get_logger
from .models import (
    AnalysisResult,
    Commit,
    CommitHistory,
    License,
    RepositoryMetadata,
    ScoreDimension,
)
from .roadmap import generate_roadmap
from .scorers import Scorer, ScoringContext, build_scorers
from .summary import generate_summary
from .timeutils import ensure_aware, utcnow

_COUNT_FIELDS = ("stars", "forks", "open_issues", "size")
_TIMESTAMP_FIELDS = ("created_at", "updated_at", "pushed_at")


class AnalysisEngine:
    """Turns a metadata snapshot into an immutable :class:`AnalysisResult`.

    The engine holds no per-request state, so one instance can serve concurrent
    analyses. "Now" is captured once per call and shared by every scorer.
    """

    def __init__(self, scorers: Optional[Iterable[Scorer]] = None) -> None:
        self.scorers: List[Scorer] = list(scorers) if scorers is not None else build_scorers()
        self.logger = get_logger("engine")

    def analyze(
        self,
        metadata: RepositoryMetadata,
        history: CommitHistory,
        identifier: str,
        *,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Score ``metadata``/``history`` for the repository named by ``identifier``.

        ``now`` defaults to the current time and is stamped on the result as
        ``analyzed_at``. Pass it explicitly for byte-identical reports; result
        equality ignores ``analyzed_at``.
        """
        validate_identifier(identifier)
        validate_metadata(metadata)
        validate_history(history)

        captured_now = ensure_aware(now) if now is not None else utcnow()
        self.logger.info("Analyzing %s", identifier)

        context = ScoringContext(metadata=metadata, history=history, now=captured_now)
        scores: Dict[str, ScoreDimension] = {}
        for scorer in self.scorers:
            dimension = scorer.score(context)
            self.logger.debug(
                "%s scored %d/%d", dimension.title, dimension.score, dimension.max_score
            )
            scores[dimension.name] = dimension

        overall, maximum = total_score(scores.values())
        pct = percentage(overall, maximum)
        result = AnalysisResult(
            repository=identifier,
            scores=MappingProxyType(scores),
            overall_score=overall,
            max_score=maximum,
            skill_level=skill_level_for(pct),
            tier=tier_for(pct),
            summary=generate_summary(metadata, scores, overall, maximum, now=captured_now),
            roadmap=generate_roadmap(scores),
            analyzed_at=captured_now,
        )
        self.logger.info(
            "Finished %s: %d/%d (%s, %s)",
            identifier,
            overall,
            maximum,
            result.tier.value,
            result.skill_level.value,
        )
        return result


def analyze(
    metadata: RepositoryMetadata,
    history: CommitHistory,
    identifier: str,
    *,
    now: datetime | None = None,
) -> AnalysisResult:
    """Run a one-off analysis with the default scorer table."""
    return AnalysisEngine().analyze(metadata, history, identifier, now=now)


def validate_identifier(identifier: object) -> None:
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidInput("Repository identifier must be a non-empty 'owner/name' string")
    owner, sep, name = identifier.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise InvalidInput(f"Repository identifier '{identifier}' is not in 'owner/name' form")


def validate_metadata(metadata: object) -> None:
    if not isinstance(metadata, RepositoryMetadata):
        raise InvalidInput("Repository metadata is required")
    if not isinstance(metadata.name, str) or not metadata.name:
        raise InvalidInput("Repository metadata is missing a name")
    for field_name in _COUNT_FIELDS:
        _require_count(field_name, getattr(metadata, field_name))
    for field_name in _TIMESTAMP_FIELDS:
        if not isinstance(getattr(metadata, field_name), datetime):
            raise InvalidInput(f"Repository metadata field '{field_name}' must be a datetime")
    if not isinstance(metadata.languages, Mapping):
        raise InvalidInput("Repository metadata field 'languages' must be a mapping")
    for language, byte_count in metadata.languages.items():
        _require_count(f"languages[{language!r}]", byte_count)
    for field_name in ("description", "language", "readme"):
        value = getattr(metadata, field_name)
        if value is not None and not isinstance(value, str):
            raise InvalidInput(f"Repository metadata field '{field_name}' must be text")
    if not isinstance(metadata.default_branch, str):
        raise InvalidInput("Repository metadata field 'default_branch' must be text")
    license_info = metadata.license
    if license_info is not None and (
        not isinstance(license_info, License) or not isinstance(license_info.name, str)
    ):
        raise InvalidInput("Repository metadata field 'license' must be a License or None")


def validate_history(history: object) -> None:
    if not isinstance(history, CommitHistory):
        raise InvalidInput("Commit history is required")
    _require_count("total_count", history.total_count)
    if not isinstance(history.commits, Sequence):
        raise InvalidInput("Commit history field 'commits' must be a sequence")
    if len(history.commits) > history.total_count:
        raise InvalidInput(
            f"Commit sample of {len(history.commits)} exceeds total count {history.total_count}"
        )
    for index, commit in enumerate(history.commits):
        if not isinstance(commit, Commit):
            raise InvalidInput(f"Commit entry {index} is not a Commit record")
        if not isinstance(commit.message, str):
            raise InvalidInput(f"Commit {commit.sha} has no message")
        if not isinstance(commit.authored_at, datetime):
            raise InvalidInput(f"Commit {commit.sha} has no author timestamp")


def _require_count(field_name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInput(f"Field '{field_name}' must be an integer")
    if value < 0:
        raise InvalidInput(f"Field '{field_name}' must not be negative")


__all__ = [
    "AnalysisEngine",
    "analyze",
    "validate_history",
    "validate_identifier",
    "validate_metadata",
]
