"""Repository quality evaluation from GitHub metadata."""

from .engine import AnalysisEngine, analyze
from .errors import FetchFailed, InvalidInput, NotFound, RateLimited, RepoMirrorError
from .models import (
    AnalysisResult,
    Commit,
    CommitHistory,
    License,
    Priority,
    RepositoryMetadata,
    RoadmapItem,
    ScoreDimension,
    SkillLevel,
    Tier,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "Commit",
    "CommitHistory",
    "FetchFailed",
    "InvalidInput",
    "License",
    "NotFound",
    "Priority",
    "RateLimited",
    "RepoMirrorError",
    "RepositoryMetadata",
    "RoadmapItem",
    "ScoreDimension",
    "SkillLevel",
    "Tier",
    "analyze",
]
