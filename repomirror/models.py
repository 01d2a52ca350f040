"""Core data models shared across repomirror components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional, Tuple


class SkillLevel(str, Enum):
    """Coarse skill label derived from the aggregate percentage."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Tier(str, Enum):
    """Coarse quality tier derived from the aggregate percentage."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class License:
    name: str
    url: Optional[str] = None


@dataclass(frozen=True)
class RepositoryMetadata:
    """Snapshot of repository metadata as reported by the hosting provider."""

    name: str
    created_at: datetime
    updated_at: datetime
    pushed_at: datetime
    description: Optional[str] = None
    language: Optional[str] = None
    languages: Mapping[str, int] = field(default_factory=dict)
    stars: int = 0
    forks: int = 0
    open_issues: int = 0
    size: int = 0
    has_wiki: bool = False
    has_issues: bool = False
    has_projects: bool = False
    license: Optional[License] = None
    readme: Optional[str] = None
    default_branch: str = "main"


@dataclass(frozen=True)
class Commit:
    sha: str
    message: str
    authored_at: datetime
    author_name: Optional[str] = None


@dataclass(frozen=True)
class CommitHistory:
    """Capped, newest-first sample of a repository's commits."""

    total_count: int = 0
    commits: Tuple[Commit, ...] = ()


@dataclass(frozen=True)
class ScoreDimension:
    """Score and feedback for one quality axis."""

    name: str
    title: str
    score: int
    max_score: int
    feedback: Tuple[str, ...] = ()

    @property
    def ratio(self) -> float:
        if self.max_score == 0:
            return 0.0
        return self.score / self.max_score

    @property
    def percentage(self) -> float:
        return self.ratio * 100


@dataclass(frozen=True)
class RoadmapItem:
    priority: Priority
    title: str
    description: str
    action_items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """Complete evaluation of a single repository."""

    repository: str
    scores: Mapping[str, ScoreDimension]
    overall_score: int
    max_score: int
    skill_level: SkillLevel
    tier: Tier
    summary: str
    roadmap: Tuple[RoadmapItem, ...]
    analyzed_at: datetime = field(compare=False)

    @property
    def percentage(self) -> float:
        if self.max_score == 0:
            return 0.0
        return self.overall_score / self.max_score * 100
