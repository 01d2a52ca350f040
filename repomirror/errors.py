"""Exception hierarchy for repomirror."""

from __future__ import annotations


class RepoMirrorError(RuntimeError):
    """Base class for every error surfaced to callers."""


class InvalidInput(RepoMirrorError):
    """Raised when an identifier, URL, or metadata record is malformed."""


class NotFound(RepoMirrorError):
    """Raised when the hosting provider reports the repository missing."""


class RateLimited(RepoMirrorError):
    """Raised when the hosting provider denies access or throttles requests."""


class FetchFailed(RepoMirrorError):
    """Raised for any other upstream failure while retrieving metadata."""


__all__ = ["FetchFailed", "InvalidInput", "NotFound", "RateLimited", "RepoMirrorError"]
