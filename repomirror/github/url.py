"""Parsing of GitHub repository URLs into owner/name references."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import InvalidInput

_URL_PATTERN = re.compile(r"^https?://(?:www\.)?github\.com/([\w-]+)/([\w.-]+?)(?:\.git)?/?$")
_SHORTHAND_PATTERN = re.compile(r"^([\w-]+)/([\w.-]+?)(?:\.git)?$")


@dataclass(frozen=True)
class RepositoryRef:
    """Owner/name pair identifying a GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.full_name}"


def parse_repository_url(url: str) -> RepositoryRef:
    """Return the repository reference for a GitHub URL or ``owner/name`` shorthand.

    A trailing slash and a ``.git`` suffix are tolerated. Deeper paths such as
    ``/tree/main`` are rejected.
    """
    candidate = (url or "").strip()
    match = _URL_PATTERN.match(candidate) or _SHORTHAND_PATTERN.match(candidate)
    if match is None:
        raise InvalidInput("Invalid GitHub repository URL")
    owner, name = match.groups()
    if name in {".", ".."}:
        raise InvalidInput("Invalid GitHub repository URL")
    return RepositoryRef(owner=owner, name=name)


__all__ = ["RepositoryRef", "parse_repository_url"]
