"""GitHub collaborators: URL parsing and REST fetching."""

from .client import GitHubClient, GitHubRequest, GitHubResponse
from .url import RepositoryRef, parse_repository_url

__all__ = [
    "GitHubClient",
    "GitHubRequest",
    "GitHubResponse",
    "RepositoryRef",
    "parse_repository_url",
]
