"""Minimal GitHub REST client that produces engine inputs."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime
from http.client import HTTPException
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..errors import FetchFailed, InvalidInput, NotFound, RateLimited
from ..logging import get_logger
from ..models import Commit, CommitHistory, License, RepositoryMetadata
from ..timeutils import parse_timestamp
from .url import RepositoryRef

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_COMMIT_LIMIT = 100
MAX_COMMIT_LIMIT = 100

JSON_MEDIA_TYPE = "application/vnd.github+json"
RAW_MEDIA_TYPE = "application/vnd.github.raw"

ENV_TOKEN_KEYS = ("REPOMIRROR_GITHUB_TOKEN", "GITHUB_TOKEN")

_logger = get_logger("github")


@dataclass
class GitHubRequest:
    """A single GET request against the GitHub REST API."""

    url: str
    headers: Dict[str, str]
    timeout: float


@dataclass
class GitHubResponse:
    status: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise FetchFailed("GitHub returned invalid JSON") from exc


Transport = Callable[[GitHubRequest], GitHubResponse]


class GitHubClient:
    """Fetches repository metadata, README, languages, and recent commits."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        commit_limit: int = DEFAULT_COMMIT_LIMIT,
        transport: Transport | None = None,
    ) -> None:
        self.token = token if token is not None else _first_env_value(ENV_TOKEN_KEYS)
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.commit_limit = max(1, min(commit_limit, MAX_COMMIT_LIMIT))
        self._transport = transport or _urllib_transport

    def fetch(self, ref: RepositoryRef) -> Tuple[RepositoryMetadata, CommitHistory]:
        """Return the metadata snapshot and commit sample for ``ref``."""
        metadata = self.fetch_repository(ref)
        history = self.fetch_commits(ref)
        return metadata, history

    def fetch_repository(self, ref: RepositoryRef) -> RepositoryMetadata:
        response = self._get(f"/repos/{ref.full_name}")
        if response.status == 404:
            raise NotFound(
                "Repository not found. Please check the URL and ensure the repository is public."
            )
        if response.status in (403, 429):
            raise RateLimited("API rate limit exceeded. Please try again later.")
        if not response.ok:
            raise FetchFailed(f"Failed to fetch repository data (HTTP {response.status})")

        payload = response.json()
        if not isinstance(payload, dict):
            raise FetchFailed("Failed to fetch repository data (unexpected payload)")

        readme = self._fetch_optional_text(f"/repos/{ref.full_name}/readme")
        languages = self._fetch_languages(ref)
        return metadata_from_payload(payload, readme=readme, languages=languages)

    def fetch_commits(self, ref: RepositoryRef, limit: int | None = None) -> CommitHistory:
        """Return the newest commits; any failure yields an empty history."""
        per_page = self.commit_limit if limit is None else max(1, min(limit, MAX_COMMIT_LIMIT))
        path = f"/repos/{ref.full_name}/commits?per_page={per_page}"
        try:
            response = self._get(path)
            if not response.ok:
                _logger.debug("Commit listing for %s returned HTTP %d", ref.full_name, response.status)
                return CommitHistory()
            payload = response.json()
        except FetchFailed as exc:
            _logger.debug("Commit listing for %s failed: %s", ref.full_name, exc)
            return CommitHistory()
        if not isinstance(payload, list):
            return CommitHistory()
        return history_from_payload(payload)

    # ------------------------------------------------------------------
    # Helpers

    def _fetch_optional_text(self, path: str) -> Optional[str]:
        try:
            response = self._get(path, accept=RAW_MEDIA_TYPE)
        except FetchFailed as exc:
            _logger.debug("Optional request %s failed: %s", path, exc)
            return None
        if not response.ok:
            return None
        return response.text()

    def _fetch_languages(self, ref: RepositoryRef) -> Dict[str, int]:
        path = f"/repos/{ref.full_name}/languages"
        try:
            response = self._get(path)
            payload = response.json() if response.ok else {}
        except FetchFailed as exc:
            _logger.debug("Optional request %s failed: %s", path, exc)
            return {}
        if not isinstance(payload, dict):
            return {}
        return {
            str(name): count
            for name, count in payload.items()
            if isinstance(count, int) and not isinstance(count, bool)
        }

    def _get(self, path: str, *, accept: str = JSON_MEDIA_TYPE) -> GitHubResponse:
        headers = {
            "Accept": accept,
            "User-Agent": "repomirror",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        request = GitHubRequest(url=f"{self.api_url}{path}", headers=headers, timeout=self.timeout)
        _logger.debug("GET %s", request.url)
        return self._transport(request)


def metadata_from_payload(
    payload: Mapping[str, Any],
    *,
    readme: Optional[str] = None,
    languages: Optional[Mapping[str, int]] = None,
) -> RepositoryMetadata:
    """Map a ``GET /repos/{owner}/{repo}`` payload onto :class:`RepositoryMetadata`."""
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidInput("Repository payload is missing 'name'")

    created_at = _require_timestamp(payload, "created_at")
    updated_at = _require_timestamp(payload, "updated_at")
    # Empty repositories report no push time yet.
    pushed_raw = payload.get("pushed_at")
    pushed_at = _parse(pushed_raw, "pushed_at") if pushed_raw else updated_at

    license_data = payload.get("license")
    license_info = None
    if isinstance(license_data, dict) and license_data.get("name"):
        license_info = License(name=str(license_data["name"]), url=license_data.get("url"))

    return RepositoryMetadata(
        name=name,
        description=_optional_str(payload.get("description")),
        language=_optional_str(payload.get("language")),
        languages=dict(languages or {}),
        stars=_count(payload, "stargazers_count"),
        forks=_count(payload, "forks_count"),
        open_issues=_count(payload, "open_issues_count"),
        size=_count(payload, "size"),
        created_at=created_at,
        updated_at=updated_at,
        pushed_at=pushed_at,
        has_wiki=bool(payload.get("has_wiki")),
        has_issues=bool(payload.get("has_issues")),
        has_projects=bool(payload.get("has_projects")),
        license=license_info,
        readme=readme,
        default_branch=_optional_str(payload.get("default_branch")) or "",
    )


def history_from_payload(payload: Sequence[Any]) -> CommitHistory:
    """Map a ``GET /repos/{owner}/{repo}/commits`` listing onto :class:`CommitHistory`.

    Entries without a message or author date are skipped.
    """
    commits: List[Commit] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        details = entry.get("commit")
        if not isinstance(details, dict):
            continue
        author = details.get("author") if isinstance(details.get("author"), dict) else {}
        message = details.get("message")
        date = author.get("date")
        if not isinstance(message, str) or not isinstance(date, str):
            continue
        try:
            authored_at = parse_timestamp(date)
        except ValueError:
            continue
        commits.append(
            Commit(
                sha=str(entry.get("sha", "")),
                message=message,
                authored_at=authored_at,
                author_name=_optional_str(author.get("name")),
            )
        )
    return CommitHistory(total_count=len(commits), commits=tuple(commits))


def _urllib_transport(request: GitHubRequest) -> GitHubResponse:
    http_request = Request(request.url, headers=request.headers, method="GET")
    try:
        with urlopen(http_request, timeout=request.timeout) as response:  # type: ignore[arg-type]
            return GitHubResponse(
                status=response.status,
                body=response.read(),
                headers=dict(response.headers.items()),
            )
    except HTTPError as exc:
        try:
            body = exc.read()
        except (OSError, HTTPException):
            body = b""
        headers = dict(exc.headers.items()) if exc.headers is not None else {}
        return GitHubResponse(status=exc.code, body=body or b"", headers=headers)
    except URLError as exc:
        raise FetchFailed(f"GitHub request failed: {exc.reason}") from exc
    except TimeoutError as exc:
        raise FetchFailed(f"GitHub request timed out after {request.timeout}s") from exc
    except (OSError, HTTPException) as exc:
        raise FetchFailed(f"GitHub request failed: {exc!r}") from exc


def _require_timestamp(payload: Mapping[str, Any], key: str) -> datetime:
    value = payload.get(key)
    if not value:
        raise InvalidInput(f"Repository payload is missing '{key}'")
    return _parse(value, key)


def _parse(value: Any, key: str) -> datetime:
    if not isinstance(value, str):
        raise InvalidInput(f"Repository payload field '{key}' is not a timestamp")
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise InvalidInput(f"Repository payload field '{key}' is not a timestamp") from exc


def _count(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"Repository payload field '{key}' must be an integer")
    return value


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _first_env_value(keys: Sequence[str]) -> str | None:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


__all__ = [
    "GitHubClient",
    "GitHubRequest",
    "GitHubResponse",
    "history_from_payload",
    "metadata_from_payload",
]
