"""In-memory GitHub transport and canned REST payloads."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from repomirror.github import GitHubRequest, GitHubResponse

API = "https://api.github.com"

README_TEXT = (
    "# Widget\n\n## Installation\n\n```\npip install widget\n```\n\n"
    "## Usage\n\nAn example lives in docs/. Run pytest for the test suite.\n"
)


def repo_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": "widget",
        "full_name": "octo/widget",
        "description": "Widgets for assembling dashboards quickly",
        "language": "Python",
        "stargazers_count": 42,
        "forks_count": 3,
        "open_issues_count": 2,
        "size": 1500,
        "created_at": "2023-01-15T10:00:00Z",
        "updated_at": "2025-05-30T09:00:00Z",
        "pushed_at": "2025-05-31T08:00:00Z",
        "has_wiki": True,
        "has_issues": True,
        "has_projects": False,
        "license": {"key": "mit", "name": "MIT License", "url": "https://api.github.com/licenses/mit"},
        "default_branch": "main",
    }
    payload.update(overrides)
    return payload


def commits_payload(count: int) -> List[Dict[str, Any]]:
    return [
        {
            "sha": f"{index:040x}",
            "commit": {
                "message": f"Add widget feature {index}",
                "author": {"name": "Dev", "date": f"2025-05-{30 - index:02d}T12:00:00Z"},
            },
        }
        for index in range(count)
    ]


def json_response(payload: Any, status: int = 200) -> GitHubResponse:
    return GitHubResponse(status=status, body=json.dumps(payload).encode("utf-8"))


class FakeTransport:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes: Optional[Dict[str, GitHubResponse]] = None) -> None:
        self.routes: Dict[str, GitHubResponse] = dict(routes or {})
        self.requests: List[GitHubRequest] = []

    def __call__(self, request: GitHubRequest) -> GitHubResponse:
        self.requests.append(request)
        return self.routes.get(request.url, GitHubResponse(status=404, body=b"{}"))

    def urls(self) -> List[str]:
        return [request.url for request in self.requests]


def widget_transport(commit_count: int = 20) -> FakeTransport:
    """Transport serving a complete, healthy ``octo/widget`` repository."""
    base = f"{API}/repos/octo/widget"
    return FakeTransport(
        {
            base: json_response(repo_payload()),
            f"{base}/readme": GitHubResponse(status=200, body=README_TEXT.encode("utf-8")),
            f"{base}/languages": json_response({"Python": 12000, "HTML": 800}),
            f"{base}/commits?per_page=100": json_response(commits_payload(commit_count)),
        }
    )


__all__ = [
    "API",
    "FakeTransport",
    "README_TEXT",
    "commits_payload",
    "json_response",
    "repo_payload",
    "widget_transport",
]
