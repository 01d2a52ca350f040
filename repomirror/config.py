"""Configuration loading for repomirror (.repomirror.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .github.client import (
    DEFAULT_API_URL,
    DEFAULT_COMMIT_LIMIT,
    DEFAULT_TIMEOUT,
    ENV_TOKEN_KEYS,
    MAX_COMMIT_LIMIT,
)

CONFIG_FILENAME = ".repomirror.yml"
REPORT_FORMATS = ("markdown", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """GitHub API settings."""

    api_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    commit_limit: int = DEFAULT_COMMIT_LIMIT


@dataclass
class ReportConfig:
    format: str = "markdown"
    output: Optional[Path] = None


@dataclass
class RepoMirrorConfig:
    """Represents the settings defined in .repomirror.yml."""

    root: Path
    github: GitHubConfig = field(default_factory=GitHubConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_config(config_path: Path) -> RepoMirrorConfig:
    """Load configuration from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        config = RepoMirrorConfig(root=root)
    else:
        data = _read_config(config_file)
        if not isinstance(data, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        config = RepoMirrorConfig(
            root=root,
            github=_github_config(_as_dict(data.get("github"))),
            report=_report_config(_as_dict(data.get("report")), root),
        )

    if not config.github.token:
        config.github.token = _first_env_value()
    return config


def _github_config(data: Dict[str, Any]) -> GitHubConfig:
    github = GitHubConfig()
    api_url = _as_str(data.get("api_url"))
    if api_url:
        github.api_url = api_url.rstrip("/")
    github.token = _as_str(data.get("token"))

    timeout = _as_float(data.get("timeout"))
    if timeout is not None:
        if timeout <= 0:
            raise ConfigError("github.timeout must be positive")
        github.timeout = timeout

    commit_limit = _as_int(data.get("commit_limit"))
    if commit_limit is not None:
        if not 1 <= commit_limit <= MAX_COMMIT_LIMIT:
            raise ConfigError(f"github.commit_limit must be between 1 and {MAX_COMMIT_LIMIT}")
        github.commit_limit = commit_limit
    return github


def _report_config(data: Dict[str, Any], root: Path) -> ReportConfig:
    report = ReportConfig()
    fmt = _as_str(data.get("format"))
    if fmt:
        fmt = fmt.lower()
        if fmt not in REPORT_FORMATS:
            allowed = ", ".join(REPORT_FORMATS)
            raise ConfigError(f"report.format must be one of: {allowed}")
        report.format = fmt
    output = _as_str(data.get("output"))
    if output:
        report.output = root / output
    return report


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _first_env_value() -> Optional[str]:
    for key in ENV_TOKEN_KEYS:
        value = os.getenv(key)
        if value:
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GitHubConfig",
    "REPORT_FORMATS",
    "RepoMirrorConfig",
    "ReportConfig",
    "load_config",
]
