from __future__ import annotations

from pathlib import Path

import pytest

from repomirror.config import CONFIG_FILENAME, ConfigError, load_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / CONFIG_FILENAME
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.root == tmp_path.resolve()
    assert config.github.api_url == "https://api.github.com"
    assert config.github.token is None
    assert config.github.timeout == 30.0
    assert config.github.commit_limit == 100
    assert config.report.format == "markdown"
    assert config.report.output is None


def test_reads_github_and_report_sections(tmp_path: Path) -> None:
    _write(
        tmp_path,
        """
github:
  api_url: https://github.example.com/api/v3/
  token: abc123
  timeout: 12
  commit_limit: 25
report:
  format: JSON
  output: reports/evaluation.json
""",
    )

    config = load_config(tmp_path)

    assert config.github.api_url == "https://github.example.com/api/v3"
    assert config.github.token == "abc123"
    assert config.github.timeout == 12.0
    assert config.github.commit_limit == 25
    assert config.report.format == "json"
    assert config.report.output == tmp_path.resolve() / "reports" / "evaluation.json"


def test_accepts_explicit_file_path(tmp_path: Path) -> None:
    path = _write(tmp_path, "report:\n  format: markdown\n")

    assert load_config(path).root == tmp_path.resolve()


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    _write(tmp_path, "   \n")

    assert load_config(tmp_path).report.format == "markdown"


def test_environment_token_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    assert load_config(tmp_path).github.token == "env-token"

    _write(tmp_path, "github:\n  token: file-token\n")
    assert load_config(tmp_path).github.token == "file-token"


@pytest.mark.parametrize(
    "text",
    [
        "github:\n  timeout: 0\n",
        "github:\n  commit_limit: 500\n",
        "report:\n  format: html\n",
        "- just\n- a list\n",
        "github: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    _write(tmp_path, text)

    with pytest.raises(ConfigError):
        load_config(tmp_path)
