from __future__ import annotations

from datetime import datetime

import pytest

from tests._fixtures.metadata_builder import FIXED_NOW, MetadataBuilder


@pytest.fixture
def now() -> datetime:
    """The clock shared by every analysis in a test."""
    return FIXED_NOW


@pytest.fixture
def builder(now: datetime) -> MetadataBuilder:
    """Provide a metadata builder anchored at the fixed test clock."""
    return MetadataBuilder(now)


@pytest.fixture(autouse=True)
def _no_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("REPOMIRROR_GITHUB_TOKEN", raising=False)
