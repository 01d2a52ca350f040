from __future__ import annotations

import pytest

from repomirror.scorers import DIMENSION_NAMES, SCORERS, build_scorers, get_scorer


def test_build_scorers_follows_reporting_order() -> None:
    scorers = build_scorers()

    assert [scorer.name for scorer in scorers] == list(DIMENSION_NAMES)
    assert sum(scorer.max_score for scorer in scorers) == 100


def test_get_scorer_returns_fresh_instances() -> None:
    first = get_scorer("documentation")
    second = get_scorer("documentation")

    assert first.max_score == 25
    assert first is not second


def test_get_scorer_rejects_unknown_dimension() -> None:
    with pytest.raises(ValueError, match="Unknown dimension 'security'"):
        get_scorer("security")


def test_build_scorers_detects_misregistered_names(monkeypatch: pytest.MonkeyPatch) -> None:
    patched = dict(SCORERS)
    patched["testing"] = SCORERS["documentation"]
    monkeypatch.setattr("repomirror.scorers.SCORERS", patched)

    with pytest.raises(TypeError):
        build_scorers()
