from __future__ import annotations

import pytest

from repomirror.errors import InvalidInput
from repomirror.github import RepositoryRef, parse_repository_url


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/octo/widget",
        "http://github.com/octo/widget",
        "https://www.github.com/octo/widget",
        "https://github.com/octo/widget/",
        "https://github.com/octo/widget.git",
        "  https://github.com/octo/widget  ",
        "octo/widget",
    ],
)
def test_accepts_repository_urls(url: str) -> None:
    assert parse_repository_url(url) == RepositoryRef(owner="octo", name="widget")


def test_keeps_dots_and_dashes_in_names() -> None:
    ref = parse_repository_url("https://github.com/some-org/widget.js")
    assert ref.full_name == "some-org/widget.js"
    assert ref.html_url == "https://github.com/some-org/widget.js"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "https://gitlab.com/octo/widget",
        "https://github.com/octo",
        "https://github.com/octo/widget/tree/main",
        "github.com/octo/widget",
        "https://github.com/octo/..",
        None,
    ],
)
def test_rejects_other_inputs(url) -> None:
    with pytest.raises(InvalidInput, match="Invalid GitHub repository URL"):
        parse_repository_url(url)
