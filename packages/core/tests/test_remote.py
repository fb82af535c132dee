"""Tests for GitHub remote URL parsing."""

import pytest

from prcomments_core.errors import InvalidRemote
from prcomments_core.gh.remote import parse_repo_path


@pytest.mark.parametrize(
    "url",
    [
        "git@github.com:octo/widgets.git",
        "https://github.com/octo/widgets.git",
        "https://github.com/octo/widgets",
        "ssh://git@github.com/octo/widgets.git",
        "https://github.com/octo/widgets/",
        "https://github.com/octo/widgets.git\n",
    ],
)
def test_github_remote_forms(url):
    assert parse_repo_path(url) == ("octo", "widgets")


def test_only_trailing_git_suffix_removed():
    assert parse_repo_path("https://github.com/octo/my.git.tools.git") == ("octo", "my.git.tools")


def test_repo_name_with_dots_kept():
    assert parse_repo_path("git@github.com:octo/site.github.io") == ("octo", "site.github.io")


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/octo/widgets.git",
        "git@bitbucket.org:octo/widgets.git",
        "",
    ],
)
def test_non_github_remote_rejected(url):
    with pytest.raises(InvalidRemote):
        parse_repo_path(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/octo",
        "https://github.com/",
        "git@github.com:/widgets.git",
        "https://github.com/octo/widgets/pull/3",
    ],
)
def test_malformed_github_remote_rejected(url):
    with pytest.raises(InvalidRemote):
        parse_repo_path(url)
