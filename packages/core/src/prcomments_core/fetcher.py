"""Retrieve the unresolved review comments for the current branch's PR."""

from __future__ import annotations

import logging

from prcomments_core.errors import AuthRequired, PRCommentsError, UnknownFetchError
from prcomments_core.gh.remote import parse_repo_path
from prcomments_core.gh.review_threads import get_review_threads
from prcomments_core.models import ReviewComment
from prcomments_core.normalizer import normalize
from prcomments_core.utils.git import current_branch, remote_url

logger = logging.getLogger(__name__)

AUTH_HELP = (
    "Authentication required. Please set GITHUB_TOKEN environment variable.\n"
    "You can create one at https://github.com/settings/tokens\n"
    'The token needs "repo" scope to access repository data.'
)


def fetch_comments(directory: str, config: dict) -> list[ReviewComment]:
    """Return unresolved review comments for the PR whose head is the checked-out branch.

    ``config`` is the dict produced by load_config(); the token must already
    be resolved into ``config["github_token"]``. Returns an empty list when
    the branch has no pull request.

    Known failures raise their own PRCommentsError subclass. Anything else is
    wrapped in UnknownFetchError with the original exception as its cause.
    """
    try:
        return _fetch(directory, config)
    except PRCommentsError:
        raise
    except Exception as e:
        raise UnknownFetchError(f"An unknown error occurred while fetching PR comments: {e}") from e


def _fetch(directory: str, config: dict) -> list[ReviewComment]:
    git_timeout = config.get("git_timeout")
    branch = current_branch(directory, timeout=git_timeout)
    owner, repo = parse_repo_path(remote_url(directory, timeout=git_timeout))
    logger.debug("Looking up PR for %s/%s@%s", owner, repo, branch)

    token = config.get("github_token")
    if not token:
        raise AuthRequired(AUTH_HELP)

    threads = get_review_threads(
        config["api_url"],
        token,
        owner,
        repo,
        branch,
        timeout=config.get("api_timeout"),
    )
    if threads is None:
        logger.debug("No pull request found for branch %s", branch)
        return []
    return normalize(threads)
