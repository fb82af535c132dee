"""Locate a GitHub token for the GraphQL request.

GITHUB_TOKEN (from the shell or a loaded .env) wins. Otherwise, when
allowed, the token of an existing `gh auth login` session is used.
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

_GH_TOKEN_CMD = ["gh", "auth", "token"]
_GH_TIMEOUT = 5


def _token_from_gh_cli() -> str | None:
    try:
        result = subprocess.run(_GH_TOKEN_CMD, capture_output=True, text=True, timeout=_GH_TIMEOUT)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        logger.debug("gh CLI unavailable for token lookup.")
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_github_token(use_gh_cli: bool = True) -> str | None:
    """Return a token, or None so the fetcher can report AuthRequired."""
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token
    if not use_gh_cli:
        return None

    token = _token_from_gh_cli()
    if token:
        logger.debug("Using GitHub token from gh CLI session.")
    return token
