"""Failure kinds raised by the comment retrieval pipeline.

Every error derives from PRCommentsError so the CLI can catch the whole
family in one place, while callers and tests can still tell the kinds apart
by type. Wrapped failures keep the original exception as ``__cause__``.
"""

from __future__ import annotations


class PRCommentsError(Exception):
    """Base class for all pr-comments failures."""


class InvalidConfig(PRCommentsError):
    """The configuration file cannot be read or is not a YAML mapping."""


class GitUnavailable(PRCommentsError):
    """git could not be run, the directory is not a repository, or the remote is missing."""


class InvalidRemote(PRCommentsError):
    """The origin remote URL does not name a GitHub owner/repo pair."""


class AuthRequired(PRCommentsError):
    """No GitHub token is available for the API call."""


class ApiError(PRCommentsError):
    """GitHub answered with a non-success status or a GraphQL error payload."""

    def __init__(self, message: str, status_code: int | None = None, errors: list | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class UnknownFetchError(PRCommentsError):
    """Any other failure while fetching comments. Check ``__cause__`` for the original."""
