from __future__ import annotations

from prcomments_core.errors import InvalidRemote

# Handle both HTTPS and SSH remotes:
# https://github.com/owner/repo.git  →  owner/repo
# git@github.com:owner/repo.git      →  owner/repo
_GITHUB_PREFIXES = (
    "git@github.com:",
    "ssh://git@github.com/",
    "https://github.com/",
    "http://github.com/",
)


def parse_repo_path(remote_url: str) -> tuple[str, str]:
    """Split a GitHub remote URL into ``(owner, repo)``.

    Raises InvalidRemote for other hosts and for URLs that do not carry
    exactly two non-empty path segments.
    """
    url = remote_url.strip()
    for prefix in _GITHUB_PREFIXES:
        if url.startswith(prefix):
            slug = url[len(prefix) :]
            break
    else:
        raise InvalidRemote(f"Not a GitHub remote: {remote_url!r}")

    slug = slug.rstrip("/").removesuffix(".git")
    parts = slug.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidRemote(f"Cannot determine owner/repo from remote: {remote_url!r}")
    owner, repo = parts
    return owner, repo
