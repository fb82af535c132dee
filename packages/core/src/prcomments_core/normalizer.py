"""Turn raw GraphQL review threads into flat ReviewComment records."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from prcomments_core.models import ReviewComment

# GitHub shows comments from deleted accounts as authored by "ghost".
_DELETED_AUTHOR = "ghost"


def parse_datetime(dt_str: str) -> datetime:
    """Parse GitHub API datetime string to datetime object."""
    # GitHub uses ISO 8601 format: 2026-01-30T23:06:02Z
    return datetime.fromisoformat(dt_str.replace("Z", "+00:00"))


def _first_defined(*values):
    for value in values:
        if value is not None:
            return value
    return None


def _numeric_id(node: dict[str, Any]) -> int | None:
    if node.get("databaseId") is not None:
        return int(node["databaseId"])
    node_id = node.get("id") or ""
    return int(node_id) if node_id.isdecimal() else None


def normalize_comment(node: dict[str, Any]) -> ReviewComment:
    """Map one raw comment node to a ReviewComment."""
    author = node.get("author") or {}
    commit = node.get("commit") or {}
    start_line = node.get("startLine")

    return ReviewComment(
        id=node["id"],
        database_id=_numeric_id(node),
        body=node.get("body", ""),
        author_login=author.get("login") or _DELETED_AUTHOR,
        created_at=parse_datetime(node["createdAt"]),
        updated_at=parse_datetime(node["updatedAt"]),
        path=node.get("path"),
        line=_first_defined(node.get("position"), node.get("originalPosition")),
        start_line=start_line,
        end_line=node.get("line") if start_line is not None else None,
        commit_id=commit.get("oid", ""),
        diff_hunk=node.get("diffHunk"),
        is_resolved=False,
    )


def normalize(threads: Iterable[dict[str, Any]]) -> list[ReviewComment]:
    """Flatten unresolved threads into comments, keeping thread then comment order."""
    return [
        normalize_comment(node)
        for thread in threads
        if not thread.get("isResolved")
        for node in thread["comments"]["nodes"]
    ]
