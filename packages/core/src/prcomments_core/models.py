from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ReviewComment:
    """One unresolved review comment, flattened out of its thread.

    ``id`` is GitHub's opaque node id and is only meaningful as a handle.
    ``line`` is a diff position (current, falling back to original), while
    ``start_line``/``end_line`` are file lines and only set for multi-line
    comments.
    """

    id: str
    body: str
    author_login: str
    created_at: datetime
    updated_at: datetime
    commit_id: str
    database_id: int | None = None
    path: str | None = None
    line: int | None = None
    start_line: int | None = None
    end_line: int | None = None
    diff_hunk: str | None = None
    is_resolved: bool = False
