"""Terminal rendering of review comments."""

from __future__ import annotations

from rich.console import Console
from rich.syntax import Syntax

from prcomments_core.models import ReviewComment
from prcomments_core.utils.code import language_for_path

NO_COMMENTS = "No comments found for the current branch's PR."
SEPARATOR = "─" * 50


def _line_info(comment: ReviewComment) -> str | None:
    if comment.start_line is not None and comment.end_line is not None:
        return f"Lines: {comment.start_line}-{comment.end_line}"
    if comment.line is not None:
        return f"Line: {comment.line}"
    return None


def render_comment(console: Console, comment: ReviewComment, index: int, theme: str = "monokai") -> None:
    # Comment text is user content; never let rich parse it as markup.
    def out(text: str = "") -> None:
        console.print(text, markup=False, highlight=False)

    out(f"Comment #{index}")
    out(f"Author: {comment.author_login}")
    out(f"Date: {comment.created_at.astimezone().strftime('%c')}")

    if comment.path:
        out(f"File: {comment.path}")
        line_info = _line_info(comment)
        if line_info:
            out(line_info)

    if comment.diff_hunk:
        out("Context:")
        console.print(Syntax(comment.diff_hunk, language_for_path(comment.path), theme=theme, word_wrap=True))

    out(SEPARATOR)
    out(comment.body)
    out(SEPARATOR)
    out()


def render_comments(comments: list[ReviewComment], console: Console, theme: str = "monokai") -> None:
    """Print every comment in order, or a notice when there are none."""
    if not comments:
        console.print(NO_COMMENTS, markup=False, highlight=False)
        return

    console.print("\n[bold]PR Comments:[/bold]\n")
    for i, comment in enumerate(comments, 1):
        render_comment(console, comment, i, theme=theme)
