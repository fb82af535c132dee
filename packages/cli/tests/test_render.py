"""Tests for terminal rendering of review comments."""

import io
from datetime import datetime, timezone

from rich.console import Console

from prcomments_cli.render import NO_COMMENTS, SEPARATOR, render_comments
from prcomments_core.models import ReviewComment

CREATED = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


def _render(comments):
    console = _console()
    render_comments(comments, console)
    return console.file.getvalue()


def _comment(**overrides):
    fields = dict(
        id="PRRC_1",
        body="Use a context manager.",
        author_login="alice",
        created_at=CREATED,
        updated_at=CREATED,
        commit_id="a" * 40,
    )
    fields.update(overrides)
    return ReviewComment(**fields)


class TestRenderComments:
    def test_empty_prints_notice_only(self):
        out = _render([])
        assert out.strip() == NO_COMMENTS

    def test_header_and_sequence_labels(self):
        out = _render([_comment(), _comment(id="PRRC_2")])
        assert "PR Comments:" in out
        assert "Comment #1" in out
        assert "Comment #2" in out
        assert out.index("Comment #1") < out.index("Comment #2")

    def test_author_date_and_body(self):
        out = _render([_comment()])
        assert "Author: alice" in out
        assert f"Date: {CREATED.astimezone().strftime('%c')}" in out
        assert "Use a context manager." in out

    def test_body_wrapped_in_separators(self):
        out = _render([_comment()])
        lines = out.splitlines()
        body_at = lines.index("Use a context manager.")
        assert lines[body_at - 1] == SEPARATOR
        assert lines[body_at + 1] == SEPARATOR
        assert lines[body_at + 2] == ""

    def test_separator_is_fifty_wide(self):
        assert len(SEPARATOR) == 50

    def test_single_line(self):
        out = _render([_comment(path="src/app.py", line=7)])
        assert "File: src/app.py" in out
        assert "Line: 7" in out
        assert "Lines:" not in out

    def test_line_range_preferred(self):
        out = _render([_comment(path="src/app.py", line=7, start_line=10, end_line=14)])
        assert "Lines: 10-14" in out
        assert "Line: 7" not in out

    def test_no_path_omits_file_block(self):
        out = _render([_comment(line=7)])
        assert "File:" not in out
        assert "Line:" not in out

    def test_path_without_line(self):
        out = _render([_comment(path="README.md")])
        assert "File: README.md" in out
        assert "Line" not in out

    def test_diff_context_rendered(self):
        hunk = "@@ -1,2 +1,3 @@\n def handler():\n+    return compute()"
        out = _render([_comment(path="src/app.py", line=2, diff_hunk=hunk)])
        assert "Context:" in out
        assert "return compute()" in out

    def test_no_context_without_hunk(self):
        out = _render([_comment(path="src/app.py", line=2)])
        assert "Context:" not in out

    def test_extensionless_path_still_renders_hunk(self):
        hunk = "@@ -1 +1 @@\n-all: build\n+all: build test"
        out = _render([_comment(path="Makefile", diff_hunk=hunk)])
        assert "all: build test" in out

    def test_markup_in_body_printed_literally(self):
        out = _render([_comment(body="Use [bold]x[/bold] and [link]")])
        assert "Use [bold]x[/bold] and [link]" in out

    def test_zero_line_shown(self):
        out = _render([_comment(path="src/app.py", line=0)])
        assert "Line: 0" in out
