"""Tests for lexer hints derived from file paths."""

from prcomments_core.utils.code import language_for_path


class TestLanguageForPath:
    def test_python_file(self):
        assert language_for_path("app/services/user.py") == "py"

    def test_typescript_file(self):
        assert language_for_path("src/components/Button.tsx") == "tsx"

    def test_last_extension_wins(self):
        assert language_for_path("dist/bundle.min.js") == "js"

    def test_case_insensitive(self):
        assert language_for_path("Main.GO") == "go"

    def test_no_extension_falls_back_to_diff(self):
        assert language_for_path("Makefile") == "diff"

    def test_dotfile_falls_back_to_diff(self):
        assert language_for_path(".gitignore") == "diff"

    def test_dot_in_directory_only(self):
        assert language_for_path("config.d/settings") == "diff"

    def test_missing_path(self):
        assert language_for_path(None) == "diff"
        assert language_for_path("") == "diff"
