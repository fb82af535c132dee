from __future__ import annotations

from pathlib import PurePosixPath

DEFAULT_LANGUAGE = "diff"


def language_for_path(file_name: str | None) -> str:
    """Return a lexer hint for a file: its extension without the dot, or ``diff``."""
    if not file_name:
        return DEFAULT_LANGUAGE
    suffix = PurePosixPath(file_name).suffix
    return suffix[1:].lower() if len(suffix) > 1 else DEFAULT_LANGUAGE
