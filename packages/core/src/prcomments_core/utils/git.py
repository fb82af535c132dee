"""Read-only queries against a local git checkout."""

from __future__ import annotations

import logging
import subprocess

from prcomments_core.errors import GitUnavailable

logger = logging.getLogger(__name__)


def _run_git(directory: str, *args: str, timeout: float | None = None) -> str:
    cmd = ["git", "-C", str(directory), *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise GitUnavailable(f"`git {' '.join(args)}` failed in {directory}: {detail}") from e
    except FileNotFoundError as e:
        raise GitUnavailable("git executable not found on PATH") from e
    except subprocess.TimeoutExpired as e:
        raise GitUnavailable(f"`git {' '.join(args)}` timed out after {timeout}s") from e
    return result.stdout.strip()


def current_branch(directory: str, timeout: float | None = None) -> str:
    """Return the abbreviated name of the checked-out branch."""
    return _run_git(directory, "rev-parse", "--abbrev-ref", "HEAD", timeout=timeout)


def remote_url(directory: str, timeout: float | None = None) -> str:
    """Return the configured URL of the ``origin`` remote."""
    url = _run_git(directory, "config", "--get", "remote.origin.url", timeout=timeout)
    if not url:
        raise GitUnavailable(f"No origin remote configured in {directory}")
    return url
