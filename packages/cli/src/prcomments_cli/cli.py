"""CLI entry point for pr-comments.

Prints the unresolved review comments of the pull request whose head branch
is the branch checked out in the given directory.
"""

from __future__ import annotations

import locale
import logging
import os
import sys
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from prcomments_core.errors import PRCommentsError
from prcomments_core.fetcher import fetch_comments
from prcomments_cli.render import render_comments

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _resolve_directory(directory: str | None) -> str:
    if directory is None:
        return os.getcwd()
    path = Path(directory).resolve()
    if not path.exists():
        raise click.ClickException(f"Directory not found: {path}")
    return str(path)


@click.command("pr-comments", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pr-comments", prog_name="pr-comments")
@click.option(
    "--dir",
    "-d",
    "directory",
    default=None,
    metavar="PATH",
    help="Git repository directory (default: current directory).",
)
@click.option(
    "--config",
    "config_path",
    default=".pr-comments.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PR_COMMENTS_CONFIG",
)
@click.option("--timeout", type=float, default=None, help="Seconds to wait for the GitHub API. Overrides config file.")
@click.option("--verbose", "-v", is_flag=True, help="Log git commands and API calls to stderr.")
def comments_cmd(directory: str | None, config_path: str, timeout: float | None, verbose: bool):
    """Show unresolved review comments for the current branch's pull request.

    \b
    Environment variables:
      GITHUB_TOKEN         GitHub token with "repo" scope (or use gh CLI)
      PR_COMMENTS_CONFIG   Alternate configuration file path
    """
    from prcomments_core.config import load_config
    from prcomments_cli.auth import resolve_github_token

    _configure_logging(verbose)
    directory = _resolve_directory(directory)

    # .env in the working directory is optional.
    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = load_config(config_path, cli_overrides={"api_timeout": timeout})
        token = resolve_github_token(use_gh_cli=config.get("gh_cli_fallback", True))
        if token:
            config["github_token"] = token
        comments = fetch_comments(directory, config)
    except PRCommentsError as e:
        logger.debug("pr-comments failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    render_comments(comments, console, theme=config.get("theme", "monokai"))
    return 0


def main(args: list[str] | None = None) -> int:
    """Run the command and return a process exit code.

    Every failure, including click usage errors, maps to exit code 1.
    """
    try:
        rv = comments_cmd.main(args=args, prog_name="pr-comments", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


def _use_user_locale() -> None:
    # Python starts in the C locale; comment dates should follow the user's.
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.debug("Unsupported LC_TIME locale; dates use the C format.")


def run() -> None:
    _use_user_locale()
    sys.exit(main())


if __name__ == "__main__":
    run()
