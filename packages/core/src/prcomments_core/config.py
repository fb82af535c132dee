import os
from pathlib import Path
from typing import Optional

import yaml

from prcomments_core.errors import InvalidConfig

DEFAULT_CONFIG: dict = {
    "api_url": "https://api.github.com/graphql",
    "api_timeout": 30,  # seconds for the GraphQL request
    "git_timeout": 10,  # seconds per git subprocess
    "gh_cli_fallback": True,  # try `gh auth token` when GITHUB_TOKEN is unset
    "theme": "monokai",  # pygments style used for diff context
}


def _read_config_file(path: Path) -> dict:
    try:
        with open(path) as f:
            file_config = yaml.safe_load(f)
    except OSError as e:
        raise InvalidConfig(f"Cannot read config file {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        detail = " ".join(str(e).split())
        raise InvalidConfig(f"Invalid YAML in config file {path}: {detail}") from e

    if file_config is None:
        return {}
    if not isinstance(file_config, dict):
        raise InvalidConfig(f"Config file {path} must contain a mapping, not a {type(file_config).__name__}")
    return file_config


def load_config(config_path: str = ".pr-comments.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Build the settings dict handed to fetch_comments(). Later sources win:
      1. DEFAULT_CONFIG
      2. the YAML file at config_path, when it exists
      3. non-None CLI overrides

    The GitHub token is only ever taken from the environment.
    Raises InvalidConfig when the file exists but cannot be used.
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        config.update(_read_config_file(path))

    config.update({key: value for key, value in (cli_overrides or {}).items() if value is not None})
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config
