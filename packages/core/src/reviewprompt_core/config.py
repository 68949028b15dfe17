from pathlib import Path
from typing import Optional

import yaml

from reviewprompt_core.models import Platform

DEFAULT_CONFIG: dict = {
    "remote": "origin",
    "platform": None,  # None = detect from the remote URL; "github" or "gitlab" to force
    "github_hosts": ["github.com"],
    "gitlab_hosts": ["gitlab.com"],  # add self-hosted instances, e.g. "gitlab.example.org"
}


def load_config(config_path: str = ".reviewprompt.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .reviewprompt.yml in the current directory
      3. CLI argument overrides
    """
    config = {
        **DEFAULT_CONFIG,
        "github_hosts": list(DEFAULT_CONFIG["github_hosts"]),
        "gitlab_hosts": list(DEFAULT_CONFIG["gitlab_hosts"]),
    }

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


def _host_list(config: dict, key: str) -> list[str]:
    value = config.get(key) or DEFAULT_CONFIG[key]
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ValueError(f"{key} must be a host name or a list of host names, got {value!r}.")
    return list(value)


def host_markers(config: dict) -> dict[Platform, list[str]]:
    """Host substrings used to recognise each platform in a remote URL.

    A single host may be given as a plain string.
    """
    return {
        Platform.GITHUB: _host_list(config, "github_hosts"),
        Platform.GITLAB: _host_list(config, "gitlab_hosts"),
    }


def forced_platform(config: dict) -> Optional[Platform]:
    """Return the platform pinned in config, or None to detect it."""
    key = config.get("platform")
    if not key:
        return None
    return Platform.from_key(key)
