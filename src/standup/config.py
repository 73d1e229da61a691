"""Configuration management for standup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .adapters.github_events import API_BASE

logger = logging.getLogger(__name__)

ENV_FILE = Path(os.environ.get("STANDUP_ENV_FILE", ".env"))

# Setting name -> Config attribute
SETTINGS = {
    "GITHUB_TOKEN": "github_token",
    "GITHUB_USERNAME": "github_username",
    "REPORT_FILE": "report_file",
    "GITHUB_API_URL": "api_base",
}


@dataclass
class Config:
    """standup configuration."""

    github_token: str = ""
    github_username: str = ""
    report_file: str = ""
    api_base: str = API_BASE

    def missing(self, *names: str) -> list[str]:
        """Return the setting names (e.g. GITHUB_TOKEN) among names that are unset."""
        return [name for name in names if not getattr(self, SETTINGS[name])]


def _parse_value(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"'):
        end_quote = value.find('"', 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if value.startswith("'"):
        end_quote = value.find("'", 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_env_file(text: str) -> dict[str, str]:
    """Parse KEY=value lines from a .env style file."""
    values = {}

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("export "):
            line = line[len("export "):].lstrip()

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        values[key.strip().upper()] = _parse_value(value.strip())

    return values


def load_config(env_file: Path | str | None = None) -> Config:
    """
    Load configuration from a .env file and the environment.

    Environment variables win over values from the file. A missing file is
    not an error.
    """
    path = Path(env_file) if env_file else ENV_FILE
    values: dict[str, str] = {}

    if path.exists():
        values = parse_env_file(path.read_text())
    else:
        logger.debug(f"No config file at {path}, using environment only")

    config = Config()
    for name, attr in SETTINGS.items():
        value = os.environ.get(name) or values.get(name)
        if value:
            setattr(config, attr, value)

    return config
