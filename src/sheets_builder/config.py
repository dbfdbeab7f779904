"""Builder configuration.

Settings are read from the environment, optionally seeded from a .env file
in the working directory:
    SHEETS_BASE_URL       - API root (default https://sheets.googleapis.com)
    GOOGLE_API_KEY        - API key, sent as the `key` query parameter
    SHEETS_ACCESS_TOKEN   - OAuth access token, sent as a Bearer header

Variables already present in the environment take precedence over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = "https://sheets.googleapis.com"

ENV_FILE = Path(".env")

BASE_URL_VAR = "SHEETS_BASE_URL"
API_KEY_VAR = "GOOGLE_API_KEY"
ACCESS_TOKEN_VAR = "SHEETS_ACCESS_TOKEN"


def _parse_env_line(line: str) -> tuple[str, str] | None:
    """Split one KEY=VALUE line, or return None for blanks and comments."""
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, _, value = line.partition("=")
    key = key.strip()
    if key.startswith("export "):
        key = key[len("export ") :].strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return (key, value) if key else None


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Seed os.environ from a .env file.

    Variables already set in the environment are left alone.

    Returns:
        The variables that were loaded.
    """
    loaded: dict[str, str] = {}
    if not env_path.is_file():
        return loaded

    for line in env_path.read_text().splitlines():
        pair = _parse_env_line(line)
        if pair is None or pair[0] in os.environ:
            continue
        key, value = pair
        os.environ[key] = value
        loaded[key] = value

    return loaded


@dataclass(frozen=True)
class BuilderConfig:
    """Immutable request builder settings.

    Attributes:
        base_url: Scheme and host of the API. Any path is replaced per request.
        api_key: API key, used only when no access token is set.
        access_token: OAuth bearer token supplied by a token provider.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    access_token: str | None = None

    @property
    def uses_token(self) -> bool:
        """Whether requests authenticate with the access token."""
        return self.access_token is not None

    @classmethod
    def from_env(cls, env_file: Path | None = ENV_FILE) -> BuilderConfig:
        """Build a configuration from environment variables.

        Args:
            env_file: Optional .env file loaded first, relative paths resolved
                against the working directory. Pass None to skip.

        Returns:
            BuilderConfig with unset values left as None.
        """
        if env_file is not None:
            _load_env_file(Path(env_file))

        return cls(
            base_url=os.environ.get(BASE_URL_VAR) or DEFAULT_BASE_URL,
            api_key=os.environ.get(API_KEY_VAR) or None,
            access_token=os.environ.get(ACCESS_TOKEN_VAR) or None,
        )


def get_config_status(config: BuilderConfig) -> dict:
    """Get status of configured settings without exposing secrets.

    Returns:
        Dictionary with configuration status.
    """
    return {
        "base_url": config.base_url,
        "api_key": config.api_key is not None,
        "access_token": config.access_token is not None,
        "auth": "bearer" if config.uses_token else ("key" if config.api_key else "none"),
    }
