"""Persistent storage of the session token and leaderboard identifier."""

import os
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from loguru import logger

from domain.exceptions import ConfigError

SESSION_KEY = "session_cookie"
LEADERBOARD_KEY = "leaderboard_id"
SESSION_ENV = "AOC_SESSION"

Prompt = Callable[[], str]


class CredentialsStore:
    """YAML-backed credentials file, created on first prompt and reused."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def session_token(self, prompt: Optional[Prompt] = None) -> str:
        """Session token from the environment, the file, or ``prompt``."""
        env_token = os.getenv(SESSION_ENV)
        if env_token:
            return env_token
        return self._get_or_prompt(SESSION_KEY, prompt, "session cookie")

    def leaderboard_id(self, prompt: Optional[Prompt] = None) -> str:
        """Private leaderboard identifier from the file or ``prompt``."""
        return self._get_or_prompt(LEADERBOARD_KEY, prompt, "leaderboard ID")

    def stored_leaderboard_id(self) -> Optional[str]:
        value = self._read().get(LEADERBOARD_KEY)
        return str(value) if value else None

    def _get_or_prompt(self, key: str, prompt: Optional[Prompt], label: str) -> str:
        data = self._read()
        value = data.get(key)
        if value:
            return str(value)

        if prompt is None:
            raise ConfigError(f"No {label} stored in {self.path}")

        value = prompt().strip()
        if not value:
            raise ConfigError(f"Empty {label} entered")

        data[key] = value
        self._write(data)
        logger.info(f"Saved {label} to {self.path}")
        return value

    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read credentials {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid credentials file format in {self.path}: expected a mapping")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
            # Owner read/write only
            self.path.chmod(0o600)
        except OSError as e:
            raise ConfigError(f"Failed to write credentials {self.path}: {e}") from e
