"""Runtime settings loaded from the environment."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from domain.exceptions import ConfigError

DEFAULT_LANGUAGES_FILE = Path(__file__).with_name("languages.yml")

ENV_PREFIX = "AOC_"


class Settings(BaseModel):
    """Configuration shared by every workflow."""

    base_url: str = Field(default="https://adventofcode.com")
    workspace_root: Path = Field(default=Path("advent-of-code"))
    cache_dir: Path = Field(default=Path.home() / ".aoc_cache")
    config_file: Path = Field(default=Path(".aoc_config.yml"))
    languages_file: Path = Field(default=DEFAULT_LANGUAGES_FILE)
    max_concurrency: int = Field(default=3, ge=1)
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="aoc-sync/0.1.0")


def load_settings(env_file: str | None = None) -> Settings:
    """
    Build settings from ``AOC_*`` environment variables.

    Args:
        env_file: Optional ``.env`` file; the default lookup is used otherwise

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    load_dotenv(env_file)

    overrides = {}
    for name in Settings.model_fields:
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value:
            overrides[name] = value

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise ConfigError(f"Invalid settings: {e}") from e

    settings.cache_dir = settings.cache_dir.expanduser()
    settings.config_file = settings.config_file.expanduser()
    settings.workspace_root = settings.workspace_root.expanduser()
    logger.debug(f"Loaded settings: {settings}")
    return settings


def configure_logging(level: str = "INFO") -> None:
    """Send log records at ``level`` and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level)
