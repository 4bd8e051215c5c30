"""Registry of per-language scaffolding configuration."""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml
from loguru import logger
from pydantic import ValidationError

from domain.exceptions import ConfigError
from domain.models import LanguageConfig
from infrastructure.schemas import LanguageEntry, LanguageFile

from .settings import DEFAULT_LANGUAGES_FILE


class LanguageRegistry:
    """Read-only lookup of language configurations loaded from a YAML file."""

    def __init__(self, path: Path = DEFAULT_LANGUAGES_FILE):
        self.path = Path(path)
        self._languages: Mapping[str, LanguageConfig] | None = None

    def load(self) -> Mapping[str, LanguageConfig]:
        """
        Load the registry once and return it.

        Raises:
            ConfigError: If the file is missing, not YAML, or fails validation
        """
        if self._languages is not None:
            return self._languages

        if not self.path.is_file():
            raise ConfigError(f"Language registry not found: {self.path}")

        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in language registry {self.path}: {e}") from e

        if not isinstance(data, dict) or not data:
            raise ConfigError(f"Language registry {self.path} must be a non-empty mapping")

        try:
            entries = LanguageFile.model_validate(data).root
        except ValidationError as e:
            raise ConfigError(f"Invalid language registry {self.path}: {e}") from e

        self._languages = MappingProxyType(
            {name: self._to_config(name, entry) for name, entry in entries.items()}
        )
        logger.debug(f"Loaded {len(self._languages)} language(s) from {self.path}")
        return self._languages

    def get(self, name: str) -> LanguageConfig:
        """Configuration for ``name``; raises ConfigError if unknown."""
        languages = self.load()
        try:
            return languages[name]
        except KeyError:
            raise ConfigError(
                f"Unknown language '{name}'. Supported: {', '.join(sorted(languages))}"
            ) from None

    def names(self) -> list[str]:
        return list(self.load())

    @staticmethod
    def _to_config(name: str, entry: LanguageEntry) -> LanguageConfig:
        extra = {"filename": entry.filename} if entry.filename else {}
        return LanguageConfig(
            name=name,
            extension=entry.extension,
            template=entry.solution_template,
            run_command=entry.run_command,
            layout=entry.layout,
            project_files=entry.project_files,
            **extra,
        )
