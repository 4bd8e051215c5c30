"""Backing stores for cached puzzle assets."""

import os
import shutil
import tempfile
from pathlib import Path

from loguru import logger

from domain.models import AssetKind, PuzzleDayKey

from .parsers.interfaces import CacheStoreProtocol

DEFAULT_CACHE_DIR = Path.home() / ".aoc_cache"


class FileCacheStore(CacheStoreProtocol):
    """Stores each asset as a file under ``<root>/<year>/``."""

    FILENAMES = {
        AssetKind.INPUT: "day_{day}.txt",
        AssetKind.DESCRIPTION: "day_{day}_description.md",
    }

    def __init__(self, root: Path = DEFAULT_CACHE_DIR):
        self.root = Path(root)

    def path_for(self, key: PuzzleDayKey, kind: AssetKind) -> Path:
        return self.root / str(key.year) / self.FILENAMES[kind].format(day=key.day)

    def read(self, key: PuzzleDayKey, kind: AssetKind) -> str | None:
        path = self.path_for(key, kind)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: PuzzleDayKey, kind: AssetKind, content: str) -> None:
        """Write through a temporary file so readers never see a partial entry."""
        path = self.path_for(key, kind)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        if not self.root.exists():
            logger.debug(f"Cache directory {self.root} does not exist")
            return
        shutil.rmtree(self.root)
        logger.info(f"Removed cache directory {self.root}")


class MemoryCacheStore(CacheStoreProtocol):
    """In-process store, mainly for tests."""

    def __init__(self) -> None:
        self.entries: dict[tuple[PuzzleDayKey, AssetKind], str] = {}

    def read(self, key: PuzzleDayKey, kind: AssetKind) -> str | None:
        return self.entries.get((key, kind))

    def write(self, key: PuzzleDayKey, kind: AssetKind, content: str) -> None:
        self.entries[(key, kind)] = content

    def clear(self) -> None:
        self.entries.clear()
