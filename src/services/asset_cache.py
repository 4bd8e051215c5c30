"""Read-through cache for puzzle inputs and descriptions."""

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from domain.exceptions import AocError, FetchError
from domain.models import AssetKind, CacheEntry, PuzzleDayKey
from infrastructure.parsers import CacheStoreProtocol

Fetcher = Callable[[], Awaitable[str]]


class AssetCache:
    """Serves cached assets and fetches each missing one at most once."""

    def __init__(self, store: CacheStoreProtocol):
        self.store = store
        self._locks: dict[tuple[PuzzleDayKey, AssetKind], asyncio.Lock] = {}

    def get(self, key: PuzzleDayKey, kind: AssetKind) -> CacheEntry | None:
        content = self.store.read(key, kind)
        if content is None:
            return None
        return CacheEntry(key=key, kind=kind, content=content)

    async def get_or_fetch(self, key: PuzzleDayKey, kind: AssetKind, fetcher: Fetcher) -> str:
        """
        Return the cached asset, fetching and storing it on a miss.

        Concurrent callers for the same key wait on a shared lock, so the
        fetcher runs at most once per key.

        Raises:
            FetchError: If the asset is not cached and fetching fails
        """
        cached = self.store.read(key, kind)
        if cached is not None:
            logger.debug(f"{kind.value.capitalize()} for {key} loaded from cache")
            return cached

        async with self._lock_for(key, kind):
            cached = self.store.read(key, kind)
            if cached is not None:
                logger.debug(f"{kind.value.capitalize()} for {key} loaded from cache")
                return cached

            try:
                content = await fetcher()
            except AocError:
                raise
            except Exception as e:
                logger.error(f"Failed to fetch {kind.value} for {key}: {e}")
                raise FetchError(f"Failed to fetch {kind.value} for {key}: {e}") from e

            try:
                self.store.write(key, kind, content)
            except OSError as e:
                logger.error(f"Failed to cache {kind.value} for {key}: {e}")
                raise FetchError(f"Failed to cache {kind.value} for {key}: {e}") from e

            logger.debug(f"Cached {kind.value} for {key}")
            return content

    def clear(self) -> None:
        """Remove every cached entry."""
        self.store.clear()
        self._locks.clear()

    def _lock_for(self, key: PuzzleDayKey, kind: AssetKind) -> asyncio.Lock:
        return self._locks.setdefault((key, kind), asyncio.Lock())
