"""Unit tests for the read-through asset cache."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from domain.exceptions import ExtractionError, FetchError
from domain.models import AssetKind, PuzzleDayKey
from infrastructure.cache_store import FileCacheStore, MemoryCacheStore
from services.asset_cache import AssetCache


class TestAssetCache:
    """Cache hits, misses and failure handling."""

    @pytest.fixture
    def cache(self):
        return AssetCache(MemoryCacheStore())

    @pytest.mark.asyncio
    async def test_second_lookup_does_not_fetch(self, cache):
        key = PuzzleDayKey(2023, 5)
        fetcher = AsyncMock(side_effect=["1,2,3", RuntimeError("network used twice")])

        first = await cache.get_or_fetch(key, AssetKind.INPUT, fetcher)
        second = await cache.get_or_fetch(key, AssetKind.INPUT, fetcher)

        assert first == second == "1,2,3"
        assert fetcher.await_count == 1

    @pytest.mark.asyncio
    async def test_round_trip(self, cache):
        key = PuzzleDayKey(year=2023, day=5)
        await cache.get_or_fetch(key, AssetKind.INPUT, AsyncMock(return_value="1,2,3"))

        entry = cache.get(PuzzleDayKey(year=2023, day=5), AssetKind.INPUT)

        assert entry is not None
        assert entry.content == "1,2,3"

    @pytest.mark.asyncio
    async def test_kinds_and_days_do_not_collide(self, cache):
        await cache.get_or_fetch(PuzzleDayKey(2023, 5), AssetKind.INPUT, AsyncMock(return_value="a"))
        await cache.get_or_fetch(
            PuzzleDayKey(2023, 5), AssetKind.DESCRIPTION, AsyncMock(return_value="b")
        )
        await cache.get_or_fetch(PuzzleDayKey(2022, 5), AssetKind.INPUT, AsyncMock(return_value="c"))

        assert cache.get(PuzzleDayKey(2023, 5), AssetKind.INPUT).content == "a"
        assert cache.get(PuzzleDayKey(2023, 5), AssetKind.DESCRIPTION).content == "b"
        assert cache.get(PuzzleDayKey(2022, 5), AssetKind.INPUT).content == "c"
        assert cache.get(PuzzleDayKey(2022, 6), AssetKind.INPUT) is None

    @pytest.mark.asyncio
    async def test_failed_fetch_leaves_no_entry(self, cache):
        key = PuzzleDayKey(2023, 1)

        with pytest.raises(FetchError):
            await cache.get_or_fetch(key, AssetKind.INPUT, AsyncMock(side_effect=OSError("reset")))

        assert cache.get(key, AssetKind.INPUT) is None

    @pytest.mark.asyncio
    async def test_domain_errors_propagate_unchanged(self, cache):
        key = PuzzleDayKey(2023, 1)
        fetcher = AsyncMock(side_effect=ExtractionError("no article"))

        with pytest.raises(ExtractionError):
            await cache.get_or_fetch(key, AssetKind.DESCRIPTION, fetcher)

    @pytest.mark.asyncio
    async def test_concurrent_callers_fetch_once(self, cache):
        key = PuzzleDayKey(2023, 7)
        calls = 0

        async def fetcher():
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return "content"

        results = await asyncio.gather(
            *(cache.get_or_fetch(key, AssetKind.INPUT, fetcher) for _ in range(5))
        )

        assert results == ["content"] * 5
        assert calls == 1

    @pytest.mark.asyncio
    async def test_store_write_failure_becomes_fetch_error(self):
        store = MagicMock()
        store.read.return_value = None
        store.write.side_effect = OSError("disk full")
        cache = AssetCache(store)

        with pytest.raises(FetchError, match="2023/day/5") as exc_info:
            await cache.get_or_fetch(
                PuzzleDayKey(2023, 5), AssetKind.INPUT, AsyncMock(return_value="1,2,3")
            )

        assert "disk full" in str(exc_info.value)

    def test_clear_on_empty_cache(self, cache):
        cache.clear()
        cache.clear()


class TestFileCacheStore:
    """Filesystem-backed store."""

    def test_write_then_read(self, tmp_path):
        store = FileCacheStore(tmp_path / "cache")
        key = PuzzleDayKey(2023, 5)

        store.write(key, AssetKind.INPUT, "1,2,3")

        assert store.read(key, AssetKind.INPUT) == "1,2,3"
        assert (tmp_path / "cache" / "2023" / "day_5.txt").read_text() == "1,2,3"

    def test_description_uses_separate_file(self, tmp_path):
        store = FileCacheStore(tmp_path)
        key = PuzzleDayKey(2023, 5)

        store.write(key, AssetKind.DESCRIPTION, "# Day 5")

        assert store.read(key, AssetKind.INPUT) is None
        assert (tmp_path / "2023" / "day_5_description.md").is_file()

    def test_no_temporary_files_left(self, tmp_path):
        store = FileCacheStore(tmp_path)
        store.write(PuzzleDayKey(2023, 5), AssetKind.INPUT, "data")

        assert [p.name for p in (tmp_path / "2023").iterdir()] == ["day_5.txt"]

    def test_clear_removes_everything(self, tmp_path):
        store = FileCacheStore(tmp_path / "cache")
        store.write(PuzzleDayKey(2023, 5), AssetKind.INPUT, "data")

        store.clear()

        assert not (tmp_path / "cache").exists()
        store.clear()
