from services.asset_cache import AssetCache
from services.progress import ProgressTracker
from services.runner import SolutionRunner
from services.workspace import WorkspaceBuilder


def create_asset_cache(cache_dir) -> AssetCache:
    """Factory function to create a filesystem-backed asset cache."""
    from infrastructure.cache_store import FileCacheStore

    return AssetCache(FileCacheStore(cache_dir))


__all__ = [
    "AssetCache",
    "ProgressTracker",
    "SolutionRunner",
    "WorkspaceBuilder",
    "create_asset_cache",
]
