from .aoc_client import AdventOfCodeClient
from .cache_store import FileCacheStore, MemoryCacheStore
from .credentials import CredentialsStore
from .http_client import AsyncHTTPClient, HTTPResponse
from .language_registry import LanguageRegistry
from .settings import Settings, configure_logging, load_settings

__all__ = [
    "AdventOfCodeClient",
    "AsyncHTTPClient",
    "CredentialsStore",
    "FileCacheStore",
    "HTTPResponse",
    "LanguageRegistry",
    "MemoryCacheStore",
    "Settings",
    "configure_logging",
    "load_settings",
]
