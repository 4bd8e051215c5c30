"""Protocol interfaces for platform access and local storage."""

from typing import Mapping, Protocol

from domain.models import (
    AssetKind,
    LeaderboardSnapshot,
    PuzzleDayKey,
    SubmissionRequest,
    SubmissionResult,
)
from infrastructure.http_client import HTTPResponse


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get(self, url: str, cookies: Mapping[str, str] | None = None) -> HTTPResponse:
        """Issue a GET request."""
        ...

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        cookies: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Issue a form-encoded POST request."""
        ...


class DescriptionExtractorProtocol(Protocol):
    """Protocol for turning a puzzle page into description text."""

    def extract(self, html: str) -> str:
        """Extract the puzzle description, raising ExtractionError if absent."""
        ...


class RemoteClientProtocol(Protocol):
    """Protocol for the puzzle platform client."""

    async def fetch_input(self, year: int, day: int, token: str) -> str:
        """Get raw puzzle input."""
        ...

    async def fetch_description(self, year: int, day: int, token: str) -> str:
        """Get the puzzle description as Markdown."""
        ...

    async def submit_answer(self, request: SubmissionRequest, token: str) -> SubmissionResult:
        """Submit an answer exactly once."""
        ...

    async def fetch_leaderboard(
        self, year: int, leaderboard_id: str, token: str
    ) -> LeaderboardSnapshot:
        """Get a private leaderboard snapshot."""
        ...


class CacheStoreProtocol(Protocol):
    """Protocol for key-value storage of cached assets."""

    def read(self, key: PuzzleDayKey, kind: AssetKind) -> str | None:
        """Return stored content or None."""
        ...

    def write(self, key: PuzzleDayKey, kind: AssetKind, content: str) -> None:
        """Store content atomically."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...


class SolutionExecutorProtocol(Protocol):
    """Protocol for running a solution command."""

    async def execute(self, command: str, cwd: str, timeout: float | None = None) -> str:
        """Run ``command`` in ``cwd`` and return its standard output."""
        ...
