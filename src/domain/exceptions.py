"""Exception hierarchy for puzzle synchronization."""


class AocError(Exception):
    """Base error for all puzzle workflow failures."""

    pass


class ConfigError(AocError):
    """Language registry, settings or credentials are missing or invalid."""

    pass


class FetchError(AocError):
    """Network failure or non-success status while fetching an asset."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ExtractionError(FetchError):
    """The expected content region is missing from a fetched page."""

    pass


class SubmitError(AocError):
    """Non-success status while submitting an answer."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ParseError(AocError):
    """Malformed leaderboard payload."""

    pass


class LeaderboardError(AocError):
    """Non-success leaderboard status or member not present."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ScaffoldError(AocError):
    """Filesystem failure while creating the workspace."""

    pass


class SolutionNotFoundError(AocError):
    """No solution file exists for the requested day or part."""

    pass


class RunError(AocError):
    """A solution process failed or timed out."""

    pass
