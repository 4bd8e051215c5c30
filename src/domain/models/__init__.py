"""Domain models package."""

from .identifiers import AssetKind, CacheEntry, PuzzleDayKey
from .language import FileLayout, LanguageConfig
from .progress import DayProgress, LeaderboardSnapshot, MemberProgress, ProgressTable
from .submission import RunResult, SubmissionRequest, SubmissionResult
from .workspace import SyncFailure, SyncReport, WorkspaceLayout

__all__ = [
    "AssetKind",
    "CacheEntry",
    "DayProgress",
    "FileLayout",
    "LanguageConfig",
    "LeaderboardSnapshot",
    "MemberProgress",
    "ProgressTable",
    "PuzzleDayKey",
    "RunResult",
    "SubmissionRequest",
    "SubmissionResult",
    "SyncFailure",
    "SyncReport",
    "WorkspaceLayout",
]
