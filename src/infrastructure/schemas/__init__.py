"""Pydantic schemas for external documents."""

from .languages import LanguageEntry, LanguageFile
from .leaderboard import LeaderboardPayload, MemberPayload

__all__ = ["LanguageEntry", "LanguageFile", "LeaderboardPayload", "MemberPayload"]
