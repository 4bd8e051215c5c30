"""Parsers for extracting data from platform responses."""

from .answer_parser import AnswerReplyParser
from .description_parser import DescriptionParser
from .interfaces import (
    CacheStoreProtocol,
    DescriptionExtractorProtocol,
    HTTPClientProtocol,
    RemoteClientProtocol,
    SolutionExecutorProtocol,
)
from .leaderboard_parser import LeaderboardParser

__all__ = [
    "AnswerReplyParser",
    "CacheStoreProtocol",
    "DescriptionExtractorProtocol",
    "DescriptionParser",
    "HTTPClientProtocol",
    "LeaderboardParser",
    "RemoteClientProtocol",
    "SolutionExecutorProtocol",
]
