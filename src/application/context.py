"""Explicit per-invocation context passed into every workflow."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from loguru import logger

from infrastructure.settings import Settings

OutputSink = Callable[[str], None]


def log_sink(message: str) -> None:
    logger.info(message)


@dataclass(frozen=True)
class ExecutionContext:
    """Credentials, concurrency bound and output sink for one invocation."""

    session_token: str
    leaderboard_id: Optional[str] = None
    max_concurrency: int = 3
    output: OutputSink = field(default=log_sink)

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {self.max_concurrency}")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session_token: str,
        leaderboard_id: Optional[str] = None,
        output: OutputSink = log_sink,
    ) -> "ExecutionContext":
        return cls(
            session_token=session_token,
            leaderboard_id=leaderboard_id,
            max_concurrency=settings.max_concurrency,
            output=output,
        )
