"""Pydantic schemas for the private leaderboard JSON document."""

from typing import Any

from pydantic import BaseModel, Field


class MemberPayload(BaseModel):
    """One member entry of a private leaderboard."""

    id: int | str
    name: str | None = None
    local_score: int = 0
    stars: int = 0
    completion_day_level: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)


class LeaderboardPayload(BaseModel):
    """Private leaderboard document."""

    members: dict[str, MemberPayload]
    event: str | None = None
    owner_id: int | str | None = None
