"""Value objects for leaderboard and progress data."""

from dataclasses import dataclass, field
from typing import Mapping

from .identifiers import FIRST_DAY, LAST_DAY


@dataclass(frozen=True)
class MemberProgress:
    """Completion state of one leaderboard member."""

    id: str
    name: str | None = None
    local_score: int = 0
    stars: int = 0
    completion: Mapping[int, frozenset[int]] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.name or f"Anonymous {self.id}"

    def has_completed(self, day: int, part: int) -> bool:
        return part in self.completion.get(day, frozenset())


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """Point-in-time view of a private leaderboard."""

    year: int
    members: Mapping[str, MemberProgress] = field(default_factory=dict)


@dataclass(frozen=True)
class DayProgress:
    """Completion of both parts of a single day."""

    day: int
    part1: bool
    part2: bool


@dataclass
class ProgressTable:
    """Per-day completion table for one member."""

    member_id: str
    member_name: str
    rows: list[DayProgress] = field(default_factory=list)

    @property
    def stars(self) -> int:
        return sum(int(row.part1) + int(row.part2) for row in self.rows)

    def row(self, day: int) -> DayProgress:
        if not FIRST_DAY <= day <= LAST_DAY:
            raise ValueError(f"Day must be between {FIRST_DAY} and {LAST_DAY}, got {day}")
        for entry in self.rows:
            if entry.day == day:
                return entry
        return DayProgress(day=day, part1=False, part2=False)
