"""Value objects for puzzle identification."""

from dataclasses import dataclass
from enum import Enum

FIRST_DAY = 1
LAST_DAY = 25


class AssetKind(str, Enum):
    """Kind of content fetched for a puzzle day."""

    INPUT = "input"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class PuzzleDayKey:
    """Identifies a single puzzle day of a given year."""

    year: int
    day: int

    def __post_init__(self) -> None:
        if not FIRST_DAY <= self.day <= LAST_DAY:
            raise ValueError(f"Day must be between {FIRST_DAY} and {LAST_DAY}, got {self.day}")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.year}/day/{self.day}"


@dataclass(frozen=True)
class CacheEntry:
    """A piece of content retrieved from the platform for a puzzle day."""

    key: PuzzleDayKey
    kind: AssetKind
    content: str
