"""Value objects describing workspace scaffolding and synchronization."""

from dataclasses import dataclass, field
from pathlib import Path

from .identifiers import AssetKind, PuzzleDayKey


@dataclass
class WorkspaceLayout:
    """Directories and files produced by a scaffold run."""

    root: Path
    days: list[Path] = field(default_factory=list)
    created_files: list[Path] = field(default_factory=list)


@dataclass(frozen=True)
class SyncFailure:
    """A single asset that could not be synchronized."""

    key: PuzzleDayKey
    kind: AssetKind
    error: str


@dataclass
class SyncReport:
    """Outcome of synchronizing every asset of a year."""

    year: int
    fetched: list[tuple[PuzzleDayKey, AssetKind]] = field(default_factory=list)
    failures: list[SyncFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
