"""Value objects for answer submission and solution runs."""

from dataclasses import dataclass

from .language import PARTS


@dataclass(frozen=True)
class SubmissionRequest:
    """An answer for one part of a puzzle day."""

    year: int
    day: int
    part: int
    answer: str

    def __post_init__(self) -> None:
        if self.part not in PARTS:
            raise ValueError(f"Part must be 1 or 2, got {self.part}")

    def form_data(self) -> dict[str, str]:
        return {"level": str(self.part), "answer": self.answer}


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome reported by the platform for a submission."""

    accepted: bool
    raw_message: str


@dataclass(frozen=True)
class RunResult:
    """Output and wall-clock duration of a solution run."""

    year: int
    day: int
    part: int
    output: str
    elapsed: float
