"""Per-language scaffolding configuration."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FileLayout(str, Enum):
    """How a language splits a day's solution into files."""

    PER_PART = "per_part"
    COMBINED = "combined"


PARTS = (1, 2)


def render_placeholders(text: str, **values: object) -> str:
    """Substitute ``{name}`` placeholders literally, leaving other braces alone."""
    for name, value in values.items():
        text = text.replace("{" + name + "}", str(value))
    return text


@dataclass(frozen=True)
class LanguageConfig:
    """Scaffolding and run configuration for one language."""

    name: str
    extension: str
    template: str
    run_command: str
    layout: FileLayout = FileLayout.PER_PART
    filename: str = "part{part}.{extension}"
    project_files: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_files", MappingProxyType(dict(self.project_files)))

    def solution_filename(self, part: int) -> str:
        """File name holding the given part of a day's solution."""
        return render_placeholders(self.filename, part=part, extension=self.extension)

    def solution_files(self) -> dict[str, tuple[int, ...]]:
        """Map each solution file name to the parts it implements."""
        if self.layout is FileLayout.COMBINED:
            return {self.solution_filename(PARTS[0]): PARTS}
        return {self.solution_filename(part): (part,) for part in PARTS}

    def render_solution(self, year: int, day: int, parts: tuple[int, ...]) -> str:
        # A combined file renders {part} as its first part.
        return render_placeholders(self.template, year=year, day=day, part=parts[0])

    def build_command(self, file_path: str, part: int) -> str:
        """Shell command line running ``file_path`` for ``part``."""
        command = self.run_command
        if "{file}" not in command:
            command = f"{command} {{file}}"
        return render_placeholders(command, file=shlex.quote(file_path), part=part)
