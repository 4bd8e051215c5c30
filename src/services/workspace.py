"""Service for creating and inspecting the on-disk solution workspace."""

from pathlib import Path

from loguru import logger

from domain.exceptions import ScaffoldError, SolutionNotFoundError
from domain.models import AssetKind, LanguageConfig, WorkspaceLayout
from domain.models.identifiers import FIRST_DAY, LAST_DAY
from domain.models.language import PARTS, render_placeholders

INPUT_FILENAME = "input.txt"
DESCRIPTION_FILENAME = "description.md"

ASSET_FILENAMES = {
    AssetKind.INPUT: INPUT_FILENAME,
    AssetKind.DESCRIPTION: DESCRIPTION_FILENAME,
}


class WorkspaceBuilder:
    """Lays out ``<root>/<language>/<year>/day_DD`` directories."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def project_dir(self, language: LanguageConfig, year: int) -> Path:
        return self.root / language.name / str(year)

    def day_dir(self, language: LanguageConfig, year: int, day: int) -> Path:
        return self.project_dir(language, year) / f"day_{day:02d}"

    def scaffold(self, language: LanguageConfig, year: int, day_count: int) -> WorkspaceLayout:
        """
        Create day directories, solution files and project files.

        Existing files are left untouched, so running this again only fills
        in what is missing.

        Raises:
            ScaffoldError: If the filesystem refuses a directory or file
        """
        project_dir = self.project_dir(language, year)
        layout = WorkspaceLayout(root=project_dir)

        try:
            project_dir.mkdir(parents=True, exist_ok=True)

            for day in range(FIRST_DAY, max(0, min(day_count, LAST_DAY)) + 1):
                day_dir = self.day_dir(language, year, day)
                day_dir.mkdir(exist_ok=True)
                layout.days.append(day_dir)

                for filename, parts in language.solution_files().items():
                    content = language.render_solution(year, day, parts)
                    self._write_new(day_dir / filename, content, layout)

                self._write_new(day_dir / INPUT_FILENAME, "", layout)

            for filename, content in language.project_files.items():
                rendered = render_placeholders(content, year=year)
                self._write_new(project_dir / filename, rendered, layout)
        except OSError as e:
            logger.error(f"Failed to scaffold {language.name} {year}: {e}")
            raise ScaffoldError(f"Failed to scaffold {language.name} {year} in {project_dir}: {e}") from e

        logger.info(
            f"Scaffolded {language.name} {year}: {len(layout.days)} day(s), "
            f"{len(layout.created_files)} new file(s)"
        )
        return layout

    def write_asset(
        self, language: LanguageConfig, year: int, day: int, kind: AssetKind, content: str
    ) -> Path:
        """Copy a fetched asset into its day directory."""
        path = self.day_dir(language, year, day) / ASSET_FILENAMES[kind]
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ScaffoldError(f"Failed to write {path.name} for {year} day {day}: {e}") from e
        return path

    def solution_path(self, language: LanguageConfig, year: int, day: int, part: int) -> Path:
        """
        Existing solution file for ``part``.

        Raises:
            SolutionNotFoundError: If the file does not exist
        """
        if part not in PARTS:
            raise SolutionNotFoundError(f"Part must be 1 or 2, got {part}")
        path = self.day_dir(language, year, day) / language.solution_filename(part)
        if not path.is_file():
            raise SolutionNotFoundError(
                f"No solution file for {language.name} {year} day {day} part {part}: {path}"
            )
        return path

    def available_parts(self, language: LanguageConfig, year: int, day: int) -> list[int]:
        """Parts of ``day`` that have a solution file."""
        day_dir = self.day_dir(language, year, day)
        return [
            part
            for part in PARTS
            if (day_dir / language.solution_filename(part)).is_file()
        ]

    def existing_languages(self) -> list[str]:
        """Language directories already present under the workspace root."""
        if not self.root.is_dir():
            return []
        return sorted(path.name for path in self.root.iterdir() if path.is_dir())

    @staticmethod
    def _write_new(path: Path, content: str, layout: WorkspaceLayout) -> None:
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            return
        layout.created_files.append(path)
