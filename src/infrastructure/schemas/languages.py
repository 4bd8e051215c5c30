"""Pydantic schemas for the language registry document."""

from pydantic import BaseModel, Field, RootModel, model_validator

from domain.models.language import FileLayout


class LanguageEntry(BaseModel):
    """Configuration of one language as written in the registry file."""

    extension: str = Field(min_length=1)
    solution_template: str
    run_command: str = Field(min_length=1)
    layout: FileLayout = FileLayout.PER_PART
    filename: str | None = None
    project_files: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_filename(self) -> "LanguageEntry":
        """Per-part layouts need a ``{part}`` placeholder in the file name."""
        if self.filename is None:
            if self.layout is FileLayout.COMBINED:
                raise ValueError("combined layout requires an explicit filename")
            return self
        if self.layout is FileLayout.PER_PART and "{part}" not in self.filename:
            raise ValueError("per_part layout filename must contain '{part}'")
        return self


class LanguageFile(RootModel[dict[str, LanguageEntry]]):
    """Whole registry document: language name to entry."""

    pass
