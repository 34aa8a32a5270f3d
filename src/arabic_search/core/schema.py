"""Pydantic v2 models for search results and settings."""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FOLDER_PATH = "Learning/Arabic"


# -- Results --


class MatchRecord(BaseModel):
    """One matching line of one document."""

    model_config = ConfigDict(frozen=True)

    document_id: str
    line_number: int = Field(ge=1)
    matched_line_text: str
    context_line_text: str = ""
    # Half-open span of the match in matched_line_text (original offsets)
    match_start: int | None = None
    match_end: int | None = None

    @property
    def title(self) -> str:
        return PurePosixPath(self.document_id).stem

    @property
    def locator(self) -> str:
        return f"{self.document_id}:{self.line_number}"


# -- Store listing --


class FileEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    extension: str = ""

    @classmethod
    def from_path(cls, path: str) -> FileEntry:
        return cls(path=path, extension=PurePosixPath(path).suffix.lstrip("."))


# -- Settings --


class SearchSettings(BaseModel):
    folder_path: str = DEFAULT_FOLDER_PATH
    extensions: list[str] = Field(default_factory=lambda: ["md"])
    strict_folder_boundary: bool = False

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, list):
            return value
        # Non-string items are left for the list[str] check to reject
        return [
            ext.strip().lstrip(".").lower() if isinstance(ext, str) else ext
            for ext in value
            if not isinstance(ext, str) or ext.strip()
        ]
