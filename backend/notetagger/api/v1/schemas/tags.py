from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from typing import Any

from pydantic import Field, field_validator

from notetagger.core.models.base import AppBaseModel
from notetagger.utils.validation import MAX_TAG_LENGTH, normalize_tag


class TagSuggestRequest(AppBaseModel):
    text: str = Field(default="", description="Free-form note text of any length")


class TagSuggestResponse(AppBaseModel):
    tags: list[str] = Field(default_factory=list, description="Suggested tags, first-seen order")


class TagLookupResponse(AppBaseModel):
    key: str
    tag: str


class CustomTagCreate(AppBaseModel):
    tag: str = Field(min_length=1, max_length=MAX_TAG_LENGTH)

    @field_validator("tag")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        cleaned = normalize_tag(v)
        if cleaned is None:
            raise ValueError("Tag must not be blank")
        return cleaned


class CustomTagCreateResult(AppBaseModel):
    tag: str
    created: bool


class CustomTagList(AppBaseModel):
    custom_tags: list[str] = Field(default_factory=list)


class TagExport(AppBaseModel):
    """Export payload; field names follow the export file format."""

    custom_tags: list[str] = Field(default_factory=list, alias="customTags")
    export_date: datetime = Field(alias="exportDate")


class TagImport(AppBaseModel):
    """Import payload from a notes export file.

    Notes are accepted for shape compatibility but only custom tags are merged here.
    """

    notes: list[dict[str, Any]] = Field(default_factory=list)
    custom_tags: list[str] = Field(default_factory=list, alias="customTags")
    export_date: str | None = Field(default=None, alias="exportDate")


class TagImportResult(AppBaseModel):
    imported: list[str] = Field(default_factory=list)
    custom_tags: list[str] = Field(default_factory=list)
