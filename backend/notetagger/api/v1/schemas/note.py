from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from pydantic import Field, field_validator

from notetagger.core.models.base import AppBaseModel
from notetagger.utils.validation import normalize_tag_list


class NoteCreate(AppBaseModel):
    content: str = Field(min_length=1, max_length=10000, description="Note content")
    added_tags: list[str] = Field(default_factory=list, description="Tags the user added by hand")
    removed_tags: list[str] = Field(default_factory=list, description="Suggested tags the user dismissed")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Note content must not be blank")
        return v

    @field_validator("added_tags")
    @classmethod
    def validate_added_tags(cls, v: list[str]) -> list[str]:
        return normalize_tag_list(v)


class NoteRead(AppBaseModel):
    id: UUID
    content: str
    tags: list[str]
    created_at: datetime
    last_modified: datetime
