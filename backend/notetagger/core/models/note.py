from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import Field, field_validator

from notetagger.utils.validation import normalize_tag_list

from .base import TimestampedModel


class Note(TimestampedModel):
    """Note domain model.

    Tags keep their display casing ("Binary Search"); they come from the
    tagger and may be edited by the user before the note is saved.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique note identifier")
    content: str = Field(min_length=1, max_length=10000, description="Raw note text")
    tags: list[str] = Field(default_factory=list, description="Ordered, unique tag labels")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Note content must not be blank")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return normalize_tag_list(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": str(uuid4()),
                    "content": "Binary search halves the sorted array on every step.",
                    "tags": ["Binary Trees", "Searching", "Sorting", "Arrays", "Binary Search"],
                }
            ]
        }
    }
