from __future__ import annotations

from pydantic import Field

from notetagger.core.models.base import AppBaseModel


class PrefixMatch(AppBaseModel):
    """A stored lexicon key and the tag it resolves to."""

    word: str
    tag: str


class TagEntry(AppBaseModel):
    """Keyword-to-tag pair used to seed the lexicon."""

    keyword: str
    tag: str


class TagVocabulary(AppBaseModel):
    """Snapshot of the registry: built-in entries and user-added tags.

    - seed: every built-in keyword mapping
    - custom_tags: persisted user tags, in the order they were added
    """

    seed: list[TagEntry] = Field(default_factory=list)
    custom_tags: list[str] = Field(default_factory=list)
