from __future__ import annotations

from typing import TYPE_CHECKING

from notetagger.core.models.note import Note
from notetagger.utils.logging import get_logger
from notetagger.utils.validation import normalize_tag_list

if TYPE_CHECKING:
    from notetagger.core.services.tag_registry import TagRegistry
    from notetagger.core.services.tagger_service import TaggerService

logger = get_logger(__name__)


class NoteService:
    """Builds tagged notes and feeds user-introduced tags back into the registry.

    Notes themselves are not stored here; the caller persists what it gets back.
    """

    def __init__(self, tagger: TaggerService, registry: TagRegistry) -> None:
        self._tagger = tagger
        self._registry = registry

    def compose_tags(
        self,
        content: str,
        *,
        added_tags: list[str] | None = None,
        removed_tags: list[str] | None = None,
    ) -> list[str]:
        """Suggested tags minus the ones the user removed, followed by the ones they added."""
        removed = set(removed_tags or [])
        suggested = [t for t in self._tagger.suggest(content) if t not in removed]
        return normalize_tag_list([*suggested, *(added_tags or [])])

    def create_note(
        self,
        content: str,
        *,
        added_tags: list[str] | None = None,
        removed_tags: list[str] | None = None,
    ) -> Note:
        if not content.strip():
            raise ValueError("Note content must not be blank")
        tags = self.compose_tags(content, added_tags=added_tags, removed_tags=removed_tags)
        note = Note(content=content, tags=tags)
        self._register_custom_tags(note.tags)
        return note

    def _register_custom_tags(self, tags: list[str]) -> None:
        added = self._registry.add_custom_tags(tags)
        if added:
            logger.info("Registered %d new custom tags from note", len(added))
