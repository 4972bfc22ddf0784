from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from notetagger.config import settings
from notetagger.core.repositories.custom_tag_store import CustomTagStore  # noqa: TCH001
from notetagger.core.repositories.implementations.json_file.custom_tag_store import (
    JsonFileCustomTagStore,
)
from notetagger.core.services.note_service import NoteService
from notetagger.core.services.tag_registry import TagRegistry
from notetagger.core.services.tagger_service import TaggerService
from notetagger.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_custom_tag_store() -> CustomTagStore:
    """Return the process-wide custom tag store configured in settings."""
    logger.debug("Opening custom tag store at %s", settings.storage_path)
    return JsonFileCustomTagStore(settings.storage_path, settings.custom_tags_key)


@lru_cache(maxsize=1)
def get_tag_registry() -> TagRegistry:
    """Return the session registry; built once so the service holds a single trie."""
    return TagRegistry(get_custom_tag_store())


def get_tagger_service(registry: TagRegistry = Depends(get_tag_registry)) -> TaggerService:
    """Get a request-scoped tagger bound to the shared registry."""
    return TaggerService(registry)


def get_note_service(
    tagger: TaggerService = Depends(get_tagger_service),
    registry: TagRegistry = Depends(get_tag_registry),
) -> NoteService:
    """Get a request-scoped note service instance."""
    return NoteService(tagger, registry)
