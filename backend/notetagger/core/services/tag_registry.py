from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from notetagger.core.repositories.custom_tag_store import CustomTagStoreError
from notetagger.core.schemas.tagging import TagEntry, TagVocabulary
from notetagger.core.tagging.seed import SEED_TAGS
from notetagger.core.tagging.trie import LexiconTrie
from notetagger.utils.logging import get_logger
from notetagger.utils.validation import normalize_tag

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from notetagger.core.repositories.custom_tag_store import CustomTagStore

logger = get_logger(__name__)


class TagRegistry:
    """Owns the session's lexicon: built-in keywords plus persisted custom tags.

    The trie is always the seed dictionary inserted first, followed by every
    custom tag as ``(tag.lower(), tag)``. Custom tags never include a built-in
    tag label and are kept unique by exact value.
    """

    def __init__(self, store: CustomTagStore, seed: Mapping[str, str] = SEED_TAGS) -> None:
        self._store = store
        self._seed = seed
        self._seed_values = frozenset(seed.values())
        self._lock = threading.RLock()
        self._custom_tags: list[str] = self._load_custom_tags()
        self._trie = self._build_trie(self._custom_tags)

    @property
    def trie(self) -> LexiconTrie:
        return self._trie

    @property
    def custom_tags(self) -> list[str]:
        with self._lock:
            return list(self._custom_tags)

    @property
    def store_location(self) -> str:
        return self._store.location

    def is_seed_tag(self, tag: str) -> bool:
        return tag in self._seed_values

    def vocabulary(self) -> TagVocabulary:
        return TagVocabulary(
            seed=[TagEntry(keyword=k, tag=v) for k, v in self._seed.items()],
            custom_tags=self.custom_tags,
        )

    def add_custom_tag(self, tag: str) -> bool:
        """Persist a user tag and make it matchable right away.

        The label goes through `normalize_tag` like every other tag entry point.
        Safe to call repeatedly: blank input, built-in labels and tags that are
        already stored are ignored. Returns True only when the tag was stored.
        """
        cleaned = normalize_tag(tag)
        if cleaned is None or self.is_seed_tag(cleaned):
            return False
        tag = cleaned
        with self._lock:
            if tag in self._custom_tags:
                return False
            self._store.store_custom_tags([*self._custom_tags, tag])
            self._custom_tags.append(tag)
            self._trie.insert(tag.lower(), tag)
        logger.info("Added custom tag %r", tag)
        return True

    def add_custom_tags(self, tags: Iterable[str]) -> list[str]:
        """Bulk merge, e.g. from an import. Returns the tags that were new."""
        added: list[str] = []
        for tag in tags:
            cleaned = normalize_tag(tag)
            if cleaned is not None and self.add_custom_tag(cleaned):
                added.append(cleaned)
        return added

    def rebuild_trie(self) -> LexiconTrie:
        """Replace the trie with a fresh one built from seed and known custom tags.

        After `reset` this yields a seed-only lexicon.
        """
        with self._lock:
            self._trie = self._build_trie(self._custom_tags)
            return self._trie

    def reload(self) -> LexiconTrie:
        """Re-read custom tags from storage and rebuild, as on process start."""
        with self._lock:
            self._custom_tags = self._load_custom_tags()
            return self.rebuild_trie()

    def reset(self) -> LexiconTrie:
        """Forget every custom tag, in storage and in memory."""
        with self._lock:
            self._store.clear()
            self._custom_tags = []
            logger.info("Custom tags cleared; lexicon reset to built-in keywords")
            return self.rebuild_trie()

    def _load_custom_tags(self) -> list[str]:
        try:
            stored = self._store.load_custom_tags()
        except CustomTagStoreError as err:
            logger.warning("Ignoring unreadable custom tags at %s: %s", self._store.location, err)
            return []

        tags: list[str] = []
        for tag in stored:
            if tag not in tags:
                tags.append(tag)
        return tags

    def _build_trie(self, custom_tags: Iterable[str]) -> LexiconTrie:
        trie = LexiconTrie(self._seed.items())
        seeded = len(trie)
        for tag in custom_tags:
            trie.insert(tag.lower(), tag)
        logger.info("Lexicon built: %d seed keys, %d keys total", seeded, len(trie))
        return trie
