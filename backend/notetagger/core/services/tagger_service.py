from __future__ import annotations

from typing import TYPE_CHECKING

from notetagger.core.tagging.normalizer import preprocess_text, tokenize
from notetagger.utils.logging import get_logger

if TYPE_CHECKING:
    from notetagger.core.schemas.tagging import PrefixMatch
    from notetagger.core.services.tag_registry import TagRegistry
    from notetagger.core.tagging.trie import LexiconTrie

logger = get_logger(__name__)


def suggest_tags(text: str, trie: LexiconTrie) -> list[str]:
    """Suggest tags for a note's text.

    Single keywords are matched on stemmed, stop-word filtered tokens. Phrases
    are matched on adjacent pairs of the raw tokens, unstemmed and with stop
    words kept, so only two-word keys such as "binary search" can match.

    Returns unique tags in first-seen order, keyword hits before phrase hits.
    """
    found: dict[str, None] = {}

    for token in preprocess_text(text):
        tag = trie.lookup(token)
        if tag is not None:
            found.setdefault(tag)

    original_tokens = tokenize(text)
    for first, second in zip(original_tokens, original_tokens[1:]):
        tag = trie.lookup(f"{first} {second}")
        if tag is not None:
            found.setdefault(tag)

    logger.debug("Suggested %d tags for text of length %d", len(found), len(text))
    return list(found)


class TaggerService:
    """Binds the suggestion pipeline to the registry's current lexicon."""

    def __init__(self, registry: TagRegistry) -> None:
        self._registry = registry

    def suggest(self, text: str) -> list[str]:
        return suggest_tags(text, self._registry.trie)

    def autocomplete(self, prefix: str, limit: int | None = None) -> list[PrefixMatch]:
        matches = self._registry.trie.prefix_enumerate(prefix)
        return matches if limit is None else matches[:limit]

    def resolve(self, key: str) -> str | None:
        return self._registry.trie.lookup(key)
