from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from notetagger.core.schemas.tagging import PrefixMatch

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(slots=True)
class TrieNode:
    """One character step in the lexicon. `tag` is set only on terminal nodes."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_terminal: bool = False
    tag: str | None = None


class LexiconTrie:
    """Prefix tree mapping lower-cased keywords and phrases to tag labels.

    Keys may contain spaces, so "binary search" is stored as an ordinary key
    next to "binary". Every operation is total: a missing key yields ``None``
    or an empty list, never an exception.

    A single lock serialises inserts against lookups so one instance can be
    shared between request threads.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] | None = None) -> None:
        self._root = TrieNode()
        self._size = 0
        self._lock = threading.RLock()
        for key, tag in entries or ():
            self.insert(key, tag)

    def __len__(self) -> int:
        return self._size

    def insert(self, key: str, tag: str) -> None:
        """Store ``tag`` under ``key``; an existing key is overwritten."""
        with self._lock:
            node = self._root
            for char in key.lower():
                child = node.children.get(char)
                if child is None:
                    child = TrieNode()
                    node.children[char] = child
                node = child
            if not node.is_terminal:
                self._size += 1
            node.is_terminal = True
            node.tag = tag

    def lookup(self, key: str) -> str | None:
        with self._lock:
            node = self._walk(key.lower())
            if node is None or not node.is_terminal:
                return None
            return node.tag

    def prefix_enumerate(self, prefix: str) -> list[PrefixMatch]:
        """Return every stored key starting with ``prefix`` together with its tag.

        Keys are reported depth-first, visiting children in the order they were
        first inserted, so the result is stable for a given tree.
        """
        normalized = prefix.lower()
        with self._lock:
            node = self._walk(normalized)
            if node is None:
                return []
            return [PrefixMatch(word=word, tag=tag) for word, tag in self._iter_terminals(node, normalized)]

    def _walk(self, key: str) -> TrieNode | None:
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    @staticmethod
    def _iter_terminals(start: TrieNode, prefix: str) -> Iterator[tuple[str, str]]:
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal and node.tag is not None:
                yield word, node.tag
            # Reversed so the first-inserted child is popped first.
            for char, child in reversed(list(node.children.items())):
                stack.append((child, word + char))
