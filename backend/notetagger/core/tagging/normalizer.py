from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
        "has", "had", "do", "does", "did", "will", "would", "could", "should",
        "may", "might", "must", "can", "shall", "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us",
        "them",
    }
)

# Order matters: the first qualifying suffix is stripped, not the longest.
SUFFIXES: tuple[str, ...] = ("ing", "ed", "er", "est", "ly", "tion", "ness", "ment", "s")

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lower-case text, replace punctuation with spaces and split on whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def remove_stop_words(tokens: Iterable[str]) -> list[str]:
    return [token for token in tokens if token not in STOP_WORDS]


def stem(word: str) -> str:
    """Strip the first listed suffix the word ends with.

    A suffix only qualifies when at least three characters would remain, so
    short words such as "is" or "bed" come back unchanged. Stripping is a
    single pass: "fastest" loses "est" and nothing else.
    """
    for suffix in SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[: -len(suffix)]
    return word


def preprocess_text(text: str) -> list[str]:
    """Tokens used for single-keyword matching: tokenized, filtered and stemmed."""
    return [stem(token) for token in remove_stop_words(tokenize(text))]
