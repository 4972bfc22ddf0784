from .normalizer import preprocess_text, remove_stop_words, stem, tokenize
from .seed import SEED_TAGS
from .trie import LexiconTrie, TrieNode

__all__ = [
    "LexiconTrie",
    "TrieNode",
    "SEED_TAGS",
    "tokenize",
    "remove_stop_words",
    "stem",
    "preprocess_text",
]
