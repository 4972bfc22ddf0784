import pytest

from notetagger.core.tagging.normalizer import (
    STOP_WORDS,
    preprocess_text,
    remove_stop_words,
    stem,
    tokenize,
)


def test_tokenize_lowercases_and_splits_on_punctuation():
    assert tokenize("Hello, World! O(log n)") == ["hello", "world", "o", "log", "n"]


def test_tokenize_collapses_whitespace_and_drops_empty_tokens():
    assert tokenize("  heap\t\tstack\n\nqueue  ") == ["heap", "stack", "queue"]
    assert tokenize("") == []
    assert tokenize("?!...") == []


def test_tokenize_keeps_digits_and_underscores():
    assert tokenize("top_k 2-sum") == ["top_k", "2", "sum"]


def test_remove_stop_words_preserves_order():
    assert remove_stop_words(["the", "heap", "is", "a", "tree"]) == ["heap", "tree"]


def test_stop_word_list_size():
    assert len(STOP_WORDS) == 52
    assert {"the", "shall", "them"} <= STOP_WORDS


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("sorting", "sort"),
        ("searching", "search"),
        ("jumped", "jump"),
        ("faster", "fast"),
        ("fastest", "fast"),
        ("quickly", "quick"),
        ("iteration", "itera"),
        ("darkness", "dark"),
        ("movement", "move"),
        ("trees", "tree"),
    ],
)
def test_stem_strips_each_listed_suffix(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize("word", ["is", "bed", "ring", "recursion", "heap"])
def test_stem_leaves_short_or_unmatched_words(word):
    assert stem(word) == word


def test_stem_is_single_pass_first_match():
    # "sorters" only loses the trailing "s"; "er" is never retried
    assert stem("sorters") == "sorter"
    # "interest" matches "est" before anything shorter is considered
    assert stem("interest") == "inter"


def test_preprocess_text_pipeline():
    assert preprocess_text("The trees are sorting") == ["tree", "sort"]
    assert preprocess_text("the a an is are") == []
