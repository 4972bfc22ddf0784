from concurrent.futures import ThreadPoolExecutor

from notetagger.core.tagging.trie import LexiconTrie


def test_insert_then_lookup_is_case_insensitive():
    trie = LexiconTrie()
    trie.insert("Binary Search", "Binary Search")
    assert trie.lookup("binary search") == "Binary Search"
    assert trie.lookup("BINARY SEARCH") == "Binary Search"


def test_no_cross_contamination_between_keys():
    trie = LexiconTrie()
    trie.insert("heap", "Heaps")
    assert trie.lookup("hea") is None
    assert trie.lookup("heaps") is None
    assert trie.lookup("heap") == "Heaps"


def test_lookup_of_unknown_keys_returns_none():
    trie = LexiconTrie([("stack", "Stacks")])
    assert trie.lookup("") is None
    assert trie.lookup("ß∂ƒ") is None
    assert trie.lookup("queue") is None


def test_reinsert_overwrites_tag():
    trie = LexiconTrie()
    trie.insert("dp", "DP")
    trie.insert("DP", "Dynamic Programming")
    assert trie.lookup("dp") == "Dynamic Programming"
    assert len(trie) == 1


def test_insert_is_idempotent():
    once = LexiconTrie([("sort", "Sorting"), ("search", "Searching")])
    twice = LexiconTrie([("sort", "Sorting"), ("search", "Searching")])
    twice.insert("sort", "Sorting")
    assert twice.prefix_enumerate("") == once.prefix_enumerate("")
    assert len(twice) == len(once) == 2


def test_prefix_enumerate_returns_all_descendants_in_insertion_order():
    trie = LexiconTrie([("sort", "Sorting"), ("sorting", "Sorting"), ("search", "Searching")])
    assert [(m.word, m.tag) for m in trie.prefix_enumerate("sort")] == [
        ("sort", "Sorting"),
        ("sorting", "Sorting"),
    ]
    assert [m.word for m in trie.prefix_enumerate("")] == ["sort", "sorting", "search"]
    assert [m.word for m in trie.prefix_enumerate("S")] == ["sort", "sorting", "search"]


def test_prefix_enumerate_unknown_prefix_is_empty():
    trie = LexiconTrie([("sort", "Sorting")])
    assert trie.prefix_enumerate("xyz") == []


def test_phrase_keys_live_beside_single_words():
    trie = LexiconTrie([("binary", "Binary Trees"), ("binary search", "Binary Search")])
    assert [m.word for m in trie.prefix_enumerate("binary")] == ["binary", "binary search"]
    assert trie.lookup("binary ") is None


def test_len_counts_distinct_keys():
    trie = LexiconTrie([("bfs", "Breadth-First Search"), ("BFS", "BFS")])
    assert len(trie) == 1
    assert trie.lookup("bfs") == "BFS"


def test_concurrent_inserts_and_lookups():
    trie = LexiconTrie()
    keys = [f"key{i}" for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda k: trie.insert(k, k.upper()), keys))
        results = list(pool.map(trie.lookup, keys))

    assert results == [k.upper() for k in keys]
    assert len(trie) == 200
