import json
import logging

from notetagger.core.repositories.implementations.memory.custom_tag_store import (
    InMemoryCustomTagStore,
)
from notetagger.core.services.tag_registry import TagRegistry
from notetagger.core.tagging.seed import SEED_TAGS


def test_fresh_registry_is_seed_only(registry):
    assert registry.custom_tags == []
    assert len(registry.trie) == len(SEED_TAGS)
    assert registry.trie.lookup("binary search") == "Binary Search"


def test_custom_tag_survives_restart(store):
    TagRegistry(store).add_custom_tag("AVL Tree")

    restarted = TagRegistry(store)
    assert restarted.trie.lookup("avl tree") == "AVL Tree"
    assert restarted.custom_tags == ["AVL Tree"]


def test_add_custom_tag_is_idempotent(registry, store):
    assert registry.add_custom_tag("AVL Tree") is True
    assert registry.add_custom_tag("AVL Tree") is False
    assert registry.add_custom_tag("  AVL Tree ") is False
    assert json.loads(store.slots["dsa_custom_tags"]) == ["AVL Tree"]


def test_add_custom_tag_ignores_blank_and_seed_labels(registry, store):
    assert registry.add_custom_tag("   ") is False
    assert registry.add_custom_tag("Binary Search") is False
    assert registry.custom_tags == []
    assert "dsa_custom_tags" not in store.slots


def test_add_custom_tags_reports_new_ones(registry):
    assert registry.add_custom_tags(["Union Find", "Union Find", "Arrays", " Tarjan "]) == [
        "Union Find",
        "Tarjan",
    ]
    assert registry.custom_tags == ["Union Find", "Tarjan"]


def test_rebuild_then_restart_keeps_custom_tags(store):
    registry = TagRegistry(store)
    registry.add_custom_tag("Foo")
    assert registry.rebuild_trie().lookup("foo") == "Foo"

    assert TagRegistry(store).trie.lookup("foo") == "Foo"


def test_reset_clears_storage_and_rebuilds_seed_only(registry, store):
    registry.add_custom_tag("Foo")
    trie = registry.reset()

    assert trie is registry.trie
    assert trie.lookup("foo") is None
    assert len(trie) == len(SEED_TAGS)
    assert registry.custom_tags == []
    assert "dsa_custom_tags" not in store.slots
    assert TagRegistry(store).trie.lookup("foo") is None


def test_custom_tags_are_inserted_after_seed():
    # Custom "Heap" lower-cases to the seed key "heap" and wins.
    store = InMemoryCustomTagStore(slots={"dsa_custom_tags": json.dumps(["Heap"])})
    registry = TagRegistry(store)

    assert registry.trie.lookup("heap") == "Heap"
    assert registry.trie.lookup("heaps") == "Heaps"


def test_reload_picks_up_external_changes(registry, store):
    store.store_custom_tags(["Fenwick Tree"])
    assert registry.trie.lookup("fenwick tree") is None

    registry.reload()
    assert registry.trie.lookup("fenwick tree") == "Fenwick Tree"


def test_stored_duplicates_are_collapsed():
    store = InMemoryCustomTagStore(slots={"dsa_custom_tags": '["Foo", "Foo", "Bar"]'})
    assert TagRegistry(store).custom_tags == ["Foo", "Bar"]


def test_malformed_storage_fails_open(caplog):
    for payload in ("not json", '{"a": 1}', "[1, 2]"):
        store = InMemoryCustomTagStore(slots={"dsa_custom_tags": payload})
        with caplog.at_level(logging.WARNING):
            registry = TagRegistry(store)

        assert registry.custom_tags == []
        assert registry.trie.lookup("stack") == "Stacks"
    assert "Ignoring unreadable custom tags" in caplog.text


def test_vocabulary_snapshot(registry):
    registry.add_custom_tag("Tarjan")
    vocab = registry.vocabulary()

    assert len(vocab.seed) == len(SEED_TAGS)
    assert vocab.seed[0].keyword == "array"
    assert vocab.custom_tags == ["Tarjan"]


def test_custom_tags_are_normalized_on_every_entry_point(registry):
    assert registry.add_custom_tags(["  AVL   Tree "]) == ["AVL Tree"]
    assert registry.add_custom_tag("AVL\tTree") is False
    assert registry.custom_tags == ["AVL Tree"]
    assert registry.trie.lookup("avl tree") == "AVL Tree"


def test_custom_tags_are_capped_in_length(registry):
    registry.add_custom_tag("x" * 80)
    assert registry.custom_tags == ["x" * 50]
