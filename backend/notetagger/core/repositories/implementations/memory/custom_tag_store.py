from __future__ import annotations

from typing import TYPE_CHECKING

from notetagger.core.repositories.custom_tag_store import (
    CustomTagStore,
    decode_custom_tags,
    encode_custom_tags,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


class InMemoryCustomTagStore(CustomTagStore):
    """Process-local store keeping serialised slots in a dict.

    Several registries may share one instance to simulate a restart against
    the same storage.
    """

    def __init__(self, key: str = "dsa_custom_tags", slots: dict[str, str] | None = None) -> None:
        super().__init__(key)
        self.slots: dict[str, str] = slots if slots is not None else {}

    def load_custom_tags(self) -> list[str]:
        return decode_custom_tags(self.slots.get(self.key))

    def store_custom_tags(self, tags: Sequence[str]) -> None:
        self.slots[self.key] = encode_custom_tags(tags)

    def clear(self) -> None:
        self.slots.pop(self.key, None)

    @property
    def location(self) -> str:
        return f"memory#{self.key}"
