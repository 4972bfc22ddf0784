from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class CustomTagStoreError(Exception):
    """Raised when persisted custom tags exist but cannot be read as a list of strings."""


class CustomTagStore(ABC):
    """Durable slot holding the user's custom tags.

    The slot is keyed by a fixed identifier and serialised as a JSON array of
    unique strings. Implementations raise `CustomTagStoreError` for unreadable
    data; deciding what to do about it is the caller's job.
    """

    def __init__(self, key: str) -> None:
        self.key = key

    @abstractmethod
    def load_custom_tags(self) -> list[str]:  # pragma: no cover - interface only
        """Return stored tags, or an empty list if nothing was stored yet."""

    @abstractmethod
    def store_custom_tags(self, tags: Sequence[str]) -> None:  # pragma: no cover
        """Replace the stored tags."""

    @abstractmethod
    def clear(self) -> None:  # pragma: no cover
        """Remove the slot entirely."""

    @property
    def location(self) -> str:
        return self.key


def encode_custom_tags(tags: Sequence[str]) -> str:
    unique: list[str] = []
    for tag in tags:
        if tag not in unique:
            unique.append(tag)
    return json.dumps(unique)


def decode_custom_tags(raw: str | list | None) -> list[str]:
    """Parse a stored payload into a list of strings.

    Accepts either the serialised JSON text or an already decoded value.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as err:
            raise CustomTagStoreError(f"custom tags are not valid JSON: {err}") from err
    if not isinstance(raw, list) or not all(isinstance(t, str) for t in raw):
        raise CustomTagStoreError("custom tags must be a JSON array of strings")
    return raw
