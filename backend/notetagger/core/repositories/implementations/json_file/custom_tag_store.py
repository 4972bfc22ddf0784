from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from notetagger.core.repositories.custom_tag_store import (
    CustomTagStore,
    CustomTagStoreError,
    decode_custom_tags,
    encode_custom_tags,
)
from notetagger.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence


class JsonFileCustomTagStore(CustomTagStore):
    """Key-value JSON file implementation of the CustomTagStore.

    The file holds one JSON object whose keys are storage identifiers, so other
    collaborators may keep their own slots (e.g. saved notes) in the same file.
    Custom tags live under ``key`` as a JSON array.
    """

    def __init__(self, path: str | Path, key: str) -> None:
        super().__init__(key)
        self._path = Path(path)

    @property
    def location(self) -> str:
        return f"{self._path}#{self.key}"

    def load_custom_tags(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
        # ValueError covers both malformed JSON and undecodable bytes
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise CustomTagStoreError(f"cannot read {self._path}: {err}") from err
        if not isinstance(document, dict):
            raise CustomTagStoreError(f"{self._path} does not contain a JSON object")
        return decode_custom_tags(document.get(self.key))

    def store_custom_tags(self, tags: Sequence[str]) -> None:
        document = self._read_document()
        document[self.key] = json.loads(encode_custom_tags(tags))
        self._write_document(document)
        logger.debug("Stored %d custom tags in %s", len(document[self.key]), self._path)

    def clear(self) -> None:
        document = self._read_document()
        if self.key in document:
            del document[self.key]
            self._write_document(document)

    def _read_document(self) -> dict[str, Any]:
        """Load the whole file for a read-modify-write; unreadable content is replaced."""
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            logger.warning("Discarding unreadable storage file %s: %s", self._path, err)
            return {}
        if not isinstance(document, dict):
            logger.warning("Discarding non-object storage file %s", self._path)
            return {}
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Write to temp file then rename so readers never see a partial file
        temp_file = self._path.with_suffix(".tmp")
        with open(temp_file, "w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=2)
        temp_file.replace(self._path)
