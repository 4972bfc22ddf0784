from __future__ import annotations

MAX_TAG_LENGTH = 50


def normalize_tag(tag: str) -> str | None:
    """Trim a user-entered tag; return None when nothing usable is left."""
    cleaned = " ".join(tag.split())
    if not cleaned:
        return None
    return cleaned[:MAX_TAG_LENGTH]


def normalize_tag_list(tags: list[str]) -> list[str]:
    """Trim tags and drop blanks and exact duplicates, keeping first-seen order."""
    normalized: list[str] = []
    for tag in tags:
        cleaned = normalize_tag(tag) if isinstance(tag, str) else None
        if cleaned and cleaned not in normalized:
            normalized.append(cleaned)
    return normalized
