from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from notetagger.api.v1.schemas.tags import (
    CustomTagCreate,
    CustomTagCreateResult,
    CustomTagList,
    TagExport,
    TagImport,
    TagImportResult,
    TagLookupResponse,
    TagSuggestRequest,
    TagSuggestResponse,
)
from notetagger.config import settings
from notetagger.core.schemas.tagging import PrefixMatch, TagEntry
from notetagger.core.services.tag_registry import TagRegistry  # noqa: TCH001
from notetagger.core.services.tagger_service import TaggerService  # noqa: TCH001
from notetagger.dependencies import get_tag_registry, get_tagger_service

router = APIRouter()


@router.post("/suggest", response_model=TagSuggestResponse)
def suggest_tags(
    payload: TagSuggestRequest,
    tagger: TaggerService = Depends(get_tagger_service),
):
    """Suggest tags for a note's text. Empty text yields no tags."""
    return TagSuggestResponse(tags=tagger.suggest(payload.text))


@router.get("/autocomplete", response_model=list[PrefixMatch])
def autocomplete(
    prefix: str = Query(default="", max_length=100),
    limit: int = Query(default=settings.autocomplete_limit, ge=1, le=500),
    tagger: TaggerService = Depends(get_tagger_service),
):
    return tagger.autocomplete(prefix, limit=limit)


@router.get("/lookup", response_model=TagLookupResponse)
def lookup(
    key: str = Query(min_length=1, max_length=100),
    tagger: TaggerService = Depends(get_tagger_service),
):
    tag = tagger.resolve(key)
    if tag is None:
        raise HTTPException(status_code=404, detail="No tag for this keyword")
    return TagLookupResponse(key=key.lower(), tag=tag)


@router.get("/seed", response_model=list[TagEntry])
def list_seed_entries(registry: TagRegistry = Depends(get_tag_registry)):
    return registry.vocabulary().seed


@router.get("/custom", response_model=CustomTagList)
def list_custom_tags(registry: TagRegistry = Depends(get_tag_registry)):
    return CustomTagList(custom_tags=registry.custom_tags)


@router.post("/custom", response_model=CustomTagCreateResult)
def add_custom_tag(
    payload: CustomTagCreate,
    registry: TagRegistry = Depends(get_tag_registry),
):
    """Store a custom tag. Repeating the call, or naming a built-in tag, is a no-op."""
    created = registry.add_custom_tag(payload.tag)
    return CustomTagCreateResult(tag=payload.tag, created=created)


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_custom_tags(registry: TagRegistry = Depends(get_tag_registry)):
    """Drop every custom tag and go back to the built-in lexicon."""
    registry.reset()
    return None


@router.get("/export", response_model=TagExport)
def export_custom_tags(registry: TagRegistry = Depends(get_tag_registry)):
    return TagExport(custom_tags=registry.custom_tags, export_date=datetime.now(UTC))


@router.post("/import", response_model=TagImportResult)
def import_custom_tags(
    payload: TagImport,
    registry: TagRegistry = Depends(get_tag_registry),
):
    """Merge custom tags from an export file into the registry."""
    imported = registry.add_custom_tags(payload.custom_tags)
    return TagImportResult(imported=imported, custom_tags=registry.custom_tags)
