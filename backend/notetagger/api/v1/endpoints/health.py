from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notetagger import __version__
from notetagger.config import settings
from notetagger.core.services.tag_registry import TagRegistry  # noqa: TCH001
from notetagger.dependencies import get_tag_registry

router = APIRouter()


@router.get("/")
def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notetagger-api",
            "version": __version__
        }
    )


@router.get("/ready")
def readiness_check(registry: TagRegistry = Depends(get_tag_registry)):
    """Readiness check: the lexicon is built and storage is known."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "lexicon_size": len(registry.trie),
            "custom_tags": len(registry.custom_tags),
            "storage": registry.store_location,
            "api_prefix": settings.api_prefix
        }
    )
