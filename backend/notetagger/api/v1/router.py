from __future__ import annotations

from fastapi import APIRouter

from .endpoints import health, notes, tags

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(notes.router, prefix="/notes", tags=["notes"])
