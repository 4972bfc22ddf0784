from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from notetagger.api.v1.schemas.note import NoteCreate, NoteRead
from notetagger.core.services.note_service import NoteService  # noqa: TCH001
from notetagger.dependencies import get_note_service

router = APIRouter()


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
):
    """Tag a note for saving.

    Suggested tags the user dismissed are dropped, hand-added ones appended, and
    any tag that is not built in is remembered as a custom tag.
    """
    try:
        note = service.create_note(
            payload.content,
            added_tags=payload.added_tags,
            removed_tags=payload.removed_tags,
        )
    except ValueError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    return NoteRead.model_validate(note)
