"""
Note routes nested under a project.
"""
from fastapi import APIRouter, Depends, status
from typing import List, Optional
from app.models.user import User
from app.schemas.note import NoteCreate, NoteResponse
from app.services.note_service import NoteService
from app.api.dependencies import get_current_actor, get_note_service

router = APIRouter(prefix="/projects/{project_id}/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    project_id: int,
    actor: Optional[User] = Depends(get_current_actor),
    service: NoteService = Depends(get_note_service)
):
    """List a project's notes in the order they were added."""
    return service.list_notes(actor, project_id)


@router.post("", response_model=List[NoteResponse], status_code=status.HTTP_201_CREATED)
async def add_notes(
    project_id: int,
    note_data: NoteCreate,
    actor: Optional[User] = Depends(get_current_actor),
    service: NoteService = Depends(get_note_service)
):
    """Append notes to a project."""
    return service.add_notes(actor, project_id, note_data.messages)
