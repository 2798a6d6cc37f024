"""
Pydantic schemas for Project entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime
from app.schemas.note import NoteResponse


class ProjectCreate(BaseModel):
    """Schema for project creation. Name presence is checked by the store."""
    name: Optional[str] = None
    description: Optional[str] = None
    due_on: Optional[date] = None


class ProjectUpdate(BaseModel):
    """Schema for project update. Only fields that were sent are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    due_on: Optional[date] = None


class ProjectResponse(BaseModel):
    """Schema for project response."""
    id: int
    owner_id: int
    name: str
    description: Optional[str] = None
    due_on: Optional[date] = None
    completed_at: Optional[datetime] = None
    completed: bool
    late: bool = False
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class ProjectDetailResponse(ProjectResponse):
    """Schema for detailed project response with notes."""
    notes: List[NoteResponse] = []
