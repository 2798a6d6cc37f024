"""
Pydantic schemas for Note entity.
"""
from pydantic import BaseModel
from typing import List
from datetime import datetime


class NoteCreate(BaseModel):
    """Schema for adding one or more notes to a project."""
    messages: List[str]


class NoteResponse(BaseModel):
    """Schema for note response."""
    id: int
    project_id: int
    message: str
    created_at: datetime
    
    class Config:
        from_attributes = True
