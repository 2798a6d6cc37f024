"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.project import Project
from app.models.note import Note

__all__ = [
    "User",
    "Project",
    "Note",
]
