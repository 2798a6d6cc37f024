"""
Note service for notes attached to a project.
"""
from typing import List, Optional

from app.models.note import Note
from app.models.user import User
from app.repositories.project_store import ProjectStore
from app.services.access_guard import authorize_project


class NoteService:
    """Guarded access to a project's ordered notes."""

    def __init__(self, store: ProjectStore):
        self.store = store

    def add_notes(self, actor: Optional[User], project_id: int, messages: List[str]) -> List[Note]:
        project = authorize_project(actor, project_id, self.store)
        return self.store.add_notes(project, messages)

    def list_notes(self, actor: Optional[User], project_id: int) -> List[Note]:
        project = authorize_project(actor, project_id, self.store)
        return self.store.list_notes(project)

    def count(self, actor: Optional[User], project_id: int) -> int:
        project = authorize_project(actor, project_id, self.store)
        return self.store.count_notes(project)
