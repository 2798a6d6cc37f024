"""
Persistence for projects and their notes.

ProjectStore is the only place that talks to the session for project data.
Services receive it as a dependency, so tests can substitute a store whose
writes fail.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, ValidationError
from app.core.utils import BLANK, TAKEN, add_error, is_blank
from app.models.note import Note
from app.models.project import Project

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "due_on")


class ProjectStore:
    """Project persistence bound to a single request-scoped session."""

    def __init__(self, db: Session):
        self.db = db

    def list(self, owner_id: int) -> List[Project]:
        """Return the owner's projects in creation order."""
        return self.db.query(Project).filter(
            Project.owner_id == owner_id
        ).order_by(Project.id).all()

    def find(self, project_id: int) -> Optional[Project]:
        return self.db.query(Project).filter(Project.id == project_id).first()

    def get(self, project_id: int) -> Project:
        """
        Get a project by ID.

        Raises:
            NotFound: If no project has this ID
        """
        project = self.find(project_id)
        if project is None:
            raise NotFound("Project", project_id)
        return project

    def validate(self, owner_id: int, name: Optional[str], exclude_id: Optional[int] = None) -> None:
        """
        Check name presence, then per-owner uniqueness.

        Raises:
            ValidationError: With messages on the ``name`` field
        """
        errors: Dict[str, List[str]] = {}
        if is_blank(name):
            add_error(errors, "name", BLANK)
        elif self._name_taken(owner_id, name, exclude_id):
            add_error(errors, "name", TAKEN)
        if errors:
            raise ValidationError(errors)

    def _name_taken(self, owner_id: int, name: str, exclude_id: Optional[int]) -> bool:
        query = self.db.query(Project.id).filter(
            Project.owner_id == owner_id,
            Project.name == name
        )
        if exclude_id is not None:
            query = query.filter(Project.id != exclude_id)
        return query.first() is not None

    def create(self, owner_id: int, attributes: Dict[str, Any]) -> Project:
        """Validate and insert a pending project."""
        self.validate(owner_id, attributes.get("name"))
        project = Project(
            owner_id=owner_id,
            **{field: attributes.get(field) for field in EDITABLE_FIELDS}
        )
        self.db.add(project)
        self._commit_unique()
        self.db.refresh(project)
        return project

    def update(self, project: Project, attributes: Dict[str, Any]) -> Project:
        """
        Validate and apply changed fields.

        Nothing is written when validation fails, so the stored project keeps
        its prior state.
        """
        changes = {k: v for k, v in attributes.items() if k in EDITABLE_FIELDS}
        self.validate(project.owner_id, changes.get("name", project.name), exclude_id=project.id)
        for field, value in changes.items():
            setattr(project, field, value)
        self._commit_unique()
        self.db.refresh(project)
        return project

    def _commit_unique(self) -> None:
        # The unique constraint settles races between concurrent writers
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValidationError({"name": [TAKEN]})
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def save(self, project: Project, **changes: Any) -> bool:
        """
        Apply ``changes`` and commit.

        Returns False instead of raising when the write is rejected; the
        session is rolled back so the project reloads its stored state.
        """
        for field, value in changes.items():
            setattr(project, field, value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.warning("Failed to save project %s", project.id, exc_info=True)
            self.db.rollback()
            return False
        self.db.refresh(project)
        return True

    def delete(self, project: Project) -> None:
        """Delete the project and all of its notes in one transaction."""
        try:
            for note in list(project.notes):
                self.db.delete(note)
            self.db.delete(project)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def add_notes(self, project: Project, messages: List[str]) -> List[Note]:
        """Append notes to the project, preserving the given order."""
        errors: Dict[str, List[str]] = {}
        if any(is_blank(message) for message in messages):
            add_error(errors, "message", BLANK)
        if errors:
            raise ValidationError(errors)
        notes = [Note(message=message) for message in messages]
        project.notes.extend(notes)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        for note in notes:
            self.db.refresh(note)
        return notes

    def list_notes(self, project: Project) -> List[Note]:
        return self.db.query(Note).filter(
            Note.project_id == project.id
        ).order_by(Note.id).all()

    def count_notes(self, project: Project) -> int:
        return self.db.query(Note).filter(Note.project_id == project.id).count()
