"""
Project service: guarded project commands and the completion workflow.
"""
import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from app.core.exceptions import CompletionFailed
from app.core.utils import current_time
from app.models.project import Project
from app.models.user import User
from app.repositories.project_store import ProjectStore
from app.services.access_guard import authorize_project, require_actor
from app.services.lateness import is_late

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Entry point for project operations on behalf of an actor.

    Every method takes the acting user explicitly; ``None`` means the caller
    is not signed in.
    """

    def __init__(self, store: ProjectStore, clock: Callable[[], datetime] = current_time):
        self.store = store
        self.clock = clock

    def today(self) -> date:
        return self.clock().date()

    def is_late(self, project: Project) -> bool:
        return is_late(project, self.today())

    def list(self, actor: Optional[User]) -> List[Project]:
        actor = require_actor(actor)
        return self.store.list(actor.id)

    def create(self, actor: Optional[User], attributes: Dict[str, Any]) -> Project:
        actor = require_actor(actor)
        project = self.store.create(actor.id, attributes)
        logger.info("User %s created project %s", actor.id, project.id)
        return project

    def read(self, actor: Optional[User], project_id: int) -> Project:
        return authorize_project(actor, project_id, self.store)

    def update(self, actor: Optional[User], project_id: int, attributes: Dict[str, Any]) -> Project:
        project = authorize_project(actor, project_id, self.store)
        project = self.store.update(project, attributes)
        logger.info("Project %s updated", project.id)
        return project

    def delete(self, actor: Optional[User], project_id: int) -> None:
        project = authorize_project(actor, project_id, self.store)
        self.store.delete(project)
        logger.info("Project %s deleted", project_id)

    def complete(self, actor: Optional[User], project_id: int) -> Project:
        """
        Move a project from pending to completed.

        Completing an already completed project is a no-op and keeps the
        original timestamp.

        Raises:
            CompletionFailed: If the store did not persist the change
        """
        project = authorize_project(actor, project_id, self.store)
        if project.completed:
            return project
        if not self.store.save(project, completed_at=self.clock()):
            logger.warning("Unable to complete project %s", project_id)
            raise CompletionFailed(project_id)
        logger.info("Project %s completed", project_id)
        return project
