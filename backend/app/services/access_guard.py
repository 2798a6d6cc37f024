"""
Ownership checks applied before any project operation reaches the store.
"""
import logging
from typing import Optional

from app.core.exceptions import Forbidden, Unauthenticated
from app.models.project import Project
from app.models.user import User
from app.repositories.project_store import ProjectStore

logger = logging.getLogger(__name__)


def require_actor(actor: Optional[User]) -> User:
    """Return the actor, or raise Unauthenticated when there is none."""
    if actor is None:
        raise Unauthenticated()
    return actor


def authorize_project(actor: Optional[User], project_id: int, store: ProjectStore) -> Project:
    """
    Load a project the actor owns.

    A missing project and another user's project both raise Forbidden, so a
    non-owner cannot learn whether the ID exists.
    """
    actor = require_actor(actor)
    project = store.find(project_id)
    if project is None or project.owner_id != actor.id:
        logger.info("User %s denied access to project %s", actor.id, project_id)
        raise Forbidden()
    return project
