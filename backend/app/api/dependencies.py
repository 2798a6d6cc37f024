"""
Shared FastAPI dependencies: acting user, project store and services.
"""
from typing import Optional

from fastapi import BackgroundTasks, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.exceptions import Unauthenticated
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User
from app.repositories.project_store import ProjectStore
from app.services.note_service import NoteService
from app.services.notification_service import BackgroundWelcomeNotifier, WelcomeNotifier
from app.services.project_service import ProjectService

bearer_scheme = HTTPBearer(auto_error=False)

welcome_notifier = WelcomeNotifier()


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Resolve the acting user from the bearer token, or None for guests."""
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials)
    if not payload or "user_id" not in payload:
        return None
    return db.query(User).filter(User.id == payload["user_id"]).first()


def get_current_user(actor: Optional[User] = Depends(get_current_actor)) -> User:
    """Like get_current_actor, but guests are rejected."""
    if actor is None:
        raise Unauthenticated()
    return actor


def get_project_store(db: Session = Depends(get_db)) -> ProjectStore:
    return ProjectStore(db)


def get_project_service(store: ProjectStore = Depends(get_project_store)) -> ProjectService:
    return ProjectService(store)


def get_note_service(store: ProjectStore = Depends(get_project_store)) -> NoteService:
    return NoteService(store)


def get_welcome_notifier() -> WelcomeNotifier:
    return welcome_notifier


def get_background_notifier(
    background_tasks: BackgroundTasks,
    notifier: WelcomeNotifier = Depends(get_welcome_notifier)
) -> BackgroundWelcomeNotifier:
    return BackgroundWelcomeNotifier(background_tasks, notifier)
