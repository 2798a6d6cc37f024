"""
Shared fixtures: in-memory database, API client and record factories.
"""
import itertools
import os
from datetime import timedelta

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.api.dependencies import get_project_store, get_welcome_notifier
from app.core.security import create_access_token, get_password_hash
from app.core.utils import current_date
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.note import Note
from app.models.project import Project
from app.models.user import User
from app.repositories.project_store import ProjectStore
from app.services.notification_service import WelcomeNotifier

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password"
_password_hash = None


def password_hash() -> str:
    global _password_hash
    if _password_hash is None:
        _password_hash = get_password_hash(PASSWORD)
    return _password_hash


class RecordingNotifier(WelcomeNotifier):
    """Keeps delivered messages instead of logging them."""

    def __init__(self):
        self.deliveries = []

    def deliver(self, message):
        self.deliveries.append(message)


class FlakyProjectStore(ProjectStore):
    """Store whose first ``failures`` saves are rejected."""

    def __init__(self, db, failures=1):
        super().__init__(db)
        self.failures = failures

    def save(self, project, **changes):
        if self.failures > 0:
            self.failures -= 1
            return False
        return super().save(project, **changes)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(db, notifier):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_welcome_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def flaky_store(db):
    return FlakyProjectStore(db)


@pytest.fixture
def make_user(db):
    sequence = itertools.count(1)

    def _make_user(**overrides):
        n = next(sequence)
        attributes = {
            "first_name": "satoshi",
            "last_name": "todaka",
            "email": f"test{n}@example.com",
            "hashed_password": password_hash(),
        }
        attributes.update(overrides)
        user = User(**attributes)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_project(db, make_user):
    sequence = itertools.count(1)

    def _make_project(owner=None, notes=0, **overrides):
        n = next(sequence)
        owner = owner or make_user()
        attributes = {
            "name": f"Project{n}",
            "description": "A test project",
            "due_on": current_date() + timedelta(weeks=1),
        }
        attributes.update(overrides)
        project = Project(owner_id=owner.id, **attributes)
        project.notes.extend(Note(message=f"Note {i + 1}") for i in range(notes))
        db.add(project)
        db.commit()
        db.refresh(project)
        return project

    return _make_project


def auth_headers(user):
    token = create_access_token({"sub": user.email, "user_id": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers
