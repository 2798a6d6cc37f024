"""
Tests for project validation, persistence and notes.
"""
import pytest
from datetime import date
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFound, ValidationError
from app.models.note import Note
from app.repositories.project_store import ProjectStore


@pytest.fixture
def store(db):
    return ProjectStore(db)


def test_create_project(store, make_user):
    user = make_user()
    project = store.create(user.id, {"name": "Test Project", "due_on": date(2030, 1, 1)})

    assert project.id is not None
    assert project.completed_at is None
    assert store.list(user.id) == [project]


def test_invalid_without_a_name(store, make_user):
    user = make_user()
    with pytest.raises(ValidationError) as excinfo:
        store.create(user.id, {"name": None})
    assert excinfo.value.errors["name"] == ["can't be blank"]


def test_blank_name_is_reported_before_uniqueness(store, make_user):
    user = make_user()
    with pytest.raises(ValidationError) as excinfo:
        store.create(user.id, {"name": "   "})
    assert excinfo.value.errors == {"name": ["can't be blank"]}


def test_duplicate_name_per_user(store, make_user, make_project):
    user = make_user()
    make_project(owner=user, name="Test Project")

    with pytest.raises(ValidationError) as excinfo:
        store.create(user.id, {"name": "Test Project"})
    assert excinfo.value.errors["name"] == ["has already been taken"]
    assert len(store.list(user.id)) == 1


def test_two_users_can_share_a_project_name(store, make_user, make_project):
    make_project(name="Test Project")
    other_user = make_user(first_name="Jane", last_name="Tester")

    project = store.create(other_user.id, {"name": "Test Project"})
    assert project.name == "Test Project"


def test_name_uniqueness_is_case_sensitive(store, make_user, make_project):
    user = make_user()
    make_project(owner=user, name="Test Project")

    project = store.create(user.id, {"name": "test project"})
    assert project.name == "test project"


def test_unique_constraint_rejects_race(store, db, make_user, make_project):
    user = make_user()
    make_project(owner=user, name="Test Project")
    # Simulate a concurrent writer that passed the pre-check
    store._name_taken = lambda *args: False

    with pytest.raises(ValidationError) as excinfo:
        store.create(user.id, {"name": "Test Project"})
    assert excinfo.value.errors == {"name": ["has already been taken"]}
    assert len(store.list(user.id)) == 1


def test_update_project(store, make_project):
    project = make_project()
    store.update(project, {"name": "New Project Name", "description": None})

    assert project.name == "New Project Name"
    assert project.description is None


def test_update_keeps_own_name(store, make_project):
    project = make_project(name="Same Old Name")
    store.update(project, {"name": "Same Old Name", "description": "changed"})
    assert project.description == "changed"


def test_failed_update_keeps_prior_state(store, db, make_user, make_project):
    user = make_user()
    make_project(owner=user, name="Taken")
    project = make_project(owner=user, name="Original", description="before")

    with pytest.raises(ValidationError):
        store.update(project, {"name": "Taken", "description": "after"})
    with pytest.raises(ValidationError):
        store.update(project, {"name": ""})

    db.refresh(project)
    assert project.name == "Original"
    assert project.description == "before"


def test_get_missing_project(store):
    with pytest.raises(NotFound):
        store.get(999)


def test_can_have_many_notes(make_project):
    project = make_project(notes=5)
    assert len(project.notes) == 5


def test_add_notes_preserves_order(store, make_project):
    project = make_project()
    store.add_notes(project, ["first", "second"])
    store.add_notes(project, ["third"])

    assert [note.message for note in store.list_notes(project)] == ["first", "second", "third"]
    assert store.count_notes(project) == 3


def test_blank_note_is_rejected(store, make_project):
    project = make_project()
    with pytest.raises(ValidationError) as excinfo:
        store.add_notes(project, ["ok", ""])
    assert excinfo.value.errors == {"message": ["can't be blank"]}
    assert store.count_notes(project) == 0


@pytest.mark.parametrize("note_count", [0, 1, 5])
def test_delete_removes_project_and_notes(store, db, make_project, note_count):
    project = make_project(notes=note_count)
    project_id = project.id
    other = make_project(notes=2)

    store.delete(project)

    with pytest.raises(NotFound):
        store.get(project_id)
    assert db.query(Note).filter(Note.project_id == project_id).count() == 0
    assert store.count_notes(other) == 2


def test_save_reports_failure_and_rolls_back(store, db, make_project, monkeypatch):
    project = make_project()

    def failing_commit():
        raise OperationalError("UPDATE projects", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", failing_commit)
    assert store.save(project, completed_at=project.created_at) is False
    monkeypatch.undo()

    assert project.completed_at is None


def test_failed_update_commit_rolls_back(store, db, make_project, monkeypatch):
    project = make_project(name="Original")

    def failing_commit():
        raise OperationalError("UPDATE projects", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(OperationalError):
        store.update(project, {"name": "New"})
    monkeypatch.undo()

    assert project.name == "Original"
    store.save(project, description="saved later")
    db.refresh(project)
    assert project.name == "Original"
    assert project.description == "saved later"


def test_failed_note_commit_rolls_back(store, db, make_project, monkeypatch):
    project = make_project()

    def failing_commit():
        raise OperationalError("INSERT INTO notes", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(OperationalError):
        store.add_notes(project, ["lost"])
    monkeypatch.undo()

    assert project.notes == []
    assert store.count_notes(project) == 0
