"""Unit tests for the task status registry."""

from uuid import uuid4

import pytest

from taskviews.core.exceptions import APIException
from taskviews.core.tasks.exceptions import TaskStatusNameRequiredException
from taskviews.core.tasks.status_service import DEFAULT_STATUSES, TaskStatusService
from taskviews.models.task_status import TaskStatus, normalize_status_name


def test_normalize_status_name():
    assert normalize_status_name("  In Progress ") == "in progress"


def test_find_or_create_creates_missing_status(db_session):
    """A missing name creates exactly one status with the given color."""
    service = TaskStatusService(db_session)

    status = service.find_or_create_by_name("Review", "#9b59b6")

    assert status.id is not None
    assert status.name == "Review"
    assert status.color == "#9b59b6"
    assert db_session.query(TaskStatus).count() == 1


def test_find_or_create_is_case_insensitive(db_session):
    """Different casing resolves to the same row."""
    service = TaskStatusService(db_session)
    original = service.find_or_create_by_name("Todo", "#3498db")

    again = service.find_or_create_by_name("TODO")
    spaced = service.find_or_create_by_name("  todo  ")

    assert again.id == original.id
    assert spaced.id == original.id
    assert again.name == "Todo"
    assert db_session.query(TaskStatus).count() == 1


def test_find_or_create_keeps_existing_color(db_session):
    """The color argument only applies on creation."""
    service = TaskStatusService(db_session)
    service.find_or_create_by_name("Done", "#2ecc71")

    status = service.find_or_create_by_name("done", "#000000")

    assert status.color == "#2ecc71"


def test_find_or_create_uses_default_color(db_session):
    status = TaskStatusService(db_session).find_or_create_by_name("Backlog")

    assert status.color == "#3498db"


@pytest.mark.parametrize("name", ["", "   "])
def test_find_or_create_rejects_blank_name(db_session, name):
    with pytest.raises(TaskStatusNameRequiredException) as exc_info:
        TaskStatusService(db_session).find_or_create_by_name(name)

    assert exc_info.value.code == "TASK_STATUS_NAME_REQUIRED"
    assert db_session.query(TaskStatus).count() == 0


def test_initialize_default_statuses_is_idempotent(db_session):
    service = TaskStatusService(db_session)

    first = service.initialize_default_statuses()
    second = service.initialize_default_statuses()

    assert [s.name for s in first] == [data["name"] for data in DEFAULT_STATUSES]
    assert [s.id for s in second] == [s.id for s in first]
    assert db_session.query(TaskStatus).count() == len(DEFAULT_STATUSES)


def test_get_statuses_ordered_by_name(db_session, make_status):
    make_status("Todo")
    make_status("Blocked")
    make_status("Done")

    names = [s.name for s in TaskStatusService(db_session).get_statuses()]

    assert names == ["Blocked", "Done", "Todo"]


def test_get_status_or_404(db_session):
    with pytest.raises(APIException) as exc_info:
        TaskStatusService(db_session).get_status_or_404(uuid4())

    assert exc_info.value.code == "TASK_STATUS_NOT_FOUND"
    assert exc_info.value.status_code == 404


class TestUpdateStatus:
    """Tests for renaming and recoloring statuses."""

    def test_update_name_and_color(self, db_session, make_status):
        status = make_status("Doing", "#f1c40f")

        updated = TaskStatusService(db_session).update_status(
            status.id, {"name": " In Progress ", "color": "#e67e22"}
        )

        assert updated.name == "In Progress"
        assert updated.name_key == "in progress"
        assert updated.color == "#e67e22"

    def test_rename_to_existing_name_conflicts(self, db_session, make_status):
        make_status("Todo")
        doing = make_status("Doing")

        with pytest.raises(APIException) as exc_info:
            TaskStatusService(db_session).update_status(doing.id, {"name": "TODO"})

        assert exc_info.value.code == "TASK_STATUS_NAME_CONFLICT"
        assert exc_info.value.status_code == 409

    def test_rename_changing_only_case(self, db_session, make_status):
        status = make_status("todo")

        updated = TaskStatusService(db_session).update_status(status.id, {"name": "Todo"})

        assert updated.id == status.id
        assert updated.name == "Todo"

    def test_rename_to_blank_name_is_rejected(self, db_session, make_status):
        status = make_status("Doing")

        with pytest.raises(TaskStatusNameRequiredException):
            TaskStatusService(db_session).update_status(status.id, {"name": "   "})

        db_session.expire_all()
        stored = db_session.get(TaskStatus, status.id)
        assert stored.name == "Doing"
        assert stored.name_key == "doing"
