"""Unit tests for the taskable owner reference."""

from uuid import uuid4

import pytest

from taskviews.models.task import Task
from taskviews.models.taskable import TaskableRef, TaskableType


def test_taskable_ref_coerces_type_string():
    owner_id = uuid4()
    ref = TaskableRef("client", owner_id)

    assert ref.type is TaskableType.CLIENT
    assert ref == TaskableRef(TaskableType.CLIENT, owner_id)
    assert str(ref) == f"client:{owner_id}"


def test_taskable_ref_rejects_unknown_type():
    with pytest.raises(ValueError):
        TaskableRef("project", uuid4())


def test_taskable_accessor_round_trip():
    owner = TaskableRef(TaskableType.USER, uuid4())
    task = Task(title="Write docs")

    task.taskable = owner

    assert task.taskable_type == "user"
    assert task.taskable_id == owner.id
    assert task.belongs_to(owner)
    assert not task.belongs_to(TaskableRef(TaskableType.CLIENT, owner.id))
