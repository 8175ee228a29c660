"""Polymorphic taskable owner shared by tasks and task views."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import declared_attr


class TaskableType(str, Enum):
    """Kinds of entities that can own tasks and task views."""

    CLIENT = "client"
    USER = "user"


@dataclass(frozen=True)
class TaskableRef:
    """Owner identity: the (type, id) pair stored on tasks and views."""

    type: TaskableType
    id: UUID

    def __post_init__(self) -> None:
        # Accept raw strings coming from the database or request payloads
        if not isinstance(self.type, TaskableType):
            object.__setattr__(self, "type", TaskableType(self.type))

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"


class TaskableMixin:
    """Adds the ``taskable_type``/``taskable_id`` columns and the ``taskable`` accessor."""

    @declared_attr
    def taskable_type(cls):
        return Column(String(20), nullable=False)

    @declared_attr
    def taskable_id(cls):
        return Column(Uuid(as_uuid=True), nullable=False)

    @property
    def taskable(self) -> TaskableRef:
        return TaskableRef(TaskableType(self.taskable_type), self.taskable_id)

    @taskable.setter
    def taskable(self, owner: TaskableRef) -> None:
        self.taskable_type = owner.type.value
        self.taskable_id = owner.id

    def belongs_to(self, owner: TaskableRef) -> bool:
        """Check whether this record is owned by ``owner``."""
        return self.taskable == owner
