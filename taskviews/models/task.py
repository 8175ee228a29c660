"""Task model."""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import relationship

from taskviews.core.db.session import Base
from taskviews.models.taskable import TaskableMixin


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class TaskType(str, Enum):
    """Task type enumeration."""

    TASK = "task"
    BUG = "bug"
    FEATURE = "feature"
    DOCUMENTATION = "documentation"
    IMPROVEMENT = "improvement"


class Task(TaskableMixin, Base):
    """Task owned by a taskable entity.

    ``status_id`` is the authoritative status of the task regardless of any
    view; per-view positions live in ``task_view_task_positions``.
    """

    __tablename__ = "tasks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    # Task information
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(20), nullable=False, default=TaskType.TASK.value)
    priority = Column(String(20), nullable=False, default=TaskPriority.NORMAL.value, index=True)
    status_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("task_statuses.id"),
        nullable=False,
        index=True,
    )

    # Assignment (users live in the identity layer)
    created_by_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    assigned_to_id = Column(Uuid(as_uuid=True), nullable=True, index=True)

    # Dates
    due_date = Column(DateTime(timezone=True), nullable=True, index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    # Relationships
    status = relationship("TaskStatus", back_populates="tasks")

    __table_args__ = (
        Index("idx_tasks_taskable_status", "taskable_type", "taskable_id", "status_id"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title}, status_id={self.status_id})>"
