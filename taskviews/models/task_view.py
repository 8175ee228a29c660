"""Task view models: per-owner arrangements of tasks and their enabled statuses."""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from taskviews.core.db.session import Base
from taskviews.models.taskable import TaskableMixin


class TaskViewType(str, Enum):
    """Task view type enumeration."""

    LIST = "list"
    KANBAN = "kanban"
    CALENDAR = "calendar"
    GANTT = "gantt"


# Enabled statuses (columns) per view; position is the column order
task_view_statuses = Table(
    "task_view_statuses",
    Base.metadata,
    Column(
        "task_view_id",
        Uuid(as_uuid=True),
        ForeignKey("task_views.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "task_status_id",
        Uuid(as_uuid=True),
        ForeignKey("task_statuses.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False, default=0),
    UniqueConstraint("task_view_id", "task_status_id", name="uq_task_view_statuses_view_status"),
)


class TaskView(TaskableMixin, Base):
    """Named, typed view over the tasks of one taskable owner."""

    __tablename__ = "task_views"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    # View information
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    type = Column(String(20), nullable=False, default=TaskViewType.LIST.value)
    view_metadata = Column(
        "metadata", JSON().with_variant(JSONB, "postgresql"), nullable=True
    )
    is_default = Column(Boolean, default=False, nullable=False)

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
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    statuses = relationship(
        "TaskStatus",
        secondary=task_view_statuses,
        order_by=task_view_statuses.c.position,
        viewonly=True,
    )
    task_positions = relationship(
        "TaskViewTaskPosition",
        back_populates="view",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_task_views_taskable", "taskable_type", "taskable_id"),
    )

    @property
    def view_type(self) -> TaskViewType:
        return TaskViewType(self.type)

    def __repr__(self) -> str:
        return f"<TaskView(id={self.id}, name={self.name}, type={self.type})>"
