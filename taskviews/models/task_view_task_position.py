"""Position Ledger model: explicit task order inside a view column."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Uuid
from sqlalchemy.orm import relationship

from taskviews.core.db.session import Base


class TaskViewTaskPosition(Base):
    """Position of one task in one view.

    The primary key is (view, task): a task occupies at most one column per
    view. ``task_status_id`` says which column, ``position`` is the zero-based
    rank within it.
    """

    __tablename__ = "task_view_task_positions"

    task_view_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("task_views.id", ondelete="CASCADE"),
        primary_key=True,
    )
    task_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tasks.id", ondelete="CASCADE"),
        primary_key=True,
    )
    task_status_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("task_statuses.id"),
        nullable=False,
    )
    position = Column(Integer, nullable=False, default=0)

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
    view = relationship("TaskView", back_populates="task_positions")
    status = relationship("TaskStatus")
    task = relationship("Task")

    __table_args__ = (
        Index(
            "idx_task_view_task_positions_view_status_position",
            "task_view_id",
            "task_status_id",
            "position",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<TaskViewTaskPosition(view={self.task_view_id}, task={self.task_id}, "
            f"status={self.task_status_id}, position={self.position})>"
        )
