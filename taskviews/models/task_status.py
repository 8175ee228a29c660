"""Task Status model for the global status registry."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from taskviews.core.db.session import Base


def normalize_status_name(name: str) -> str:
    """Build the case-insensitive lookup key for a status name."""
    return name.strip().lower()


class TaskStatus(Base):
    """
    Global task status shared by every taskable owner.

    Statuses are never partitioned per tenant or per view: views only choose
    which of them they enable. ``name_key`` holds the lower-cased name and is
    unique, so "Todo" and "TODO" resolve to the same row.
    """

    __tablename__ = "task_statuses"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(100), nullable=False)  # "Todo", "In Progress"
    name_key = Column(String(100), nullable=False, unique=True)
    color = Column(String(7), nullable=False)  # "#3498db"

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
    tasks = relationship("Task", back_populates="status")

    def __repr__(self) -> str:
        return f"<TaskStatus(id={self.id}, name='{self.name}', color='{self.color}')>"
