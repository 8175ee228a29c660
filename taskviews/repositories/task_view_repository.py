"""Task view repository for data access operations."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from taskviews.models.task_view import TaskView, task_view_statuses
from taskviews.models.taskable import TaskableRef


class TaskViewRepository:
    """Repository for task views and their enabled statuses.

    Methods flush but never commit: callers own the transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def _active(self):
        return self.db.query(TaskView).filter(TaskView.deleted_at.is_(None))

    def create_view(self, view_data: dict) -> TaskView:
        """Create a new task view."""
        view = TaskView(**view_data)
        self.db.add(view)
        self.db.flush()
        return view

    def get_view_by_id(self, view_id: UUID) -> TaskView | None:
        """Get a non-deleted view by ID."""
        return self._active().filter(TaskView.id == view_id).first()

    def get_view_by_slug(self, slug: str) -> TaskView | None:
        """Get a view by slug, including soft-deleted ones (slugs stay reserved)."""
        return self.db.query(TaskView).filter(TaskView.slug == slug).first()

    def get_views_for_owner(self, owner: TaskableRef) -> list[TaskView]:
        """Get non-deleted views of an owner, default view first."""
        return (
            self._active()
            .filter(
                TaskView.taskable_type == owner.type.value,
                TaskView.taskable_id == owner.id,
            )
            .order_by(TaskView.is_default.desc(), TaskView.name, TaskView.id)
            .all()
        )

    def lock_view(self, view_id: UUID) -> TaskView | None:
        """Load a view with a row lock held until the transaction ends."""
        return (
            self.db.query(TaskView)
            .filter(TaskView.id == view_id)
            .with_for_update()
            .first()
        )

    def update_view(self, view: TaskView, view_data: dict) -> TaskView:
        """Update view fields."""
        for key, value in view_data.items():
            setattr(view, key, value)
        self.db.flush()
        return view

    def clear_default_for_owner(self, owner: TaskableRef, except_view_id: UUID) -> None:
        """Unset ``is_default`` on the owner's other views."""
        self.db.query(TaskView).filter(
            TaskView.taskable_type == owner.type.value,
            TaskView.taskable_id == owner.id,
            TaskView.id != except_view_id,
        ).update({TaskView.is_default: False}, synchronize_session="fetch")

    def soft_delete_view(self, view: TaskView) -> None:
        """Mark a view as deleted."""
        view.deleted_at = datetime.now(UTC)
        self.db.flush()

    # Enabled statuses
    def get_enabled_status_ids(self, view_id: UUID) -> list[UUID]:
        """Get the IDs of the statuses enabled on a view, in column order."""
        rows = self.db.execute(
            select(task_view_statuses.c.task_status_id)
            .where(task_view_statuses.c.task_view_id == view_id)
            .order_by(task_view_statuses.c.position)
        )
        return [row[0] for row in rows]

    def is_status_enabled(self, view_id: UUID, status_id: UUID) -> bool:
        """Check whether a status is enabled on a view."""
        row = self.db.execute(
            select(task_view_statuses.c.task_status_id).where(
                task_view_statuses.c.task_view_id == view_id,
                task_view_statuses.c.task_status_id == status_id,
            )
        ).first()
        return row is not None

    def replace_statuses(self, view: TaskView, status_ids: list[UUID]) -> None:
        """Make ``status_ids`` exactly the view's enabled statuses, in that order.

        Only membership rows change; statuses and ledger rows are left alone.
        """
        self.db.execute(
            delete(task_view_statuses).where(task_view_statuses.c.task_view_id == view.id)
        )
        if status_ids:
            self.db.execute(
                insert(task_view_statuses),
                [
                    {"task_view_id": view.id, "task_status_id": status_id, "position": index}
                    for index, status_id in enumerate(status_ids)
                ],
            )
        self.db.expire(view, ["statuses"])
