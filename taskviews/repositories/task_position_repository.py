"""Position Ledger repository: ordered task IDs per (view, status) column."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from taskviews.models.task import Task
from taskviews.models.task_view import TaskView
from taskviews.models.task_view_task_position import TaskViewTaskPosition


class TaskPositionRepository:
    """Repository for the per-view position ledger.

    Methods flush but never commit: callers own the transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def get_positioned_task_ids(self, view_id: UUID, status_id: UUID) -> list[UUID]:
        """Get task IDs explicitly recorded in a column, by stored position."""
        rows = (
            self.db.query(TaskViewTaskPosition.task_id)
            .filter(
                TaskViewTaskPosition.task_view_id == view_id,
                TaskViewTaskPosition.task_status_id == status_id,
            )
            .order_by(TaskViewTaskPosition.position, TaskViewTaskPosition.task_id)
            .all()
        )
        return [row.task_id for row in rows]

    def get_unpositioned_task_ids(self, view: TaskView, status_id: UUID) -> list[UUID]:
        """Get IDs of the owner's tasks in ``status_id`` that have no row in this view.

        Ordered by task ID so the implicit tail of a column is deterministic.
        """
        positioned_in_view = select(TaskViewTaskPosition.task_id).where(
            TaskViewTaskPosition.task_view_id == view.id
        )
        rows = (
            self.db.query(Task.id)
            .filter(
                Task.taskable_type == view.taskable_type,
                Task.taskable_id == view.taskable_id,
                Task.status_id == status_id,
                Task.id.notin_(positioned_in_view),
            )
            .order_by(Task.id)
            .all()
        )
        return [row.id for row in rows]

    def get_ordered_task_ids(self, view: TaskView, status_id: UUID) -> list[UUID]:
        """Get a column's full sequence: explicit rows first, then implicit tasks."""
        return self.get_positioned_task_ids(view.id, status_id) + self.get_unpositioned_task_ids(
            view, status_id
        )

    def get_position(self, view_id: UUID, task_id: UUID) -> TaskViewTaskPosition | None:
        """Get the ledger row of a task in a view, if any."""
        return self.db.get(TaskViewTaskPosition, (view_id, task_id))

    def get_positions_for_view(self, view_id: UUID) -> dict[UUID, TaskViewTaskPosition]:
        """Get every ledger row of a view keyed by task ID."""
        rows = (
            self.db.query(TaskViewTaskPosition)
            .filter(TaskViewTaskPosition.task_view_id == view_id)
            .all()
        )
        return {row.task_id: row for row in rows}

    def persist_column(
        self, view_id: UUID, status_id: UUID, ordered_task_ids: list[UUID]
    ) -> None:
        """Write a column so its rows are exactly ``ordered_task_ids`` at 0..n-1.

        Rows of the column whose task is not in the sequence are deleted; every
        task in the sequence gets its (view, task) row upserted, which also pulls
        it out of any other column of the same view.
        """
        stale_query = self.db.query(TaskViewTaskPosition).filter(
            TaskViewTaskPosition.task_view_id == view_id,
            TaskViewTaskPosition.task_status_id == status_id,
        )
        if ordered_task_ids:
            stale_query = stale_query.filter(
                TaskViewTaskPosition.task_id.notin_(ordered_task_ids)
            )
        for row in stale_query.all():
            self.db.delete(row)
        self.db.flush()

        if not ordered_task_ids:
            return

        existing = {
            row.task_id: row
            for row in self.db.query(TaskViewTaskPosition).filter(
                TaskViewTaskPosition.task_view_id == view_id,
                TaskViewTaskPosition.task_id.in_(ordered_task_ids),
            )
        }
        for index, task_id in enumerate(ordered_task_ids):
            row = existing.get(task_id)
            if row is None:
                self.db.add(
                    TaskViewTaskPosition(
                        task_view_id=view_id,
                        task_id=task_id,
                        task_status_id=status_id,
                        position=index,
                    )
                )
            else:
                row.task_status_id = status_id
                row.position = index
        self.db.flush()
