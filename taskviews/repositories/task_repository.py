"""Task repository for data access operations."""

from uuid import UUID

from sqlalchemy.orm import Session

from taskviews.models.task import Task
from taskviews.models.taskable import TaskableRef


class TaskRepository:
    """Repository for task data access."""

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def create_task(self, task_data: dict) -> Task:
        """Create a new task."""
        task = Task(**task_data)
        self.db.add(task)
        self.db.flush()
        return task

    def get_task_by_id(self, task_id: UUID) -> Task | None:
        """Get task by ID."""
        return self.db.query(Task).filter(Task.id == task_id).first()

    def get_tasks_by_owner(
        self,
        owner: TaskableRef,
        status_ids: list[UUID] | None = None,
    ) -> list[Task]:
        """Get tasks of an owner, optionally restricted to some statuses, by ID."""
        query = self.db.query(Task).filter(
            Task.taskable_type == owner.type.value,
            Task.taskable_id == owner.id,
        )
        if status_ids is not None:
            if not status_ids:
                return []
            query = query.filter(Task.status_id.in_(status_ids))
        return query.order_by(Task.id).all()

    def get_task_by_owner_and_title(self, owner: TaskableRef, title: str) -> Task | None:
        """Get an owner's task by exact title."""
        return (
            self.db.query(Task)
            .filter(
                Task.taskable_type == owner.type.value,
                Task.taskable_id == owner.id,
                Task.title == title,
            )
            .first()
        )
