"""Repositories for data access operations."""

from taskviews.repositories.task_position_repository import TaskPositionRepository
from taskviews.repositories.task_repository import TaskRepository
from taskviews.repositories.task_status_repository import TaskStatusRepository
from taskviews.repositories.task_view_repository import TaskViewRepository

__all__ = [
    "TaskPositionRepository",
    "TaskRepository",
    "TaskStatusRepository",
    "TaskViewRepository",
]
