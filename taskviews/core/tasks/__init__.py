"""Tasks module: status registry, task views and the move engine."""

from taskviews.core.tasks.move_service import MoveTaskInViewService
from taskviews.core.tasks.status_service import TaskStatusService
from taskviews.core.tasks.view_service import BoardColumn, TaskViewService

__all__ = ["BoardColumn", "MoveTaskInViewService", "TaskStatusService", "TaskViewService"]
