from taskviews.core.db.session import Base
from taskviews.models.task import Task, TaskPriority, TaskType
from taskviews.models.task_status import TaskStatus
from taskviews.models.task_view import TaskView, TaskViewType, task_view_statuses
from taskviews.models.task_view_task_position import TaskViewTaskPosition
from taskviews.models.taskable import TaskableRef, TaskableType

__all__ = [
    "Base",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TaskType",
    "TaskView",
    "TaskViewTaskPosition",
    "TaskViewType",
    "TaskableRef",
    "TaskableType",
    "task_view_statuses",
]
