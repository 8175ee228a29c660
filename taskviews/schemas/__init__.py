"""Pydantic schemas for API requests and responses."""

from taskviews.schemas.common import (
    ErrorDetail,
    ErrorResponse,
    PaginationMeta,
    StandardListResponse,
    StandardResponse,
)
from taskviews.schemas.task import MoveTaskRequest, TaskResponse
from taskviews.schemas.task_status import (
    TaskStatusCreate,
    TaskStatusResponse,
    TaskStatusUpdate,
)
from taskviews.schemas.task_view import (
    BoardColumnResponse,
    StatusEntry,
    StatusIdsRequest,
    SyncStatusesRequest,
    TaskViewCreate,
    TaskViewResponse,
    TaskViewUpdate,
)

__all__ = [
    "BoardColumnResponse",
    "ErrorDetail",
    "ErrorResponse",
    "MoveTaskRequest",
    "PaginationMeta",
    "StandardListResponse",
    "StandardResponse",
    "StatusEntry",
    "StatusIdsRequest",
    "SyncStatusesRequest",
    "TaskResponse",
    "TaskStatusCreate",
    "TaskStatusResponse",
    "TaskStatusUpdate",
    "TaskViewCreate",
    "TaskViewResponse",
    "TaskViewUpdate",
]
