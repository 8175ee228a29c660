"""Task view schemas for API requests and responses."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskviews.models.task_view import TaskViewType
from taskviews.models.taskable import TaskableType
from taskviews.schemas.task import TaskResponse
from taskviews.schemas.task_status import HEX_COLOR_PATTERN, TaskStatusResponse


class StatusEntry(BaseModel):
    """A status referenced by name, with the color used if it has to be created."""

    name: str = Field(..., description="Status name (case-insensitive)", min_length=1, max_length=100)
    color: str | None = Field(None, description="Hex color code", pattern=HEX_COLOR_PATTERN)


class TaskViewBase(BaseModel):
    """Base schema for task view."""

    name: str = Field(..., description="View name", min_length=1, max_length=255)
    type: TaskViewType = Field(default=TaskViewType.LIST, description="View type")
    metadata: dict[str, Any] | None = Field(None, description="Free-form view metadata")


class TaskViewCreate(TaskViewBase):
    """Schema for creating a task view.

    ``statuses`` wins over ``status_ids`` when both are sent.
    """

    taskable_type: TaskableType = Field(..., description="Owner type")
    taskable_id: UUID = Field(..., description="Owner ID")
    statuses: list[StatusEntry] | None = Field(
        None, description="Enabled statuses by name, in column order"
    )
    status_ids: list[UUID] | None = Field(
        None, description="Enabled status IDs, in column order"
    )
    is_default: bool = Field(default=False, description="Make this the owner's default view")


class TaskViewUpdate(BaseModel):
    """Schema for updating a task view."""

    name: str | None = Field(None, description="View name", min_length=1, max_length=255)
    type: TaskViewType | None = Field(None, description="View type")
    metadata: dict[str, Any] | None = Field(None, description="Free-form view metadata")


class SyncStatusesRequest(BaseModel):
    """Schema for replacing a view's enabled statuses by name."""

    statuses: list[StatusEntry] = Field(..., description="Statuses in column order", min_length=1)


class StatusIdsRequest(BaseModel):
    """Schema for replacing a view's enabled statuses by ID."""

    status_ids: list[UUID] = Field(..., description="Status IDs in column order", min_length=1)


class TaskViewResponse(BaseModel):
    """Schema for task view response."""

    id: UUID
    name: str
    slug: str
    type: str
    taskable_type: str
    taskable_id: UUID
    is_default: bool
    metadata: dict[str, Any] | None = Field(None, validation_alias="view_metadata")
    statuses: list[TaskStatusResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BoardColumnResponse(BaseModel):
    """One enabled status of a view with its tasks in order."""

    status: TaskStatusResponse
    tasks: list[TaskResponse]

    model_config = ConfigDict(from_attributes=True)
