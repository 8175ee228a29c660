"""Task schemas for API requests and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TaskResponse(BaseModel):
    """Schema for task response."""

    id: UUID
    title: str
    description: str | None
    type: str
    priority: str
    status_id: UUID
    taskable_type: str
    taskable_id: UUID
    created_by_id: UUID | None
    assigned_to_id: UUID | None
    due_date: datetime | None
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MoveTaskRequest(BaseModel):
    """Schema for moving a task inside a view."""

    task_id: UUID = Field(..., description="Task to move")
    status_id: UUID = Field(..., description="Destination status (must be enabled on the view)")
    position: int = Field(
        ...,
        description="Zero-based target index; negatives become 0, past the end appends",
    )
