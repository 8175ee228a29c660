"""Task Status schemas for API requests and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class TaskStatusBase(BaseModel):
    """Base schema for task status."""

    name: str = Field(..., description="Status name", min_length=1, max_length=100)


class TaskStatusCreate(TaskStatusBase):
    """Schema for finding or creating a task status by name."""

    color: str | None = Field(
        None,
        description="Hex color code, only applied when the status is created",
        pattern=HEX_COLOR_PATTERN,
    )


class TaskStatusUpdate(BaseModel):
    """Schema for updating a task status."""

    name: str | None = Field(None, description="Status name", min_length=1, max_length=100)
    color: str | None = Field(None, description="Hex color code", pattern=HEX_COLOR_PATTERN)


class TaskStatusResponse(TaskStatusBase):
    """Schema for task status response."""

    id: UUID
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
