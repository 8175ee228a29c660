"""Task status registry endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from taskviews.core.db.deps import get_db
from taskviews.core.tasks.status_service import get_task_status_service
from taskviews.schemas.common import PaginationMeta, StandardListResponse, StandardResponse
from taskviews.schemas.task_status import (
    TaskStatusCreate,
    TaskStatusResponse,
    TaskStatusUpdate,
)

router = APIRouter()


@router.get(
    "",
    response_model=StandardListResponse[TaskStatusResponse],
    status_code=status.HTTP_200_OK,
    summary="List task statuses",
    description="List every status of the global registry, ordered by name.",
)
async def list_task_statuses(
    db: Annotated[Session, Depends(get_db)],
) -> StandardListResponse[TaskStatusResponse]:
    """List task statuses."""
    statuses = get_task_status_service(db).get_statuses()

    return StandardListResponse(
        data=[TaskStatusResponse.model_validate(s) for s in statuses],
        meta=PaginationMeta.single_page(len(statuses)),
    )


@router.post(
    "",
    response_model=StandardResponse[TaskStatusResponse],
    status_code=status.HTTP_200_OK,
    summary="Find or create task status",
    description=(
        "Return the status whose name matches ignoring case, creating it when missing. "
        "The color is only applied on creation."
    ),
)
async def find_or_create_task_status(
    status_data: TaskStatusCreate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskStatusResponse]:
    """Find or create a task status by name."""
    task_status = get_task_status_service(db).find_or_create_by_name(
        status_data.name, status_data.color
    )

    return StandardResponse(data=TaskStatusResponse.model_validate(task_status))


@router.get(
    "/{status_id}",
    response_model=StandardResponse[TaskStatusResponse],
    status_code=status.HTTP_200_OK,
    summary="Get task status",
)
async def get_task_status(
    status_id: Annotated[UUID, Path(..., description="Status ID")],
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskStatusResponse]:
    """Get a task status by ID."""
    task_status = get_task_status_service(db).get_status_or_404(status_id)

    return StandardResponse(data=TaskStatusResponse.model_validate(task_status))


@router.patch(
    "/{status_id}",
    response_model=StandardResponse[TaskStatusResponse],
    status_code=status.HTTP_200_OK,
    summary="Update task status",
    description="Rename or recolor a status. Names stay unique ignoring case.",
)
async def update_task_status(
    status_id: Annotated[UUID, Path(..., description="Status ID")],
    status_data: TaskStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskStatusResponse]:
    """Update a task status."""
    task_status = get_task_status_service(db).update_status(
        status_id=status_id,
        update_data=status_data.model_dump(exclude_unset=True),
    )

    return StandardResponse(data=TaskStatusResponse.model_validate(task_status))
