"""Task view endpoints: view management, enabled statuses, boards and moves."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from taskviews.core.db.deps import get_db
from taskviews.core.exceptions import raise_not_found
from taskviews.core.tasks.move_service import get_move_task_in_view_service
from taskviews.core.tasks.status_service import get_task_status_service
from taskviews.core.tasks.view_service import TaskViewService, get_task_view_service
from taskviews.models.task_view import TaskView
from taskviews.models.taskable import TaskableRef, TaskableType
from taskviews.repositories.task_repository import TaskRepository
from taskviews.schemas.common import PaginationMeta, StandardListResponse, StandardResponse
from taskviews.schemas.task import MoveTaskRequest, TaskResponse
from taskviews.schemas.task_view import (
    BoardColumnResponse,
    StatusIdsRequest,
    SyncStatusesRequest,
    TaskViewCreate,
    TaskViewResponse,
    TaskViewUpdate,
)

router = APIRouter()

ViewId = Annotated[UUID, Path(..., description="Task view ID")]


def _board_response(service: TaskViewService, view: TaskView) -> list[BoardColumnResponse]:
    return [BoardColumnResponse.model_validate(column) for column in service.get_board(view)]


@router.get(
    "",
    response_model=StandardListResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="List task views of an owner",
    description="List the non-deleted views of a taskable owner, default view first.",
)
async def list_task_views(
    taskable_type: Annotated[TaskableType, Query(..., description="Owner type")],
    taskable_id: Annotated[UUID, Query(..., description="Owner ID")],
    db: Annotated[Session, Depends(get_db)],
) -> StandardListResponse[TaskViewResponse]:
    """List task views."""
    views = get_task_view_service(db).list_views_for_owner(TaskableRef(taskable_type, taskable_id))

    return StandardListResponse(
        data=[TaskViewResponse.model_validate(v) for v in views],
        meta=PaginationMeta.single_page(len(views)),
    )


@router.post(
    "",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create task view",
    description=(
        "Create a view for a taskable owner. Enabled statuses are given by name "
        "(created when missing) or by ID."
    ),
)
async def create_task_view(
    view_data: TaskViewCreate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Create a task view."""
    view = get_task_view_service(db).create_view(
        owner=TaskableRef(view_data.taskable_type, view_data.taskable_id),
        name=view_data.name,
        view_type=view_data.type,
        statuses=(
            [entry.model_dump() for entry in view_data.statuses]
            if view_data.statuses is not None
            else None
        ),
        status_ids=view_data.status_ids,
        metadata=view_data.metadata,
        is_default=view_data.is_default,
    )

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.get(
    "/{view_id}",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="Get task view",
)
async def get_task_view(
    view_id: ViewId,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Get a task view by ID."""
    view = get_task_view_service(db).get_view_or_404(view_id)

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.patch(
    "/{view_id}",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="Update task view",
    description="Update name, type and/or metadata. The slug follows name and type.",
)
async def update_task_view(
    view_id: ViewId,
    view_data: TaskViewUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Update a task view."""
    service = get_task_view_service(db)
    view = service.get_view_or_404(view_id)

    if view_data.name is not None and view_data.type is None and view_data.metadata is None:
        view = service.rename_view(view, view_data.name)
    else:
        view = service.update_view(
            view,
            name=view_data.name,
            view_type=view_data.type,
            metadata=view_data.metadata,
        )

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.delete(
    "/{view_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete task view",
    description="Soft delete a view. Statuses and tasks are left untouched.",
)
async def delete_task_view(
    view_id: ViewId,
    db: Annotated[Session, Depends(get_db)],
) -> None:
    """Delete a task view."""
    service = get_task_view_service(db)
    service.delete_view(service.get_view_or_404(view_id))


@router.patch(
    "/{view_id}/default",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="Set default task view",
    description="Make the view its owner's only default view.",
)
async def set_default_task_view(
    view_id: ViewId,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Set the default task view of an owner."""
    service = get_task_view_service(db)
    view = service.set_default_view(service.get_view_or_404(view_id))

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.put(
    "/{view_id}/statuses",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="Sync enabled statuses by name",
    description=(
        "Replace the view's enabled statuses with the given names, in order. Missing "
        "statuses are created; statuses left out are only detached."
    ),
)
async def sync_task_view_statuses(
    view_id: ViewId,
    sync_data: SyncStatusesRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Sync the enabled statuses of a view by name."""
    service = get_task_view_service(db)
    view = service.get_view_or_404(view_id)
    service.sync_statuses_by_names(view, [entry.model_dump() for entry in sync_data.statuses])

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.put(
    "/{view_id}/status-ids",
    response_model=StandardResponse[TaskViewResponse],
    status_code=status.HTTP_200_OK,
    summary="Sync enabled statuses by ID",
    description="Replace the view's enabled statuses with existing statuses, in order.",
)
async def update_task_view_status_ids(
    view_id: ViewId,
    status_data: StatusIdsRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[TaskViewResponse]:
    """Sync the enabled statuses of a view by ID."""
    service = get_task_view_service(db)
    view = service.get_view_or_404(view_id)
    service.update_view_statuses(view, status_data.status_ids)

    return StandardResponse(data=TaskViewResponse.model_validate(view))


@router.get(
    "/{view_id}/tasks",
    response_model=StandardListResponse[TaskResponse],
    status_code=status.HTTP_200_OK,
    summary="List visible tasks",
    description=(
        "List the owner's tasks whose current status is enabled on the view, "
        "by column and position."
    ),
)
async def list_visible_tasks(
    view_id: ViewId,
    db: Annotated[Session, Depends(get_db)],
) -> StandardListResponse[TaskResponse]:
    """List the visible tasks of a view."""
    service = get_task_view_service(db)
    tasks = service.get_visible_tasks(service.get_view_or_404(view_id))

    return StandardListResponse(
        data=[TaskResponse.model_validate(t) for t in tasks],
        meta=PaginationMeta.single_page(len(tasks)),
    )


@router.get(
    "/{view_id}/board",
    response_model=StandardResponse[list[BoardColumnResponse]],
    status_code=status.HTTP_200_OK,
    summary="Get board",
    description="Get every enabled column of the view with its tasks in order.",
)
async def get_task_view_board(
    view_id: ViewId,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[list[BoardColumnResponse]]:
    """Get the board of a view."""
    service = get_task_view_service(db)
    view = service.get_view_or_404(view_id)

    return StandardResponse(data=_board_response(service, view))


@router.post(
    "/{view_id}/moves",
    response_model=StandardResponse[list[BoardColumnResponse]],
    status_code=status.HTTP_200_OK,
    summary="Move task",
    description=(
        "Move a task to a status column and position inside the view. The task's "
        "global status follows the destination column. Returns the updated board."
    ),
)
async def move_task(
    view_id: ViewId,
    move_data: MoveTaskRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StandardResponse[list[BoardColumnResponse]]:
    """Move a task inside a view."""
    service = get_task_view_service(db)
    view = service.get_view_or_404(view_id)

    task = TaskRepository(db).get_task_by_id(move_data.task_id)
    if task is None:
        raise_not_found("Task", str(move_data.task_id))
    to_status = get_task_status_service(db).get_status_or_404(move_data.status_id)

    get_move_task_in_view_service(db).move(view, task, to_status, move_data.position)

    return StandardResponse(data=_board_response(service, view))
