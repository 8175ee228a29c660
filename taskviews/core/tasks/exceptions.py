"""Custom exceptions for task views and positioning."""

from uuid import UUID

from fastapi import status

from taskviews.core.exceptions import APIException


class TaskViewValidationException(APIException):
    """Base class for move preconditions that reject the request before any write."""

    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(
            code=code,
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
        )


class TaskViewOwnershipException(TaskViewValidationException):
    """Raised when a task is positioned in a view of a different taskable owner.

    Args:
        view_id: Target view.
        task_id: Task that does not belong to the view's owner.
    """

    def __init__(self, view_id: UUID, task_id: UUID) -> None:
        super().__init__(
            code="TASK_NOT_IN_VIEW_OWNER",
            message="Task does not belong to the view taskable.",
            details={"view_id": str(view_id), "task_id": str(task_id)},
        )


class StatusNotEnabledOnViewException(TaskViewValidationException):
    """Raised when the target status is not one of the view's enabled columns.

    Args:
        view_id: Target view.
        status_id: Status that is not enabled on the view.
    """

    def __init__(self, view_id: UUID, status_id: UUID) -> None:
        super().__init__(
            code="TASK_STATUS_NOT_ENABLED_ON_VIEW",
            message="Status is not enabled on this view.",
            details={"view_id": str(view_id), "status_id": str(status_id)},
        )


class TaskStatusNameRequiredException(TaskViewValidationException):
    """Raised when a status lookup is attempted with a blank name."""

    def __init__(self) -> None:
        super().__init__(
            code="TASK_STATUS_NAME_REQUIRED",
            message="Status name must not be empty.",
        )
