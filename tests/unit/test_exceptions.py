"""Unit tests for API and task view exceptions."""

from uuid import uuid4

import pytest
from fastapi import status

from taskviews.core.exceptions import (
    APIException,
    raise_conflict,
    raise_not_found,
)
from taskviews.core.tasks.exceptions import (
    StatusNotEnabledOnViewException,
    TaskStatusNameRequiredException,
    TaskViewOwnershipException,
    TaskViewValidationException,
)


class TestAPIException:
    """Tests for APIException class."""

    def test_api_exception_default_status(self) -> None:
        """Test APIException with default status code."""
        exc = APIException(code="TEST_ERROR", message="Test error")
        assert exc.code == "TEST_ERROR"
        assert exc.message == "Test error"
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.details is None
        assert exc.detail == {
            "error": {"code": "TEST_ERROR", "message": "Test error", "details": None}
        }

    def test_api_exception_with_details(self) -> None:
        """Test APIException with additional details."""
        details = {"slug": "board-kanban-1"}
        exc = APIException(code="CONFLICT", message="Conflict", details=details)
        assert exc.details == details
        assert exc.detail["error"]["details"] == details

    def test_api_exception_str(self) -> None:
        """Test APIException string form carries code and message."""
        exc = APIException(code="TEST_ERROR", message="Test error")
        assert str(exc) == "TEST_ERROR: Test error"


class TestHelperFunctions:
    """Tests for exception helper functions."""

    def test_raise_not_found(self) -> None:
        """Test raise_not_found builds the code from the resource name."""
        with pytest.raises(APIException) as exc_info:
            raise_not_found("Task view", "123")
        assert exc_info.value.code == "TASK_VIEW_NOT_FOUND"
        assert exc_info.value.status_code == status.HTTP_404_NOT_FOUND
        assert "Task view not found" in exc_info.value.message
        assert "123" in exc_info.value.message

    def test_raise_not_found_without_id(self) -> None:
        """Test raise_not_found without resource ID."""
        with pytest.raises(APIException) as exc_info:
            raise_not_found("Task status")
        assert exc_info.value.code == "TASK_STATUS_NOT_FOUND"
        assert exc_info.value.message == "Task status not found"

    def test_raise_conflict(self) -> None:
        """Test raise_conflict helper."""
        with pytest.raises(APIException) as exc_info:
            raise_conflict("TASK_VIEW_SLUG_CONFLICT", "Slug taken", details={"slug": "x"})
        assert exc_info.value.status_code == status.HTTP_409_CONFLICT
        assert exc_info.value.details == {"slug": "x"}


class TestTaskViewExceptions:
    """Tests for move precondition exceptions."""

    def test_ownership_exception(self) -> None:
        view_id, task_id = uuid4(), uuid4()
        exc = TaskViewOwnershipException(view_id=view_id, task_id=task_id)
        assert isinstance(exc, TaskViewValidationException)
        assert exc.code == "TASK_NOT_IN_VIEW_OWNER"
        assert exc.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert exc.details == {"view_id": str(view_id), "task_id": str(task_id)}

    def test_status_not_enabled_exception(self) -> None:
        view_id, status_id = uuid4(), uuid4()
        exc = StatusNotEnabledOnViewException(view_id=view_id, status_id=status_id)
        assert exc.code == "TASK_STATUS_NOT_ENABLED_ON_VIEW"
        assert exc.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert exc.details["status_id"] == str(status_id)

    def test_name_required_exception(self) -> None:
        exc = TaskStatusNameRequiredException()
        assert exc.code == "TASK_STATUS_NAME_REQUIRED"
        assert exc.details is None
