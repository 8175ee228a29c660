"""Task Status Service for the global status registry."""

from uuid import UUID

from sqlalchemy.orm import Session

from taskviews.core.config import get_settings
from taskviews.core.exceptions import raise_conflict, raise_not_found
from taskviews.core.logging import get_logger
from taskviews.core.tasks.exceptions import TaskStatusNameRequiredException
from taskviews.models.task_status import TaskStatus
from taskviews.repositories.task_status_repository import TaskStatusRepository

logger = get_logger(__name__)

DEFAULT_STATUSES = [
    {"name": "Todo", "color": "#3498db"},
    {"name": "In Progress", "color": "#f1c40f"},
    {"name": "Done", "color": "#2ecc71"},
]


class TaskStatusService:
    """Service for the status registry shared by every view and owner."""

    def __init__(self, db: Session):
        """Initialize status service.

        Args:
            db: Database session
        """
        self.db = db
        self.repository = TaskStatusRepository(db)

    def get_statuses(self) -> list[TaskStatus]:
        """Get every registered status ordered by name."""
        return self.repository.get_all()

    def get_status_or_404(self, status_id: UUID) -> TaskStatus:
        """Get status by ID or raise ``TASK_STATUS_NOT_FOUND``."""
        status = self.repository.get_by_id(status_id)
        if status is None:
            raise_not_found("Task status", str(status_id))
        return status

    def resolve_by_name(self, name: str, color: str | None = None) -> TaskStatus:
        """Find a status by case-insensitive name, creating it when missing.

        Runs inside the caller's transaction and does not commit. ``color`` is
        only used when the status has to be created.

        Args:
            name: Status name, matched ignoring case
            color: Hex color for a newly created status (optional)

        Returns:
            Existing or newly created status
        """
        if not name or not name.strip():
            raise TaskStatusNameRequiredException()

        existing = self.repository.get_by_name(name)
        if existing is not None:
            return existing

        self.repository.insert_if_absent(
            name=name,
            color=color or get_settings().TASK_STATUS_DEFAULT_COLOR,
        )
        status = self.repository.get_by_name(name)
        logger.info(f"Task status resolved by name: {status.id} ({status.name})")
        return status

    def find_or_create_by_name(self, name: str, color: str | None = None) -> TaskStatus:
        """Find a status by case-insensitive name or create it, then commit.

        Args:
            name: Status name
            color: Hex color applied only on creation (optional)

        Returns:
            Existing or newly created status
        """
        try:
            status = self.resolve_by_name(name, color)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return status

    def update_status(self, status_id: UUID, update_data: dict) -> TaskStatus:
        """Update a status name and/or color.

        Args:
            status_id: Status ID
            update_data: Fields to update ('name', 'color')

        Returns:
            Updated status

        Raises:
            TaskStatusNameRequiredException: ``name`` is blank
        """
        status = self.get_status_or_404(status_id)

        new_name = update_data.get("name")
        if new_name is not None:
            if not new_name.strip():
                raise TaskStatusNameRequiredException()
            new_name = new_name.strip()
            clash = self.repository.get_by_name(new_name)
            if clash is not None and clash.id != status.id:
                raise_conflict(
                    code="TASK_STATUS_NAME_CONFLICT",
                    message=f"Status '{new_name}' already exists",
                    details={"name": new_name, "existing_id": str(clash.id)},
                )
            update_data = {**update_data, "name": new_name}

        fields = {key: value for key, value in update_data.items() if value is not None}
        try:
            self.repository.update_status(status, fields)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(status)

        logger.info(f"Task status updated: {status_id}")

        return status

    def initialize_default_statuses(self) -> list[TaskStatus]:
        """Ensure the default Todo / In Progress / Done statuses exist.

        Returns:
            The default statuses, in board order
        """
        try:
            statuses = [
                self.resolve_by_name(data["name"], data["color"]) for data in DEFAULT_STATUSES
            ]
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Default task statuses ensured: {len(statuses)}")

        return statuses


def get_task_status_service(db: Session) -> TaskStatusService:
    """Get status service instance.

    Args:
        db: Database session

    Returns:
        TaskStatusService instance
    """
    return TaskStatusService(db)
