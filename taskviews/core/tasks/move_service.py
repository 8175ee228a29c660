"""Move engine: relocate a task to a status column and position inside a view."""

from uuid import UUID

from sqlalchemy.orm import Session

from taskviews.core.logging import get_logger, log_task_moved
from taskviews.core.tasks.exceptions import (
    StatusNotEnabledOnViewException,
    TaskViewOwnershipException,
    TaskViewValidationException,
)
from taskviews.models.task import Task
from taskviews.models.task_status import TaskStatus
from taskviews.models.task_view import TaskView
from taskviews.repositories.task_position_repository import TaskPositionRepository
from taskviews.repositories.task_view_repository import TaskViewRepository

logger = get_logger(__name__)


class MoveTaskInViewService:
    """Moves tasks between and within the status columns of a view.

    A move rewrites the ledger of the destination column and, when the task
    changes column, of the column it left, then updates the task's global
    status. Everything happens in one transaction: validation failures leave
    no trace and storage errors roll back every write.
    """

    def __init__(self, db: Session):
        """Initialize move service.

        Args:
            db: Database session
        """
        self.db = db
        self.view_repository = TaskViewRepository(db)
        self.position_repository = TaskPositionRepository(db)

    def move(
        self,
        view: TaskView,
        task: Task,
        to_status: TaskStatus,
        to_position: int,
    ) -> None:
        """Move ``task`` to ``to_status`` at ``to_position`` inside ``view``.

        Args:
            view: View whose ledger is rewritten
            task: Task to move; must belong to the view's taskable owner
            to_status: Destination column; must be enabled on the view
            to_position: Zero-based target index; negatives become 0 and
                indexes past the end append

        Raises:
            TaskViewOwnershipException: Task and view have different owners
            StatusNotEnabledOnViewException: ``to_status`` is not a view column
        """
        clamped_position = max(0, to_position)
        view_id = view.id
        task_id = task.id
        to_status_id = to_status.id

        try:
            # Serialize concurrent moves on the same view
            self.view_repository.lock_view(view_id)

            self._assert_task_belongs_to_view_taskable(view, task)
            self._assert_status_enabled_on_view(view, to_status)

            from_status_id = task.status_id
            previous_row = self.position_repository.get_position(view_id, task_id)
            vacated_status_ids = [from_status_id]
            if previous_row is not None and previous_row.task_status_id not in vacated_status_ids:
                vacated_status_ids.append(previous_row.task_status_id)

            target_task_ids = self._remove_task_id(
                self.position_repository.get_ordered_task_ids(view, to_status_id), task_id
            )
            insert_index = min(clamped_position, len(target_task_ids))
            target_task_ids.insert(insert_index, task_id)

            self.position_repository.persist_column(view_id, to_status_id, target_task_ids)

            # Close the gap left in the column(s) the task came from
            for status_id in vacated_status_ids:
                if status_id == to_status_id:
                    continue
                source_task_ids = self._remove_task_id(
                    self.position_repository.get_ordered_task_ids(view, status_id), task_id
                )
                self.position_repository.persist_column(view_id, status_id, source_task_ids)

            task.status_id = to_status_id
            self.db.flush()
            self.db.commit()
        except TaskViewValidationException:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to move task {task_id} in view {view_id}: {e}")
            raise

        log_task_moved(view_id, task_id, from_status_id, to_status_id, insert_index)

    def _assert_task_belongs_to_view_taskable(self, view: TaskView, task: Task) -> None:
        if not task.belongs_to(view.taskable):
            raise TaskViewOwnershipException(view_id=view.id, task_id=task.id)

    def _assert_status_enabled_on_view(self, view: TaskView, status: TaskStatus) -> None:
        if not self.view_repository.is_status_enabled(view.id, status.id):
            raise StatusNotEnabledOnViewException(view_id=view.id, status_id=status.id)

    @staticmethod
    def _remove_task_id(task_ids: list[UUID], task_id: UUID) -> list[UUID]:
        return [existing_id for existing_id in task_ids if existing_id != task_id]


def get_move_task_in_view_service(db: Session) -> MoveTaskInViewService:
    """Get move service instance."""
    return MoveTaskInViewService(db)
