"""Task view service: view lifecycle, enabled statuses and visible tasks."""

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from taskviews.core.exceptions import raise_conflict, raise_not_found
from taskviews.core.logging import log_task_view_action
from taskviews.core.tasks.status_service import TaskStatusService
from taskviews.models.task import Task
from taskviews.models.task_status import TaskStatus
from taskviews.models.task_view import TaskView, TaskViewType
from taskviews.models.taskable import TaskableRef
from taskviews.repositories.task_position_repository import TaskPositionRepository
from taskviews.repositories.task_repository import TaskRepository
from taskviews.repositories.task_status_repository import TaskStatusRepository
from taskviews.repositories.task_view_repository import TaskViewRepository


def slugify(value: str) -> str:
    """Turn free text into a lowercase, dash-separated ASCII slug."""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[-\s_]+", "-", value).strip("-")


def build_view_slug(name: str, view_type: TaskViewType, taskable_id: UUID) -> str:
    """Build the slug of a view from its name, type and owner."""
    return slugify(f"{name}-{view_type.value}-{taskable_id}")


@dataclass
class BoardColumn:
    """One enabled status of a view with its visible tasks in ledger order."""

    status: TaskStatus
    tasks: list[Task] = field(default_factory=list)


class TaskViewService:
    """Service for task views owned by a taskable entity."""

    def __init__(self, db: Session):
        """Initialize task view service.

        Args:
            db: Database session
        """
        self.db = db
        self.repository = TaskViewRepository(db)
        self.task_repository = TaskRepository(db)
        self.position_repository = TaskPositionRepository(db)
        self.status_repository = TaskStatusRepository(db)
        self.status_service = TaskStatusService(db)

    def _ensure_slug_available(self, slug: str, view_id: UUID | None = None) -> None:
        existing = self.repository.get_view_by_slug(slug)
        if existing is not None and existing.id != view_id:
            raise_conflict(
                code="TASK_VIEW_SLUG_CONFLICT",
                message=f"A task view with slug '{slug}' already exists",
                details={"slug": slug},
            )

    # View lifecycle
    def create_view(
        self,
        owner: TaskableRef,
        name: str,
        view_type: TaskViewType = TaskViewType.LIST,
        statuses: list[dict[str, Any]] | None = None,
        status_ids: list[UUID] | None = None,
        metadata: dict[str, Any] | None = None,
        is_default: bool = False,
    ) -> TaskView:
        """Create a view for ``owner`` and enable its initial statuses.

        Args:
            owner: Taskable owner of the view
            name: Human name
            view_type: list, kanban, calendar or gantt
            statuses: Ordered ``{name, color?}`` entries resolved by name (optional)
            status_ids: Ordered status IDs, used when ``statuses`` is not given (optional)
            metadata: Free-form view metadata (optional)
            is_default: Make this the owner's default view

        Returns:
            Created view
        """
        slug = build_view_slug(name, view_type, owner.id)
        self._ensure_slug_available(slug)

        try:
            view = self.repository.create_view(
                {
                    "taskable_type": owner.type.value,
                    "taskable_id": owner.id,
                    "name": name,
                    "slug": slug,
                    "type": view_type.value,
                    "view_metadata": metadata,
                    "is_default": is_default,
                }
            )
            if statuses is not None:
                self._sync_by_names(view, statuses)
            elif status_ids:
                self._sync_by_ids(view, status_ids)
            if is_default:
                self.repository.clear_default_for_owner(owner, view.id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action("created", view.id, {"name": name, "owner": str(owner)})
        return view

    def get_view(self, view_id: UUID) -> TaskView | None:
        """Get a non-deleted view by ID."""
        return self.repository.get_view_by_id(view_id)

    def get_view_or_404(self, view_id: UUID) -> TaskView:
        """Get a non-deleted view by ID or raise ``TASK_VIEW_NOT_FOUND``."""
        view = self.repository.get_view_by_id(view_id)
        if view is None:
            raise_not_found("Task view", str(view_id))
        return view

    def list_views_for_owner(self, owner: TaskableRef) -> list[TaskView]:
        """List an owner's views, default first."""
        return self.repository.get_views_for_owner(owner)

    def rename_view(self, view: TaskView, name: str) -> TaskView:
        """Rename a view and regenerate its slug."""
        old_name = view.name
        view = self.update_view(view, name=name)
        log_task_view_action("renamed", view.id, {"old_name": old_name, "new_name": name})
        return view

    def update_view(
        self,
        view: TaskView,
        name: str | None = None,
        view_type: TaskViewType | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> TaskView:
        """Update name, type and/or metadata of a view.

        The slug follows name and type, so it is rebuilt whenever either changes.
        """
        update_data: dict[str, Any] = {}
        if name is not None:
            update_data["name"] = name
        if view_type is not None:
            update_data["type"] = view_type.value
        if metadata is not None:
            update_data["view_metadata"] = metadata
        if not update_data:
            return view

        if name is not None or view_type is not None:
            slug = build_view_slug(
                name if name is not None else view.name,
                view_type if view_type is not None else view.view_type,
                view.taskable_id,
            )
            self._ensure_slug_available(slug, view.id)
            update_data["slug"] = slug

        try:
            self.repository.update_view(view, update_data)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action("updated", view.id, {"fields": sorted(update_data)})
        return view

    def set_default_view(self, view: TaskView) -> TaskView:
        """Make ``view`` the only default view of its owner."""
        try:
            self.repository.clear_default_for_owner(view.taskable, view.id)
            self.repository.update_view(view, {"is_default": True})
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action("set_default", view.id)
        return view

    def delete_view(self, view: TaskView) -> None:
        """Soft delete a view; its statuses and the tasks stay untouched.

        The owner's default view cannot be deleted: another view has to be
        made default first.
        """
        view_id = view.id
        if view.is_default:
            raise_conflict(
                code="TASK_VIEW_DEFAULT_NOT_DELETABLE",
                message="The default task view cannot be deleted",
                details={"view_id": str(view_id)},
            )

        try:
            self.repository.soft_delete_view(view)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action("deleted", view_id, {"name": view.name})

    # Enabled statuses
    def _sync_by_names(self, view: TaskView, entries: list[dict[str, Any]]) -> list[TaskStatus]:
        resolved: list[TaskStatus] = []
        seen: set[UUID] = set()
        for entry in entries:
            status = self.status_service.resolve_by_name(entry["name"], entry.get("color"))
            if status.id in seen:
                continue
            seen.add(status.id)
            resolved.append(status)
        self.repository.replace_statuses(view, [status.id for status in resolved])
        return resolved

    def _sync_by_ids(self, view: TaskView, status_ids: list[UUID]) -> list[TaskStatus]:
        ordered_ids = list(dict.fromkeys(status_ids))
        found = {status.id: status for status in self.status_repository.get_by_ids(ordered_ids)}
        missing = [status_id for status_id in ordered_ids if status_id not in found]
        if missing:
            raise_not_found("Task status", ", ".join(str(status_id) for status_id in missing))
        self.repository.replace_statuses(view, ordered_ids)
        return [found[status_id] for status_id in ordered_ids]

    def sync_statuses_by_names(
        self, view: TaskView, entries: list[dict[str, Any]]
    ) -> list[TaskStatus]:
        """Set the view's enabled statuses to exactly the given names.

        Each entry is ``{"name": ..., "color": ...}`` (color optional). Names are
        resolved case-insensitively and created when missing; a color is only
        used on creation. Statuses left out are detached from the view, never
        deleted, and ledger rows are not touched.

        Args:
            view: View to configure
            entries: Ordered status entries; the order becomes the column order

        Returns:
            The enabled statuses, in column order
        """
        try:
            statuses = self._sync_by_names(view, entries)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action(
            "statuses_updated",
            view.id,
            {"status_count": len(statuses), "names": [status.name for status in statuses]},
        )
        return statuses

    def update_view_statuses(self, view: TaskView, status_ids: list[UUID]) -> list[TaskStatus]:
        """Set the view's enabled statuses to exactly ``status_ids``, in order."""
        try:
            statuses = self._sync_by_ids(view, status_ids)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        log_task_view_action("statuses_updated", view.id, {"status_count": len(statuses)})
        return statuses

    def get_enabled_statuses(self, view: TaskView) -> list[TaskStatus]:
        """Get the statuses enabled on a view, in column order."""
        status_ids = self.repository.get_enabled_status_ids(view.id)
        found = {status.id: status for status in self.status_repository.get_by_ids(status_ids)}
        return [found[status_id] for status_id in status_ids if status_id in found]

    # Visible tasks
    def get_visible_tasks(self, view: TaskView) -> list[Task]:
        """Get the owner's tasks whose current status is enabled on the view.

        Ordered by column, then by ledger position; tasks without a row in the
        column come after the positioned ones, by ID. A stale ledger row never
        makes a task visible: only its global status counts.
        """
        status_ids = self.repository.get_enabled_status_ids(view.id)
        tasks = self.task_repository.get_tasks_by_owner(view.taskable, status_ids)
        column_index = {status_id: index for index, status_id in enumerate(status_ids)}
        positions = self.position_repository.get_positions_for_view(view.id)

        def sort_key(task: Task) -> tuple:
            row = positions.get(task.id)
            if row is not None and row.task_status_id == task.status_id:
                return (column_index[task.status_id], 0, row.position, task.id)
            # Rows left in another column rank after untouched tasks
            group = 1 if row is None else 2
            return (column_index[task.status_id], group, 0, task.id)

        return sorted(tasks, key=sort_key)

    def get_column_task_ids(self, view: TaskView, status_id: UUID) -> list[UUID]:
        """Get the ordered task IDs of one column, as the move engine sees it."""
        return self.position_repository.get_ordered_task_ids(view, status_id)

    def get_board(self, view: TaskView) -> list[BoardColumn]:
        """Get every enabled column of a view with its visible tasks in order.

        A task whose ledger row sits in another column than its current status
        is listed here, after the untouched tasks, but is absent from
        ``get_column_task_ids`` for that column. A drop index read off the board
        past such a task lands one slot earlier once moved.
        """
        columns = {status.id: BoardColumn(status=status) for status in self.get_enabled_statuses(view)}
        for task in self.get_visible_tasks(view):
            column = columns.get(task.status_id)
            if column is not None:
                column.tasks.append(task)
        return list(columns.values())


def get_task_view_service(db: Session) -> TaskViewService:
    """Get task view service instance."""
    return TaskViewService(db)
