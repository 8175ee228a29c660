"""Demo task boards seeder for development environment.

Creates a demo user owner with one view per view type, all showing the
default statuses, and a handful of tasks spread over the columns.

This seeder is idempotent - views are matched by owner and name, tasks by
owner and title.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from sqlalchemy.orm import Session

from taskviews.core.config import get_settings
from taskviews.core.logging import get_logger
from taskviews.core.seeders.base import Seeder
from taskviews.core.tasks.status_service import DEFAULT_STATUSES, TaskStatusService
from taskviews.core.tasks.view_service import TaskViewService
from taskviews.models.task import TaskPriority, TaskType
from taskviews.models.task_view import TaskViewType
from taskviews.models.taskable import TaskableRef, TaskableType
from taskviews.repositories.task_repository import TaskRepository

logger = get_logger(__name__)

DEMO_USER_ID = UUID("019b4a87-0ec0-71c9-ba7b-4de2fbbbef8b")

DEMO_VIEWS = [
    {"name": "My Tasks", "type": TaskViewType.LIST, "is_default": True},
    {"name": "Sprint Board", "type": TaskViewType.KANBAN, "is_default": False},
    {"name": "Release Calendar", "type": TaskViewType.CALENDAR, "is_default": False},
    {"name": "Roadmap", "type": TaskViewType.GANTT, "is_default": False},
]


class DemoTaskBoardsSeeder(Seeder):
    """Seeder for demo views and tasks owned by a demo user."""

    def is_enabled(self) -> bool:
        return get_settings().TASKS_MODULE_ENABLED

    def run(self, db: Session) -> None:
        """Run the seeder.

        Args:
            db: Database session
        """
        if not self.is_enabled():
            return

        owner = TaskableRef(TaskableType.USER, DEMO_USER_ID)
        todo, in_progress, done = TaskStatusService(db).initialize_default_statuses()
        status_entries = [{"name": s["name"], "color": s["color"]} for s in DEFAULT_STATUSES]

        view_service = TaskViewService(db)
        existing_views = {view.name: view for view in view_service.list_views_for_owner(owner)}
        for view_data in DEMO_VIEWS:
            view = existing_views.get(view_data["name"])
            if view is None:
                view_service.create_view(
                    owner=owner,
                    name=view_data["name"],
                    view_type=view_data["type"],
                    statuses=status_entries,
                    is_default=view_data["is_default"],
                )
            else:
                view_service.sync_statuses_by_names(view, status_entries)

        now = datetime.now(UTC)
        seed_tasks = [
            # Todo
            {
                "title": "Write onboarding checklist",
                "status_id": todo.id,
                "priority": TaskPriority.NORMAL,
                "type": TaskType.DOCUMENTATION,
                "due_date": now + timedelta(days=3),
            },
            {
                "title": "Triage incoming bug reports",
                "status_id": todo.id,
                "priority": TaskPriority.HIGH,
                "type": TaskType.TASK,
                "due_date": now + timedelta(days=1),
            },
            {
                "title": "Polish the create view dialog",
                "status_id": todo.id,
                "priority": TaskPriority.NORMAL,
                "type": TaskType.FEATURE,
                "due_date": now + timedelta(days=5),
            },
            # In Progress
            {
                "title": "Implement drag-and-drop ordering",
                "status_id": in_progress.id,
                "priority": TaskPriority.HIGH,
                "type": TaskType.FEATURE,
                "due_date": now + timedelta(days=2),
            },
            {
                "title": "Fix task status color mismatch",
                "status_id": in_progress.id,
                "priority": TaskPriority.URGENT,
                "type": TaskType.BUG,
                "due_date": now + timedelta(days=1),
            },
            # Done
            {
                "title": "Set up default task statuses",
                "status_id": done.id,
                "priority": TaskPriority.LOW,
                "type": TaskType.TASK,
                "due_date": now - timedelta(days=2),
                "completed_at": now - timedelta(days=1),
            },
            {
                "title": "Add tasks index page",
                "status_id": done.id,
                "priority": TaskPriority.NORMAL,
                "type": TaskType.TASK,
                "due_date": now - timedelta(days=6),
                "completed_at": now - timedelta(days=4),
            },
        ]
        # A few extra tasks for variety
        rotation = [todo.id, in_progress.id, done.id]
        for i in range(1, 7):
            seed_tasks.append(
                {
                    "title": f"Demo task {i}",
                    "status_id": rotation[i % 3],
                    "priority": TaskPriority.NORMAL,
                    "type": TaskType.TASK,
                    "due_date": now + timedelta(days=i),
                }
            )

        task_repository = TaskRepository(db)
        created = 0
        try:
            for data in seed_tasks:
                if task_repository.get_task_by_owner_and_title(owner, data["title"]):
                    continue
                task_repository.create_task(
                    {
                        "taskable_type": owner.type.value,
                        "taskable_id": owner.id,
                        "title": data["title"],
                        "type": data["type"].value,
                        "priority": data["priority"].value,
                        "status_id": data["status_id"],
                        "created_by_id": owner.id,
                        "assigned_to_id": owner.id,
                        "due_date": data["due_date"],
                        "completed_at": data.get("completed_at"),
                    }
                )
                created += 1
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Demo task boards seeded: {len(DEMO_VIEWS)} views, {created} new tasks")
