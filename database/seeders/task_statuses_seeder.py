"""Task statuses seeder.

Ensures the default Todo / In Progress / Done statuses exist in the global
registry. Idempotent: statuses are resolved by name, never duplicated, and
existing colors are left alone.
"""

from sqlalchemy.orm import Session

from taskviews.core.config import get_settings
from taskviews.core.seeders.base import Seeder
from taskviews.core.tasks.status_service import TaskStatusService


class TaskStatusesSeeder(Seeder):
    """Seeder for the default task statuses."""

    def is_enabled(self) -> bool:
        return get_settings().TASKS_MODULE_ENABLED

    def run(self, db: Session) -> None:
        """Run the seeder.

        Args:
            db: Database session
        """
        if not self.is_enabled():
            return

        TaskStatusService(db).initialize_default_statuses()
