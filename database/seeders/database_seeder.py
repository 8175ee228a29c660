"""Database seeder - Main seeder that calls other seeders."""

from sqlalchemy.orm import Session

from taskviews.core.config import get_settings
from taskviews.core.seeders.base import Seeder


class DatabaseSeeder(Seeder):
    """Main database seeder.

    This seeder calls other seeders based on the environment:
    - Production: Only TaskStatusesSeeder (default statuses)
    - Development: TaskStatusesSeeder and DemoTaskBoardsSeeder

    This seeder is idempotent - it will not create duplicate data.
    """

    def run(self, db: Session) -> None:
        """Run the seeder.

        Args:
            db: Database session
        """
        settings = get_settings()
        is_production = settings.ENV.lower() in ("prod", "production")

        from database.seeders.task_statuses_seeder import TaskStatusesSeeder

        TaskStatusesSeeder().run(db)

        if not is_production:
            from database.seeders.demo_task_boards_seeder import DemoTaskBoardsSeeder

            DemoTaskBoardsSeeder().run(db)
