"""Task status repository for data access operations."""

from uuid import UUID, uuid4

from sqlalchemy import insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from taskviews.models.task_status import TaskStatus, normalize_status_name

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class TaskStatusRepository:
    """Repository for the global task status registry.

    Methods flush but never commit: callers own the transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def get_all(self) -> list[TaskStatus]:
        """Get every status ordered by name."""
        return self.db.query(TaskStatus).order_by(TaskStatus.name, TaskStatus.id).all()

    def get_by_id(self, status_id: UUID) -> TaskStatus | None:
        """Get status by ID."""
        return self.db.query(TaskStatus).filter(TaskStatus.id == status_id).first()

    def get_by_ids(self, status_ids: list[UUID]) -> list[TaskStatus]:
        """Get statuses by ID, in no particular order."""
        if not status_ids:
            return []
        return self.db.query(TaskStatus).filter(TaskStatus.id.in_(status_ids)).all()

    def get_by_name(self, name: str) -> TaskStatus | None:
        """Get status whose name matches ``name`` ignoring case."""
        return (
            self.db.query(TaskStatus)
            .filter(TaskStatus.name_key == normalize_status_name(name))
            .first()
        )

    def insert_if_absent(self, name: str, color: str) -> None:
        """Insert a status unless one with the same lookup key already exists.

        Uses ``ON CONFLICT DO NOTHING`` on dialects that support it so two
        concurrent callers never produce a unique-key error; other dialects
        fall back to a plain insert.
        """
        values = {
            "id": uuid4(),
            "name": name.strip(),
            "name_key": normalize_status_name(name),
            "color": color,
        }
        dialect = self.db.get_bind().dialect.name
        upsert = _UPSERT_DIALECTS.get(dialect)
        if upsert is not None:
            stmt = upsert(TaskStatus).values(**values).on_conflict_do_nothing(
                index_elements=["name_key"]
            )
        else:
            stmt = insert(TaskStatus).values(**values)
        self.db.execute(stmt)

    def update_status(self, status: TaskStatus, status_data: dict) -> TaskStatus:
        """Update status fields, keeping the lookup key in sync with the name."""
        for key, value in status_data.items():
            setattr(status, key, value)
        if "name" in status_data:
            status.name_key = normalize_status_name(status.name)
        self.db.flush()
        return status
