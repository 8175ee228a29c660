import os
from pathlib import Path
from uuid import uuid4

import pytest
from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Load environment variables from .env files
# Priority: system env vars > .env (current dir) > ../.env (parent dir)
backend_dir = Path(__file__).parent.parent
for env_file in (backend_dir / ".env", backend_dir.parent / ".env"):
    if env_file.exists():
        load_dotenv(env_file, override=False)

# Tests run on an in-memory SQLite database unless TEST_DATABASE_URL says otherwise
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")

# The application engine is built at import time: point it at the test database
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from taskviews.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from taskviews.core.db.deps import get_db  # noqa: E402
from taskviews.core.db.session import Base  # noqa: E402
from taskviews.core.tasks.status_service import TaskStatusService  # noqa: E402
from taskviews.core.tasks.view_service import TaskViewService  # noqa: E402
from taskviews.main import app  # noqa: E402
from taskviews.models.task_view import TaskViewType  # noqa: E402
from taskviews.models.taskable import TaskableRef, TaskableType  # noqa: E402
from taskviews.repositories.task_position_repository import TaskPositionRepository  # noqa: E402
from taskviews.repositories.task_repository import TaskRepository  # noqa: E402


def create_test_engine(database_url: str = TEST_DATABASE_URL):
    """Create test database engine."""
    if database_url.startswith("sqlite"):
        test_engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(test_engine, "connect")
        def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return test_engine

    return create_engine(database_url, pool_pre_ping=True)


engine = create_test_engine()
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh schema and session for each test.

    Services commit, so isolation comes from rebuilding the schema rather than
    rolling back an outer transaction.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def owner():
    """A client-owned taskable reference."""
    return TaskableRef(TaskableType.CLIENT, uuid4())


@pytest.fixture
def other_owner():
    """A second owner, used to cross ownership boundaries."""
    return TaskableRef(TaskableType.CLIENT, uuid4())


@pytest.fixture
def make_status(db_session):
    """Factory: find or create a status by name."""

    def _make_status(name: str, color: str | None = None):
        return TaskStatusService(db_session).find_or_create_by_name(name, color)

    return _make_status


@pytest.fixture
def make_view(db_session, owner):
    """Factory: create a view enabling the given status names, in order."""

    def _make_view(
        status_names: list[str],
        name: str | None = None,
        view_owner: TaskableRef | None = None,
        view_type: TaskViewType = TaskViewType.KANBAN,
        is_default: bool = False,
    ):
        return TaskViewService(db_session).create_view(
            owner=view_owner or owner,
            name=name or f"Board {uuid4().hex[:8]}",
            view_type=view_type,
            statuses=[{"name": status_name} for status_name in status_names],
            is_default=is_default,
        )

    return _make_view


@pytest.fixture
def make_task(db_session, owner):
    """Factory: create a task in a status for an owner."""

    def _make_task(status, title: str | None = None, task_owner: TaskableRef | None = None):
        task_owner = task_owner or owner
        task = TaskRepository(db_session).create_task(
            {
                "taskable_type": task_owner.type.value,
                "taskable_id": task_owner.id,
                "title": title or f"Task {uuid4().hex[:8]}",
                "status_id": status.id,
            }
        )
        db_session.commit()
        return task

    return _make_task


@pytest.fixture
def place(db_session):
    """Write an explicit column order into a view's position ledger."""

    def _place(view, status, tasks):
        TaskPositionRepository(db_session).persist_column(
            view.id, status.id, [task.id for task in tasks]
        )
        db_session.commit()

    return _place


@pytest.fixture
def column_ids(db_session):
    """Read the task IDs explicitly stored in a view column, by position."""

    def _column_ids(view, status):
        return TaskPositionRepository(db_session).get_positioned_task_ids(view.id, status.id)

    return _column_ids
