from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from taskviews.core.config import get_settings

settings = get_settings()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine, applying pool and connection options PostgreSQL understands."""
    url = make_url(database_url)
    if url.get_backend_name() != "postgresql":
        return create_engine(database_url, echo=echo, future=True)

    return create_engine(
        database_url,
        echo=echo,
        future=True,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        connect_args={
            "connect_timeout": 10,
            "options": "-c timezone=utc",
        },
    )


# Use database_url property which handles both DATABASE_URL env var and component construction
engine = build_engine(settings.database_url, echo=settings.DEBUG)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()
