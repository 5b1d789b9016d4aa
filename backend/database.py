"""Database configuration and session management."""

import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.config import get_settings

logger = logging.getLogger("teamtasks.database")

settings = get_settings()

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {},
    echo=settings.debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Largest value SQLite (and BIGINT columns elsewhere) can bind
MAX_INTEGER = 2**63 - 1


def enable_sqlite_foreign_keys(target_engine) -> None:
    """Turn on FK enforcement for SQLite connections (off by default in SQLite)."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    import backend.models  # noqa: F401  - register mappers before create_all

    logger.info("Initializing database tables...")
    logger.info("Database URL: %s", settings.database_url)
    Base.metadata.create_all(bind=engine)
    tables = inspect(engine).get_table_names()
    logger.info("Available tables after init: %s", tables)
