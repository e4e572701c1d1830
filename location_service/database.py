"""Database configuration and session management."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from location_service.config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """Engine and session factory, created once per application."""

    def __init__(self, settings: Settings) -> None:
        if settings.DATABASE_URL.startswith("sqlite"):
            self.engine = create_engine(
                settings.DATABASE_URL,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_engine(
                settings.DATABASE_URL,
                pool_size=settings.SQL_POOL_SIZE,
                max_overflow=settings.SQL_MAX_OVERFLOW,
                pool_pre_ping=True,  # Verify connections before use
                pool_recycle=settings.SQL_POOL_RECYCLE,
            )

        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def dispose(self) -> None:
        """Dispose database engine on shutdown."""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Get database session."""
    database: Database = request.app.state.database
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
