"""Database configuration and session management for VoteHub.

Exports:
- Base: declarative base for models
- engine: SQLAlchemy engine
- SessionLocal: session factory
- get_db: FastAPI dependency that yields a DB session
- init_db(): helper to create tables (calls Base.metadata.create_all)
- make_engine(url): build an engine configured the same way as `engine`

Behavior:
- Reads DATABASE_URL from env, falls back to a local SQLite file `votehub.db` in the project root.
- SQLite connections run with transactional DDL: pysqlite's implicit transaction
  handling is turned off and an explicit BEGIN is emitted when SQLAlchemy begins,
  so CREATE TABLE statements roll back together with inserts.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# Project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _default_sqlite_url() -> str:
    db_path = PROJECT_ROOT / "votehub.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path.as_posix()}"


DATABASE_URL: str = os.getenv("DATABASE_URL", _default_sqlite_url())


def _enable_sqlite_transactional_ddl(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Stop pysqlite from issuing its own BEGIN (and from committing around DDL)
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def make_engine(url: str) -> Engine:
    """Create an engine for `url`.

    SQLite requires `check_same_thread=False` when used from uvicorn's threadpool.
    """
    engine_kwargs = {"future": True}
    if url.startswith("sqlite"):
        new_engine = create_engine(url, connect_args={"check_same_thread": False}, **engine_kwargs)
        _enable_sqlite_transactional_ddl(new_engine)
    else:
        new_engine = create_engine(url, **engine_kwargs)
    return new_engine


engine = make_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, class_=Session)

# Declarative base for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy DB session for FastAPI dependencies.

    Usage:
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db: Optional[Session] = None
    try:
        db = SessionLocal()
        yield db
    finally:
        if db is not None:
            db.close()


def init_db() -> None:
    """Create all tables for the registered models.

    This will import `votehub.models` to ensure model classes are registered
    with `Base` before calling `Base.metadata.create_all()`.
    """
    try:
        # Import here to avoid circular imports at module import time
        import votehub.models  # noqa: F401

        logger.info("Creating database tables (if not exists)")
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized")
    except Exception as exc:
        logger.exception("Failed to initialize database: %s", exc)
        raise


__all__ = ["Base", "engine", "SessionLocal", "get_db", "init_db", "make_engine"]
