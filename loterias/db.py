"""SQLAlchemy engine + session management.

The HTTP app uses a session-per-request pattern; the scrape run opens one
transactional scope of its own with `session_scope`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from flask import Flask, g
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from loterias.config import DatabaseConfig
from loterias.models.base import Base


def create_app_engine(db_config: DatabaseConfig) -> Engine:
    """Build an engine for the given connection settings."""

    url = make_url(db_config.to_url())

    if url.get_backend_name() == "sqlite":
        # The Flask dev server answers requests from worker threads.
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            future=True,
        )

    return create_engine(url, pool_pre_ping=True, future=True)


def create_tables(engine: Engine) -> None:
    """Create missing tables (production would use migrations)."""

    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """One transaction: commit on success, roll back on any error, always close."""

    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(app: Flask) -> None:
    """Initialize database engine and per-request sessions."""

    db_config: DatabaseConfig = app.config["DATABASE"]
    engine = create_app_engine(db_config)
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    create_tables(engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = getattr(g, "db", None)
        if session is None:
            return

        # Reads only: nothing to commit, just release the connection.
        try:
            session.rollback()
        finally:
            session.close()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session
