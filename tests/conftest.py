"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite file so the writer (which builds its own
engine) and the Flask app see the same data.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from sqlalchemy import select

from loterias import create_app
from loterias.config import DatabaseConfig, DevelopmentConfig, ScraperConfig
from loterias.db import create_app_engine, create_tables, session_scope
from loterias.models.lottery_result import LotteryResult


@pytest.fixture
def db_config(tmp_path):
    """Connection settings for a throwaway SQLite database."""
    return DatabaseConfig(url=f"sqlite:///{tmp_path / 'loterias-test.db'}")


@pytest.fixture
def app_config(db_config):
    return DevelopmentConfig(
        LOG_LEVEL="INFO",
        DATABASE=db_config,
        SCRAPER=ScraperConfig(url="https://example.test/", selector_timeout_ms=500),
    )


@pytest.fixture
def app(app_config):
    app = create_app(app_config)
    app.config["TESTING"] = True
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed_rows(db_config):
    """Insert rows directly, with explicit insertion timestamps."""

    def _seed(*rows: tuple[str, str, str, str, str, datetime]) -> None:
        engine = create_app_engine(db_config)
        try:
            create_tables(engine)
            with session_scope(engine) as session:
                for title, time, prize, result, group, inserted_at in rows:
                    session.add(
                        LotteryResult(
                            title=title,
                            time=time,
                            prize=prize,
                            result=result,
                            group=group,
                            inserted_at=inserted_at,
                        )
                    )
        finally:
            engine.dispose()

    return _seed


@pytest.fixture
def stored_rows(db_config):
    """Read back every stored row as (title, time, prize, result, group)."""

    def _read() -> list[tuple[str, str, str, str | None, str | None]]:
        engine = create_app_engine(db_config)
        try:
            create_tables(engine)
            with session_scope(engine) as session:
                rows = session.scalars(select(LotteryResult).order_by(LotteryResult.id)).all()
                return [(r.title, r.time, r.prize, r.result, r.group) for r in rows]
        finally:
            engine.dispose()

    return _read
