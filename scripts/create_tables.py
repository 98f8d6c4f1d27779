"""Create the results table in the configured database.

Reads DB_* / DATABASE_URL from .env / environment and creates all registered
ORM tables.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from loterias.config import DatabaseConfig
from loterias.db import create_app_engine, create_tables

# Import models so they register with Base.metadata
from loterias import models  # noqa: F401


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(DatabaseConfig.from_env())
    try:
        create_tables(engine)
    finally:
        engine.dispose()

    print("Tables created (or already exist).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
