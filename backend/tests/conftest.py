"""
Pytest configuration for backend tests.

Provides an isolated SQLite database per test run using a temporary file
(rather than in-memory) to support multiple connections and sessions.

DATABASE_URL is set at import time, before any test module can import
northnode.db.session (directly or through northnode.main), so the engine is
always bound to the temporary database.

Fixtures:
- db_engine (session scope): Creates the engine, builds tables, and tears down.
- db_session (function scope): Provides a clean Session per test.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Ensure the 'backend' directory is on sys.path so we can import northnode when running tests from repo root
CURRENT_DIR = Path(__file__).parent
BACKEND_ROOT = (CURRENT_DIR / "..").resolve()
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

_DB_DIR = Path(tempfile.mkdtemp(prefix="northnode-tests-"))
_DB_FILE = _DB_DIR / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_FILE.as_posix()}"
os.environ.setdefault("SQLALCHEMY_ECHO", "0")


@pytest.fixture(scope="session")
def db_engine() -> "Generator":
    """
    Build all tables on the temporary SQLite database for the test session.
    """
    from northnode.db.base import Base, import_all_models
    from northnode.db.session import engine

    import_all_models()
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if _DB_FILE.exists():
            _DB_FILE.unlink()


@pytest.fixture(scope="function")
def db_session(db_engine) -> "Generator":
    """
    Provide a fresh Session for each test function.
    Truncates tables before each test for isolation.
    """
    from northnode.db.base import Base
    from northnode.db.session import SessionLocal

    session = SessionLocal()

    try:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
    except Exception:
        session.rollback()
        raise

    try:
        yield session
    finally:
        session.rollback()
        session.close()
