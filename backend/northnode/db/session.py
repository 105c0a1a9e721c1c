"""
Database engine and request-scoped sessions for the governance config store.

The store only holds GovernanceProfile and Campaign rows, read once per
validation request through SqlAlchemyGovernanceConfigRepo.

URL resolution: DATABASE_URL env, then DB_URL env, then Settings.db_url
(sqlite:///./northnode.db unless configured).
"""

from __future__ import annotations

import os
from typing import Any, Dict, Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from northnode.core.config import get_settings

__all__ = ["engine", "SessionLocal", "get_db", "DATABASE_URL", "SQLALCHEMY_ECHO"]

DATABASE_URL: str = os.getenv("DATABASE_URL") or os.getenv("DB_URL") or get_settings().db_url
SQLALCHEMY_ECHO: bool = os.getenv("SQLALCHEMY_ECHO", "0").lower() in {"1", "true", "yes", "on"}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # pragma: no cover
    # Campaign.governance_profile_id relies on FK enforcement, which SQLite leaves off.
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _build_engine(url: str) -> Engine:
    is_sqlite = url.startswith("sqlite")
    kwargs: Dict[str, Any] = {"echo": SQLALCHEMY_ECHO}
    if is_sqlite:
        # sync routes run in FastAPI's threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True

    built = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(built, "connect", _enable_sqlite_foreign_keys)
    return built


engine = _build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, class_=Session)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
