"""
Dependency wiring for repositories and settings.

Factory functions that construct concrete implementations behind the
Protocol interfaces in northnode.core.contracts. No business logic here.

Provided factories:
- get_governance_config_repo
- get_app_settings
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from northnode.core.config import Settings, get_settings
from northnode.core.contracts import GovernanceConfigRepo
from northnode.db.session import get_db
from northnode.repos.governance_config_repo import SqlAlchemyGovernanceConfigRepo

__all__ = ["get_governance_config_repo", "get_app_settings"]


def get_governance_config_repo(db: Session = Depends(get_db)) -> GovernanceConfigRepo:
    return SqlAlchemyGovernanceConfigRepo(db)


def get_app_settings() -> Settings:
    return get_settings()
