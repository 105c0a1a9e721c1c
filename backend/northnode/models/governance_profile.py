"""
GovernanceProfile model.

Client-level governance configuration. `config` holds the raw JSON that
normalize_profile_config() turns into a GovernanceProfileConfig:

    {"enabled_policies": [...], "custom_patterns": [...], "required_phrases": [...]}

A client may own several profiles; the most recently updated active one is
used when validation is requested by client id alone.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, Boolean, DateTime, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northnode.db.base import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GovernanceProfile(Base):
    __tablename__ = "governance_profile"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    client_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    config: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("1")
    )

    # Timestamps (python-side defaults keep sub-second ordering on SQLite)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    campaigns: Mapped[list["Campaign"]] = relationship(  # noqa: F821
        "Campaign",
        back_populates="governance_profile",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<GovernanceProfile id={self.id!r} client_id={self.client_id!r} active={self.is_active!r}>"
