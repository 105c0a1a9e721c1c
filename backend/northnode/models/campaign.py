"""
Campaign model.

A campaign belongs to a client and points at the governance profile it is
validated under. `config` holds per-campaign overrides (CampaignConfig JSON):

    {"disabled_policies": [...], "extra_forbidden_patterns": [...], "required_phrases": [...]}
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northnode.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Campaign(Base):
    __tablename__ = "campaign"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    client_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    governance_profile_id: Mapped[str] = mapped_column(
        ForeignKey("governance_profile.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    config: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    governance_profile: Mapped["GovernanceProfile"] = relationship(  # noqa: F821
        "GovernanceProfile",
        back_populates="campaigns",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<Campaign id={self.id!r} client_id={self.client_id!r} profile={self.governance_profile_id!r}>"
