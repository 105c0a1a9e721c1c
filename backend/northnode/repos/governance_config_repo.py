"""
SQLAlchemy-based governance configuration repository.

Implements the GovernanceConfigRepo Protocol plus the small amount of write
support the CLI and tests need:
- get_campaign, get_profile, get_latest_active_profile
- create_profile, create_campaign
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from northnode.models.campaign import Campaign
from northnode.models.governance_profile import GovernanceProfile

__all__ = ["SqlAlchemyGovernanceConfigRepo"]


class SqlAlchemyGovernanceConfigRepo:
    """
    Concrete governance config repository using SQLAlchemy ORM.
    """

    def __init__(self, session: Session) -> None:
        if not isinstance(session, Session):
            raise TypeError("session must be an instance of sqlalchemy.orm.Session")
        self.session = session

    # -------------------------------
    # Reads
    # -------------------------------

    def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        stmt = select(Campaign).where(Campaign.id == campaign_id)
        return self.session.execute(stmt).scalars().first()

    def get_profile(self, profile_id: str) -> Optional[GovernanceProfile]:
        stmt = select(GovernanceProfile).where(GovernanceProfile.id == profile_id)
        return self.session.execute(stmt).scalars().first()

    def get_latest_active_profile(self, client_id: str) -> Optional[GovernanceProfile]:
        stmt = (
            select(GovernanceProfile)
            .where(GovernanceProfile.client_id == client_id, GovernanceProfile.is_active.is_(True))
            .order_by(GovernanceProfile.updated_at.desc(), GovernanceProfile.created_at.desc())
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    # -------------------------------
    # Writes
    # -------------------------------

    def create_profile(
        self,
        *,
        client_id: str,
        name: str,
        config: Optional[Dict[str, Any]] = None,
        is_active: bool = True,
    ) -> GovernanceProfile:
        if not isinstance(client_id, str) or not client_id.strip():
            raise ValueError("client_id must be a non-empty string")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
        profile = GovernanceProfile(
            client_id=client_id.strip(),
            name=name.strip(),
            config=dict(config or {}),
            is_active=is_active,
        )
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def create_campaign(
        self,
        *,
        client_id: str,
        governance_profile_id: str,
        name: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> Campaign:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
        campaign = Campaign(
            client_id=client_id,
            governance_profile_id=governance_profile_id,
            name=name.strip(),
            config=dict(config or {}),
        )
        self.session.add(campaign)
        self.session.commit()
        self.session.refresh(campaign)
        return campaign
