"""
In-memory fake repositories for testing services without a real database.

Implements Protocol-compatible classes:
- FakeGovernanceConfigRepo (GovernanceConfigRepo)

Records are plain dataclasses exposing the same attributes as the ORM models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


# ----------------------------------------
# Internal lightweight entity classes
# ----------------------------------------

@dataclass
class _Profile:
    id: str
    client_id: str
    config: Dict[str, Any]
    is_active: bool = True
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class _Campaign:
    id: str
    client_id: str
    governance_profile_id: str
    config: Dict[str, Any]
    governance_profile: Optional[_Profile] = None


# ----------------------------------------
# Fake Governance Config Repo
# ----------------------------------------

class FakeGovernanceConfigRepo:
    def __init__(self) -> None:
        self.profiles: Dict[str, _Profile] = {}
        self.campaigns: Dict[str, _Campaign] = {}
        self.calls: List[str] = []

    # Helpers for tests
    def add_profile(
        self,
        profile_id: str,
        client_id: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        is_active: bool = True,
        updated_at: Optional[datetime] = None,
    ) -> _Profile:
        profile = _Profile(id=profile_id, client_id=client_id, config=config or {}, is_active=is_active)
        if updated_at is not None:
            profile.updated_at = updated_at
        self.profiles[profile_id] = profile
        return profile

    def add_campaign(
        self,
        campaign_id: str,
        profile_id: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> _Campaign:
        profile = self.profiles[profile_id]
        campaign = _Campaign(
            id=campaign_id,
            client_id=profile.client_id,
            governance_profile_id=profile_id,
            config=config or {},
            governance_profile=profile,
        )
        self.campaigns[campaign_id] = campaign
        return campaign

    # Protocol methods
    def get_campaign(self, campaign_id: str) -> Optional[_Campaign]:
        self.calls.append(f"get_campaign:{campaign_id}")
        return self.campaigns.get(campaign_id)

    def get_profile(self, profile_id: str) -> Optional[_Profile]:
        self.calls.append(f"get_profile:{profile_id}")
        return self.profiles.get(profile_id)

    def get_latest_active_profile(self, client_id: str) -> Optional[_Profile]:
        self.calls.append(f"get_latest_active_profile:{client_id}")
        candidates = [p for p in self.profiles.values() if p.client_id == client_id and p.is_active]
        if not candidates:
            return None
        return max(candidates, key=lambda p: p.updated_at)
