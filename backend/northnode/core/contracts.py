"""
Repository contracts (Protocols) for data access layers.

The governance engine resolves profile and campaign configuration through
this Protocol only. Concrete implementations can use SQLAlchemy or in-memory
stores, as long as they satisfy the interface.

Returned records are duck-typed: a profile exposes `id`, `client_id` and
`config`; a campaign exposes `id`, `client_id`, `governance_profile_id`,
`config` and optionally a loaded `governance_profile`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from northnode.models.campaign import Campaign
    from northnode.models.governance_profile import GovernanceProfile

__all__ = ["GovernanceConfigRepo"]


# -------------------------------
# Governance Config Repository
# -------------------------------

@runtime_checkable
class GovernanceConfigRepo(Protocol):
    """
    Contract for governance profile and campaign lookups.
    """

    def get_campaign(self, campaign_id: str) -> Optional["Campaign"]:
        """Fetch a campaign (with its governance profile) by id."""
        raise NotImplementedError()

    def get_profile(self, profile_id: str) -> Optional["GovernanceProfile"]:
        """Fetch a governance profile by id."""
        raise NotImplementedError()

    def get_latest_active_profile(self, client_id: str) -> Optional["GovernanceProfile"]:
        """Return the most recently updated active profile for a client, if any."""
        raise NotImplementedError()
