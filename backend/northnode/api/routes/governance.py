"""
Governance endpoints.

POST /api/governance/validate
- Enforces the configured content length cap.
- Validates under the governance context resolved from client/profile/campaign ids.
- Returns violations, the compliance score and the resolved identifiers.

POST /api/governance/score
- Scores a caller-supplied violation list.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from northnode.core.config import Settings
from northnode.core.contracts import GovernanceConfigRepo
from northnode.core.deps import get_app_settings, get_governance_config_repo
from northnode.core.errors import ContentTooLargeError
from northnode.schemas.governance import (
    ComplianceScore,
    ScoreRequest,
    ValidateRequest,
    ValidateResponse,
)
from northnode.services.governance_engine import validate_content_with_context
from northnode.services.scoring import calculate_compliance_score

router = APIRouter(prefix="/api/governance", tags=["governance"])


@router.post("/validate", response_model=ValidateResponse)
def validate_endpoint(
    payload: ValidateRequest,
    repo: GovernanceConfigRepo = Depends(get_governance_config_repo),
    settings: Settings = Depends(get_app_settings),
) -> ValidateResponse:
    if len(payload.content) > settings.max_content_length:
        raise ContentTooLargeError(
            f"Content exceeds {settings.max_content_length} characters",
            details={"length": len(payload.content), "limit": settings.max_content_length},
        )

    result = validate_content_with_context(payload.content, payload.context(), repo)
    return ValidateResponse(
        violations=result.violations,
        score=calculate_compliance_score(result.violations),
        profile_id=result.profile_id,
        campaign_id=result.campaign_id,
        client_id=result.client_id,
    )


@router.post("/score", response_model=ComplianceScore)
def score_endpoint(payload: ScoreRequest) -> ComplianceScore:
    return calculate_compliance_score(payload.violations)
