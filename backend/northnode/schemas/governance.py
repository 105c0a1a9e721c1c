"""
Pydantic models for governance validation and compliance scoring.

- Violation: one detected policy breach (immutable).
- ComplianceScore: 0-100 score with itemized reasoning.
- CustomPattern / RequiredPhrase: organization-authored rules.
- GovernanceProfileConfig / CampaignConfig: per-client and per-campaign policy selection.
- GovernanceContext: identifiers used to resolve the two configs.
- ContextualValidationResult: violations plus the identifiers that were resolved.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PolicySeverity",
    "Violation",
    "ComplianceScore",
    "CustomPattern",
    "RequiredPhrase",
    "GovernanceProfileConfig",
    "CampaignConfig",
    "GovernanceContext",
    "ContextualValidationResult",
    "ValidateRequest",
    "ValidateResponse",
    "ScoreRequest",
]

PolicySeverity = Literal["high", "medium", "low"]


class Violation(BaseModel):
    """A single policy violation. start_index == end_index == 0 marks a whole-content finding."""

    model_config = ConfigDict(frozen=True)

    policy_id: str = Field(..., description="Policy identifier, e.g. 'medical-claims'")
    severity: PolicySeverity = Field(..., description="Informational ranking; does not affect score")
    text: str = Field(..., description="Snippet with surrounding context, or a fixed description")
    explanation: str = Field(..., description="Why this violates policy and how to rewrite it")
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)

    @property
    def is_whole_content(self) -> bool:
        return self.start_index == 0 and self.end_index == 0


class ComplianceScore(BaseModel):
    score: int = Field(..., ge=0, le=100)
    reasoning: List[str] = Field(default_factory=list)
    passed: List[str] = Field(default_factory=list)
    violations: List[Violation] = Field(default_factory=list)


class CustomPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    pattern: str = Field(..., description="Regular expression source")
    explanation: str
    severity: Optional[PolicySeverity] = None
    flags: Optional[str] = Field(default=None, description="JS-style flag letters, default 'gi'")


class RequiredPhrase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    phrase: str
    explanation: str
    severity: Optional[PolicySeverity] = None


class GovernanceProfileConfig(BaseModel):
    enabled_policies: List[str] = Field(default_factory=list)
    custom_patterns: List[CustomPattern] = Field(default_factory=list)
    required_phrases: List[RequiredPhrase] = Field(default_factory=list)


class CampaignConfig(BaseModel):
    disabled_policies: List[str] = Field(default_factory=list)
    extra_forbidden_patterns: List[CustomPattern] = Field(default_factory=list)
    required_phrases: List[RequiredPhrase] = Field(default_factory=list)


class GovernanceContext(BaseModel):
    client_id: Optional[str] = None
    profile_id: Optional[str] = None
    campaign_id: Optional[str] = None


class ContextualValidationResult(BaseModel):
    violations: List[Violation] = Field(default_factory=list)
    profile_id: Optional[str] = None
    campaign_id: Optional[str] = None
    client_id: Optional[str] = None


# -------------------------------
# HTTP request / response models
# -------------------------------

class ValidateRequest(BaseModel):
    content: str = Field(..., description="Marketing copy to validate")
    client_id: Optional[str] = None
    profile_id: Optional[str] = None
    campaign_id: Optional[str] = None

    def context(self) -> GovernanceContext:
        return GovernanceContext(
            client_id=self.client_id, profile_id=self.profile_id, campaign_id=self.campaign_id
        )


class ValidateResponse(BaseModel):
    violations: List[Violation]
    score: ComplianceScore
    profile_id: Optional[str] = None
    campaign_id: Optional[str] = None
    client_id: Optional[str] = None


class ScoreRequest(BaseModel):
    violations: List[Violation] = Field(default_factory=list)
