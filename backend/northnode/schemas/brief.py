"""
Pydantic models for campaign briefs and drafting prompts.

CampaignBrief is deliberately not frozen: regeneration with locked fields
overwrites top-level attributes one by one.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from northnode.schemas.strategy import (
    Experiment,
    IntakeAnalysis,
    IntakeParams,
    StakeholdersClarityLevel,
)

__all__ = [
    "MessagingPillar",
    "ToneProfile",
    "ComplianceNotes",
    "CadencePlan",
    "RequiredAsset",
    "BriefMeta",
    "CampaignBrief",
    "BriefGenerationInput",
    "DraftingPrompts",
    "BriefRequest",
    "BriefResponse",
]


class MessagingPillar(BaseModel):
    pillar: str
    do: List[str] = Field(default_factory=list)
    avoid: List[str] = Field(default_factory=list)


class ToneProfile(BaseModel):
    calm: int = Field(..., ge=0, le=10)
    upbeat: int = Field(..., ge=0, le=10)
    formal: int = Field(..., ge=0, le=10)
    tags: List[str] = Field(default_factory=list)


class ComplianceNotes(BaseModel):
    requires_visibility_archive: bool
    requires_approval_workflow: bool
    claims_cautions: List[str] = Field(default_factory=list)


class CadencePlan(BaseModel):
    frequency: str
    rationale: str


class RequiredAsset(BaseModel):
    asset_type: str
    owner: str


class BriefMeta(BaseModel):
    engine_version: str
    brief_version: str = Field(..., description="major.minor.patch; patch bumps on regeneration")
    generated_at: str = Field(..., description="ISO-8601 UTC timestamp")
    confidence_score: int
    stakeholders_clarity_level: StakeholdersClarityLevel
    audience_warning: Optional[str] = None


class CampaignBrief(BaseModel):
    title: str
    program_summary: str
    primary_audience: str = Field(..., description="'TBD' when the audience is unclear")
    secondary_audience: Optional[str] = None
    positioning_statement: str
    messaging_pillars: List[MessagingPillar]
    tone_profile: ToneProfile
    compliance_notes: ComplianceNotes
    channel_plan: List[str]
    cadence_plan: CadencePlan
    content_themes: List[str]
    experiment_plan: List[Experiment]
    required_assets: List[RequiredAsset]
    success_signals: List[str]
    constraints: List[str]
    missing_info_questions: Optional[List[str]] = None
    meta: BriefMeta


class BriefGenerationInput(BaseModel):
    analysis: IntakeAnalysis
    channels: List[str] = Field(default_factory=list)
    assets: List[str] = Field(default_factory=list)
    engine_version: str = "1.0.0"
    existing_version: Optional[str] = None


class DraftingPrompts(BaseModel):
    prompt_a: str
    prompt_b: Optional[str] = None
    prompt_c: Optional[str] = None


# -------------------------------
# HTTP request / response models
# -------------------------------

class BriefRequest(BaseModel):
    intake: IntakeParams
    channels: List[str] = Field(default_factory=list)
    assets: List[str] = Field(default_factory=list)
    existing_version: Optional[str] = Field(
        default=None, description="Version to bump; defaults to previous_brief.meta.brief_version"
    )
    previous_brief: Optional[CampaignBrief] = None
    locked_fields: List[str] = Field(default_factory=list, description="Top-level brief fields to keep")


class BriefResponse(BaseModel):
    brief: CampaignBrief
    prompts: DraftingPrompts
