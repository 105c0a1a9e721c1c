"""
Pydantic models for the strategy intake engine.

All models are frozen: an IntakeAnalysis is pure derived data and is never
mutated after construction.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "SignalKey",
    "CampaignArchetype",
    "CadencePattern",
    "ExperimentSafetyClass",
    "StakeholdersClarityLevel",
    "Signal",
    "CadenceRule",
    "Experiment",
    "ExperimentSummary",
    "MissingInfoQuestion",
    "IntakeParams",
    "IntakeAnalysis",
    "StrategyRecommendation",
]

SignalKey = Literal[
    "launch",
    "compliance",
    "social",
    "email",
    "flyer",
    "integration-of-care",
    "stakeholders-unclear",
    "referral-enablement",
    "trust-building",
    "compliance-visibility",
]

CampaignArchetype = Literal[
    "program-launch",
    "trust-building",
    "compliance-visibility",
    "referral-enablement",
]

CadencePattern = Literal["drip", "weekly-anchor", "hybrid", "milestone-triggered"]
ExperimentSafetyClass = Literal["format", "framing", "sequencing"]
StakeholdersClarityLevel = Literal["high", "medium", "low"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Signal(_Frozen):
    key: SignalKey
    detected: bool
    matched_terms: List[str] = Field(default_factory=list, description="Literal substrings found (evidence)")


class CadenceRule(_Frozen):
    archetype: CampaignArchetype
    pattern: CadencePattern
    description: str
    rationale: str
    email_frequency: str
    social_frequency: str


class Experiment(_Frozen):
    """A charter-safe A/B test: format, framing or sequencing variation only."""

    id: str
    name: str
    hypothesis: str
    variant_a: str
    variant_b: str
    safety_class: ExperimentSafetyClass
    applicable_archetypes: List[CampaignArchetype]


class ExperimentSummary(_Frozen):
    id: str
    name: str
    safety_class: ExperimentSafetyClass


class MissingInfoQuestion(_Frozen):
    id: str
    question: str
    triggered_by: List[SignalKey]
    impacts_archetype: bool
    impacts_cadence: bool
    placeholder: Optional[str] = None


class IntakeParams(_Frozen):
    intake_text: str = Field(default="", description="Primary free-text campaign intake")
    ideas_text: str = Field(default="", description="Rough ideas / additional context")
    industry: str = ""
    audience: str = ""
    goals: str = ""


class IntakeAnalysis(_Frozen):
    signals: List[Signal]
    detected_signal_keys: List[SignalKey]
    primary_archetype: CampaignArchetype
    secondary_archetype: Optional[CampaignArchetype] = None
    cadence_rule: CadenceRule
    experiments: List[Experiment]
    missing_info_questions: List[MissingInfoQuestion]
    requires_visibility_archive: bool
    requires_approval_workflow: bool
    confidence_score: int = Field(..., ge=0, le=100)
    evidence: Dict[str, List[str]] = Field(default_factory=dict)
    stakeholders_clarity_level: StakeholdersClarityLevel
    stack: List[str]
    planner_prompt: str
    suggested_audience: List[str]
    suggested_goals: List[str]
    suggested_cadence: List[str]


class StrategyRecommendation(_Frozen):
    """UI-facing view of an IntakeAnalysis with channel, asset and risk guidance."""

    analysis: IntakeAnalysis
    summary: str
    primary_archetype: CampaignArchetype
    secondary_archetype: Optional[CampaignArchetype] = None
    recommended_cadence: str
    cadence_rationale: str
    channels: List[str]
    experiments: List[ExperimentSummary]
    assets: List[str]
    next_steps: List[str]
    risks: List[str]
    missing_info_questions: List[str]
