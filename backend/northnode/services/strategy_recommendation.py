"""
Map an IntakeAnalysis to the recommendation shown to campaign planners.

Adds archetype default channels, suggested assets, non-prescriptive next
steps, risk notes, a readable cadence label and a one-line summary on top of
the raw analysis.
"""

from __future__ import annotations

from typing import List

from northnode.schemas.strategy import ExperimentSummary, IntakeAnalysis, StrategyRecommendation
from northnode.services.intake_library import AUDIENCE_QUESTION_ID, CLAIMS_TRIGGER_SIGNALS

__all__ = [
    "ARCHETYPE_DEFAULT_CHANNELS",
    "ARCHETYPE_ASSETS",
    "dedupe_channels",
    "cadence_label",
    "build_recommendation",
]

ARCHETYPE_DEFAULT_CHANNELS = {
    "program-launch": ("Email sequence", "Social organic"),
    "referral-enablement": ("Provider email drip", "LinkedIn organic"),
    "trust-building": ("Social organic", "Email (monthly)"),
    "compliance-visibility": ("Stakeholder email (milestone-triggered)", "Documentation archive"),
}

ARCHETYPE_ASSETS = {
    "program-launch": (
        "Program overview page (what it is, who it supports, how to connect)",
        "Email sequence: 4-6 touches (pre-launch awareness + post-launch follow-up)",
        "15-20 social posts (6-week bank)",
    ),
    "referral-enablement": (
        "Provider one-pager or referral checklist",
        "Provider email drip: 5-7 touches over 6-8 weeks",
        "LinkedIn post series (clinical education focus)",
    ),
    "trust-building": (
        "Educational content series (3-4 topic clusters)",
        "Monthly newsletter template",
        "Social post bank (3x/week, 8-week supply)",
    ),
    "compliance-visibility": (
        "Milestone communication templates (accreditation / annual report)",
        "Stakeholder one-pager (milestone summary, no clinical claims)",
        "Approval workflow checklist",
    ),
}

PRINT_CHANNEL = "Print / one-pager distribution"
PRINT_ASSET = "Print flyer / handout (provider-facing or community-facing)"

# Channels sharing this many leading characters are treated as duplicates.
_CHANNEL_PREFIX = 12


def _normalize_channel(channel: str) -> str:
    lowered = channel.lower()
    return lowered[:-1] if lowered.endswith((".", ",", ";")) else lowered


def dedupe_channels(channels: List[str]) -> List[str]:
    kept: List[str] = []
    for channel in channels:
        norm = _normalize_channel(channel)
        duplicate = any(
            prev.startswith(norm[:_CHANNEL_PREFIX]) or norm.startswith(prev[:_CHANNEL_PREFIX])
            for prev in (_normalize_channel(c) for c in kept)
        )
        if not duplicate:
            kept.append(channel)
    return kept


def cadence_label(analysis: IntakeAnalysis) -> str:
    rule = analysis.cadence_rule
    if rule.pattern == "hybrid":
        return f"Hybrid - {rule.email_frequency} email / {rule.social_frequency} social"
    if rule.pattern == "weekly-anchor":
        return f"Weekly anchor - {rule.social_frequency} social / {rule.email_frequency} email"
    if rule.pattern == "drip":
        return f"Drip - {rule.email_frequency} email / {rule.social_frequency} social"
    return f"Milestone-triggered - {rule.email_frequency}"


def build_recommendation(
    analysis: IntakeAnalysis,
    industry: str = "",
    audience: str = "",
    goals: str = "",
) -> StrategyRecommendation:
    signals = set(analysis.detected_signal_keys)
    primary = analysis.primary_archetype

    channels = list(ARCHETYPE_DEFAULT_CHANNELS.get(primary, ARCHETYPE_DEFAULT_CHANNELS["trust-building"]))
    if "flyer" in signals and not any(c.lower().startswith("print") for c in channels):
        channels.append(PRINT_CHANNEL)

    assets = list(ARCHETYPE_ASSETS.get(primary, ()))
    if "flyer" in signals:
        assets.append(PRINT_ASSET)
    assets = list(dict.fromkeys(assets))

    next_steps = [
        "Complete any missing intake information (see questions below) before finalizing brief",
        "Turn intake into a campaign brief with messaging pillars (no outcome claims)",
        "Draft 4-6 week content calendar aligned to cadence pattern",
    ]
    if analysis.requires_approval_workflow:
        next_steps.append("Map approval checkpoints before scheduling any content")
    next_steps.append("Run 2-week pilot on primary channel; review engagement signals before scaling")

    risks: List[str] = []
    if analysis.stakeholders_clarity_level == "low":
        risks.append(f"Audience unclear - review {AUDIENCE_QUESTION_ID}")
    if analysis.requires_approval_workflow:
        risks.append("Approval workflow required - schedule review gates before any publish date")
    if signals.intersection(CLAIMS_TRIGGER_SIGNALS):
        risks.append("Confirm all program claims are qualified and do not imply clinical outcomes")
    if "trust-building" in signals:
        risks.append("Avoid any framing that implies urgency or pressure to seek care")

    parts = [p for p in (industry, f"Audience: {audience}" if audience else "", f"Goals: {goals}" if goals else "") if p]
    if parts:
        summary = " • ".join(parts)
    else:
        keys = ", ".join(analysis.detected_signal_keys) or "general awareness"
        summary = f"Archetype: {primary} - {keys}"

    return StrategyRecommendation(
        analysis=analysis,
        summary=summary,
        primary_archetype=primary,
        secondary_archetype=analysis.secondary_archetype,
        recommended_cadence=cadence_label(analysis),
        cadence_rationale=analysis.cadence_rule.rationale,
        channels=dedupe_channels(channels),
        experiments=[
            ExperimentSummary(id=e.id, name=e.name, safety_class=e.safety_class) for e in analysis.experiments
        ],
        assets=assets,
        next_steps=next_steps,
        risks=risks,
        missing_info_questions=[q.question for q in analysis.missing_info_questions],
    )
