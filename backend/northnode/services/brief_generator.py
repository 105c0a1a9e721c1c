"""
Campaign brief generator.

Builds a CampaignBrief from an IntakeAnalysis plus caller-chosen channels and
assets. Every derived free-text field passes through a prohibited-language
sanitizer: a rule with a replacement substitutes in place, a rule without one
discards the whole field and reverts it to safe boilerplate.

Also provides:
- merge_locked_fields: keep caller-locked fields from a previous brief
- export_brief_as_json / export_brief_as_markdown / generate_export_filename
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from northnode.schemas.brief import (
    BriefGenerationInput,
    BriefMeta,
    CadencePlan,
    CampaignBrief,
    ComplianceNotes,
    MessagingPillar,
    RequiredAsset,
    ToneProfile,
)
from northnode.schemas.strategy import IntakeAnalysis
from northnode.services.intake_library import CLAIMS_TRIGGER_SIGNALS

__all__ = [
    "PROHIBITED_REPLACEMENTS",
    "POSITIONING_FALLBACK",
    "PROGRAM_SUMMARY_FALLBACK",
    "increment_brief_version",
    "strip_prohibited",
    "sanitize_text_or_fallback",
    "sanitize_array",
    "generate_campaign_brief",
    "merge_locked_fields",
    "export_brief_as_json",
    "export_brief_as_markdown",
    "generate_export_filename",
]

# (pattern, replacement); None discards the whole field. Order matters.
PROHIBITED_REPLACEMENTS: tuple[tuple[str, Optional[str]], ...] = (
    ("will cure", None),
    ("will treat", None),
    ("will improve your", None),
    ("guarantees", None),
    ("clinically proven", "evidence-informed"),
    ("proven to", None),
    ("reduces symptoms", None),
)

CONSTRAINTS_BASE = (
    "No advice statements (e.g., 'you should', 'you need to', 'you must')",
    "No clinical or health outcome promises",
    "No urgency CTAs",
    "No patient stories or testimonials by default (unlock explicitly if approved)",
)

POSITIONING_FALLBACK = (
    "A supportive environment for those seeking [service type] - focused on access, consistency, and care."
)
PROGRAM_SUMMARY_FALLBACK = (
    "[Organization] offers [service type] for [general audience]. "
    "Programs are designed to support wellbeing and connection."
)

# First detected signal wins.
PRIMARY_AUDIENCE_MAP = (
    ("referral-enablement", "Referring clinicians and care coordinators"),
    ("launch", "Community members seeking [service type]"),
    ("trust-building", "General community audience"),
    ("compliance-visibility", "Internal stakeholders and board"),
)

PROHIBITED_POSITIONING_TERMS = (
    "best", "only", "guaranteed", "proven", "cure", "fix", "eliminate", "most effective",
)

BANNED_SUCCESS_TERMS = (
    "clinical outcome",
    "recovery rate",
    "symptom reduction",
    "treatment success",
    "cure",
    "remission",
    "medical improvement",
)

ARCHETYPE_LABELS = {
    "program-launch": "Program Launch",
    "referral-enablement": "Referral Enablement",
    "trust-building": "Trust Building",
    "compliance-visibility": "Compliance Visibility",
}

TONE_PROFILES = {
    "program-launch": (6, 8, 5, ("energetic", "accessible", "welcoming")),
    "referral-enablement": (9, 5, 8, ("clinical-appropriate", "factual", "professional")),
    "trust-building": (8, 7, 4, ("warm", "approachable", "evidence-informed")),
    "compliance-visibility": (9, 3, 9, ("neutral", "factual", "process-oriented")),
}

CONTENT_THEMES = {
    "program-launch": (
        "Program availability announcement",
        "What to expect from intake",
        "Meet the team / program overview",
        "How to get started",
        "Frequently asked questions",
        "Countdown / milestone moments",
    ),
    "referral-enablement": (
        "Referral pathway overview",
        "Who is appropriate for referral",
        "How to initiate a referral",
        "What happens after referral",
        "Provider FAQ",
        "Co-branding and partnership framing",
    ),
    "trust-building": (
        "Ongoing access reminders",
        "Community impact (non-outcome)",
        "Educational content on service area",
        "Stigma reduction language",
        "Staff and program spotlights",
        "Seasonal/evergreen awareness content",
        "Resource roundups",
    ),
    "compliance-visibility": (
        "Program milestone documentation",
        "Policy adherence narrative",
        "Board/stakeholder update framing",
        "Approval process overview",
        "Compliance archive snapshot",
        "Regulatory context framing",
    ),
}
MAX_CONTENT_THEMES = 8

SUCCESS_SIGNALS = {
    "program-launch": (
        "Intake form submissions",
        "Landing page conversion rate",
        "Email open rate on launch sequence",
        "Social post reach (organic)",
        "Event attendance (if applicable)",
    ),
    "referral-enablement": (
        "Provider outreach response rate",
        "Referral form completion rate",
        "Provider portal logins",
        "One-pager downloads",
    ),
    "trust-building": (
        "Monthly follower growth",
        "Email list growth",
        "Content engagement rate",
        "Newsletter open rate",
        "Event RSVPs",
    ),
    "compliance-visibility": (
        "Archive document completion rate",
        "Stakeholder review completion",
        "Approval turnaround time",
    ),
}

DEFAULT_CHANNEL_PLAN = ("Social organic", "Email (monthly)")


# -------------------------------
# Sanitizer
# -------------------------------

def strip_prohibited(text: str) -> Optional[str]:
    """
    Apply PROHIBITED_REPLACEMENTS to text.

    Returns None when a discard rule matches; otherwise the text with any
    replacement rules applied (case-insensitive).
    """
    updated = text
    for pattern, replacement in PROHIBITED_REPLACEMENTS:
        if pattern not in updated.lower():
            continue
        if replacement is None:
            return None
        updated = re.sub(re.escape(pattern), replacement, updated, flags=re.IGNORECASE)
    return updated


def sanitize_text_or_fallback(value: str, fallback: str) -> str:
    sanitized = strip_prohibited(value)
    return fallback if sanitized is None else sanitized


def sanitize_array(values: Iterable[str], fallback: List[str]) -> List[str]:
    """Drop items a discard rule rejects (or that end up empty); fall back when nothing survives."""
    sanitized = [s for s in (strip_prohibited(v) for v in values) if s]
    return sanitized if sanitized else list(fallback)


def _base_pillars() -> List[MessagingPillar]:
    return [
        MessagingPillar(
            pillar="Access",
            do=["Highlight availability and ease of entry", "Emphasize no-barrier intake"],
            avoid=["Promise outcomes", "Use urgency language"],
        ),
        MessagingPillar(
            pillar="Consistency",
            do=["Describe regular program touchpoints", "Reference cadence and structure"],
            avoid=["Imply results from consistency alone", "Overpromise engagement outcomes"],
        ),
        MessagingPillar(
            pillar="Community",
            do=["Frame around belonging and connection", "Use inclusive language"],
            avoid=["Tokenize specific populations", "Use inspiration-porn framing"],
        ),
    ]


def _sanitize_pillars(pillars: List[MessagingPillar]) -> List[MessagingPillar]:
    sanitized = [
        MessagingPillar(
            pillar=p.pillar,
            do=sanitize_array(p.do, ["Highlight availability"]),
            avoid=sanitize_array(p.avoid, ["Promise outcomes"]),
        )
        for p in pillars
        if p.pillar
    ]
    return sanitized or _base_pillars()


# -------------------------------
# Derivations
# -------------------------------

def increment_brief_version(existing_version: Optional[str] = None) -> str:
    """Bump the patch component; a missing or malformed version restarts at 1.0.0."""
    if not existing_version:
        return "1.0.0"
    parts = existing_version.split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return "1.0.0"
    major, minor, patch = (int(p) for p in parts)
    return f"{major}.{minor}.{patch + 1}"


def _first_sentence(analysis: IntakeAnalysis) -> str:
    return analysis.planner_prompt.split(".")[0].strip()


def _derive_primary_audience(detected: List[str]) -> str:
    for key, value in PRIMARY_AUDIENCE_MAP:
        if key in detected:
            return value
    return "TBD"


def _derive_secondary_audience(analysis: IntakeAnalysis) -> Optional[str]:
    if analysis.secondary_archetype == "referral-enablement":
        return "Referring clinicians and care coordinators"
    if analysis.secondary_archetype == "trust-building":
        return "Community members and general public"
    return None


def _derive_positioning(analysis: IntakeAnalysis) -> str:
    candidate = _first_sentence(analysis)
    lower = candidate.lower()
    if not candidate or any(term in lower for term in PROHIBITED_POSITIONING_TERMS):
        return POSITIONING_FALLBACK
    return candidate


def _derive_program_summary(analysis: IntakeAnalysis) -> str:
    candidate = _first_sentence(analysis)
    if not candidate:
        return PROGRAM_SUMMARY_FALLBACK
    return sanitize_text_or_fallback(candidate, PROGRAM_SUMMARY_FALLBACK)


def _derive_messaging_pillars(detected: List[str]) -> List[MessagingPillar]:
    pillars = _base_pillars()
    if "referral-enablement" in detected:
        pillars.append(
            MessagingPillar(
                pillar="Clinical Clarity",
                do=["Describe referral process clearly", "Name intake requirements (not diagnostic criteria)"],
                avoid=["State clinical efficacy", "Describe patient outcomes"],
            )
        )
    if "compliance-visibility" in detected or "compliance" in detected:
        pillars.append(
            MessagingPillar(
                pillar="Transparency",
                do=["Document process and milestones", "Acknowledge regulatory context"],
                avoid=["Use marketing framing in compliance content", "Overstate compliance status"],
            )
        )
    return pillars


def _derive_tone_profile(primary: str) -> ToneProfile:
    calm, upbeat, formal, tags = TONE_PROFILES.get(primary, TONE_PROFILES["trust-building"])
    return ToneProfile(calm=calm, upbeat=upbeat, formal=formal, tags=list(tags))


def _derive_compliance_notes(analysis: IntakeAnalysis) -> ComplianceNotes:
    detected = analysis.detected_signal_keys
    cautions: List[str] = []
    if any(key in detected for key in CLAIMS_TRIGGER_SIGNALS):
        cautions.append(
            "All health-adjacent claims must be scoped to availability and access, not efficacy or outcomes"
        )
    if "referral-enablement" in detected:
        cautions.append("Referral content must not describe diagnostic criteria or clinical outcomes")
    if "compliance" in detected or "compliance-visibility" in detected:
        cautions.append("Compliance claims must reference documented policy, not assertions")
    cautions.append("No urgency CTAs permitted (e.g., 'act now', 'limited time', 'don't wait')")
    return ComplianceNotes(
        requires_visibility_archive=analysis.requires_visibility_archive,
        requires_approval_workflow=analysis.requires_approval_workflow,
        claims_cautions=cautions,
    )


def _derive_content_themes(analysis: IntakeAnalysis) -> List[str]:
    themes = list(CONTENT_THEMES.get(analysis.primary_archetype, ()))
    if analysis.secondary_archetype:
        themes += CONTENT_THEMES.get(analysis.secondary_archetype, ())
    return list(dict.fromkeys(themes))[:MAX_CONTENT_THEMES]


def _derive_required_assets(assets: Iterable[str]) -> List[RequiredAsset]:
    required = []
    for asset in assets:
        lower = asset.lower()
        if "provider" in lower or "clinical" in lower or "referral" in lower:
            owner = "Clinical communications lead"
        elif "compliance" in lower or "legal" in lower or "approval" in lower:
            owner = "Compliance officer"
        else:
            owner = "Marketing lead"
        required.append(RequiredAsset(asset_type=asset, owner=owner))
    return required


def _derive_success_signals(primary: str) -> List[str]:
    return [
        item
        for item in SUCCESS_SIGNALS.get(primary, ())
        if not any(term in item.lower() for term in BANNED_SUCCESS_TERMS)
    ]


def _derive_constraints(analysis: IntakeAnalysis) -> List[str]:
    constraints = list(CONSTRAINTS_BASE)
    if analysis.requires_approval_workflow:
        constraints.append("All content requires documented sign-off before publication")
    if analysis.requires_visibility_archive:
        constraints.append("All published content must be archived with datestamp and channel record")
    if "compliance" in analysis.detected_signal_keys:
        constraints.append("Health-adjacent claims must cite accessible source or remove claim")
    return constraints


def _cadence_frequency(analysis: IntakeAnalysis) -> str:
    rule = analysis.cadence_rule
    if rule.pattern == "milestone-triggered":
        return rule.email_frequency
    return "; ".join(p for p in (rule.email_frequency, rule.social_frequency) if p)


# -------------------------------
# Entry point
# -------------------------------

def generate_campaign_brief(
    data: BriefGenerationInput,
    now: Optional[Callable[[], datetime]] = None,
) -> CampaignBrief:
    """
    Generate a sanitized CampaignBrief.

    `now` returns the generation timestamp (defaults to the current UTC time);
    inject a fixed clock for reproducible output.
    """
    analysis = data.analysis
    detected = list(analysis.detected_signal_keys)
    clarity = analysis.stakeholders_clarity_level

    raw_audience = _derive_primary_audience(detected)
    low_clarity = clarity == "low" or raw_audience == "TBD"

    generated_at = (now or (lambda: datetime.now(timezone.utc)))()

    return CampaignBrief(
        title=f"{ARCHETYPE_LABELS.get(analysis.primary_archetype, 'Strategy')} Campaign Brief",
        program_summary=sanitize_text_or_fallback(_derive_program_summary(analysis), PROGRAM_SUMMARY_FALLBACK),
        primary_audience="TBD" if low_clarity else raw_audience,
        secondary_audience=_derive_secondary_audience(analysis),
        positioning_statement=sanitize_text_or_fallback(_derive_positioning(analysis), POSITIONING_FALLBACK),
        messaging_pillars=_sanitize_pillars(_derive_messaging_pillars(detected)),
        tone_profile=_derive_tone_profile(analysis.primary_archetype),
        compliance_notes=_derive_compliance_notes(analysis),
        channel_plan=list(data.channels) if data.channels else list(DEFAULT_CHANNEL_PLAN),
        cadence_plan=CadencePlan(frequency=_cadence_frequency(analysis), rationale=analysis.cadence_rule.rationale),
        content_themes=sanitize_array(_derive_content_themes(analysis), ["Program overview"]),
        experiment_plan=list(analysis.experiments),
        required_assets=_derive_required_assets(data.assets),
        success_signals=sanitize_array(_derive_success_signals(analysis.primary_archetype), ["Engagement rate"]),
        constraints=_derive_constraints(analysis),
        missing_info_questions=[q.question for q in analysis.missing_info_questions] if low_clarity else None,
        meta=BriefMeta(
            engine_version=data.engine_version,
            brief_version=increment_brief_version(data.existing_version),
            generated_at=generated_at.isoformat(),
            confidence_score=analysis.confidence_score,
            stakeholders_clarity_level=clarity,
            audience_warning=(
                "Audience partially defined - review before publishing"
                if clarity == "medium" and not low_clarity
                else None
            ),
        ),
    )


# -------------------------------
# Locking and export
# -------------------------------

def merge_locked_fields(
    next_brief: CampaignBrief,
    previous_brief: Optional[CampaignBrief],
    locked_fields: Iterable[str],
) -> CampaignBrief:
    """Return a copy of next_brief with each locked top-level field taken from previous_brief."""
    locked = set(locked_fields)
    if previous_brief is None or not locked:
        return next_brief
    update = {
        name: getattr(previous_brief, name)
        for name in locked
        if name in CampaignBrief.model_fields
    }
    return next_brief.model_copy(update=update, deep=True)


def export_brief_as_json(brief: CampaignBrief) -> str:
    return json.dumps(brief.model_dump(mode="json"), indent=2)


def _bullets(items: Iterable[str]) -> List[str]:
    lines = [f"- {item}" for item in items]
    return lines or ["- None"]


def export_brief_as_markdown(brief: CampaignBrief) -> str:
    """Render a brief as a human-readable Markdown document."""
    meta = brief.meta
    lines: List[str] = [
        f"# {brief.title}",
        "",
        f"_Brief version {meta.brief_version} (engine {meta.engine_version}), generated {meta.generated_at}_",
        "",
        f"Confidence score: {meta.confidence_score} | Audience clarity: {meta.stakeholders_clarity_level}",
    ]
    if meta.audience_warning:
        lines += ["", f"> {meta.audience_warning}"]

    lines += [
        "",
        "## Program summary",
        brief.program_summary,
        "",
        "## Audience",
        f"- Primary: {brief.primary_audience}",
        f"- Secondary: {brief.secondary_audience or 'None'}",
        "",
        "## Positioning",
        brief.positioning_statement,
        "",
        "## Messaging pillars",
    ]
    for pillar in brief.messaging_pillars:
        lines += [
            f"### {pillar.pillar}",
            f"- Do: {'; '.join(pillar.do)}",
            f"- Avoid: {'; '.join(pillar.avoid)}",
        ]

    tone = brief.tone_profile
    lines += [
        "",
        "## Tone",
        f"Calm {tone.calm}/10, upbeat {tone.upbeat}/10, formal {tone.formal}/10 ({', '.join(tone.tags)})",
        "",
        "## Channels",
        *_bullets(brief.channel_plan),
        "",
        "## Cadence",
        f"- Frequency: {brief.cadence_plan.frequency}",
        f"- Rationale: {brief.cadence_plan.rationale}",
        "",
        "## Content themes",
        *_bullets(brief.content_themes),
        "",
        "## Experiments",
        *_bullets(f"{e.id} {e.name} [{e.safety_class}]" for e in brief.experiment_plan),
        "",
        "## Required assets",
        *_bullets(f"{a.asset_type} (owner: {a.owner})" for a in brief.required_assets),
        "",
        "## Success signals",
        *_bullets(brief.success_signals),
        "",
        "## Compliance notes",
        f"- Visibility archive required: {'Yes' if brief.compliance_notes.requires_visibility_archive else 'No'}",
        f"- Approval workflow required: {'Yes' if brief.compliance_notes.requires_approval_workflow else 'No'}",
        *_bullets(brief.compliance_notes.claims_cautions),
        "",
        "## Constraints",
        *_bullets(brief.constraints),
    ]
    if brief.missing_info_questions:
        lines += ["", "## Open questions", *_bullets(brief.missing_info_questions)]
    return "\n".join(lines) + "\n"


def generate_export_filename(brief: CampaignBrief, extension: str) -> str:
    """e.g. 'program-launch-campaign-brief-v1.0.1.md'."""
    slug = re.sub(r"[^a-z0-9]+", "-", brief.title.lower()).strip("-") or "campaign-brief"
    return f"{slug}-v{brief.meta.brief_version}.{extension.lstrip('.')}"
