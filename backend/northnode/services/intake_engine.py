"""
Strategy intake engine.

Deterministic heuristics that turn free-text campaign intake into an
IntakeAnalysis: detected signals with evidence, an audience-clarity grade, a
confidence score, primary/secondary archetypes, the cadence rule, charter-safe
experiments, missing-info questions, two independent compliance flags, a
deliverable stack and a compiled planner prompt.

No randomness, no clock, no I/O: the same IntakeParams always produce the
same IntakeAnalysis.

Archetype decision tree (first match wins):
    T1  compliance-visibility  explicit stakeholder/funder reporting need
    T2  program-launch         time-bounded activation need
    T3  referral-enablement    provider/B2B education (incl. integration-of-care)
    T4  trust-building         default; community awareness / stigma reduction
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from northnode.schemas.strategy import (
    IntakeAnalysis,
    IntakeParams,
    MissingInfoQuestion,
    Signal,
)
from northnode.services.intake_library import (
    APPROVAL_GATE_TERMS,
    ARCHETYPE_STACKS,
    ARCHETYPE_SUGGESTIONS,
    AUDIENCE_QUESTION_ID,
    AUDIENCE_TERMS,
    CADENCE_RULES,
    CLAIMS_TRIGGER_SIGNALS,
    EXPERIMENT_LIBRARY,
    MAX_EXPERIMENTS,
    MISSING_INFO_QUESTIONS,
    SECONDARY_STACK_ADDONS,
    SIGNAL_PATTERNS,
    STRONG_SIGNALS,
    SUPPORTING_SIGNALS,
    VAGUE_AUDIENCE_TERMS,
)

__all__ = [
    "detect_signals",
    "grade_stakeholders_clarity",
    "compute_confidence_score",
    "select_archetype",
    "build_stack",
    "build_planner_prompt",
    "analyze_intake",
]


# -------------------------------
# Signals and grading
# -------------------------------

def detect_signals(text: str) -> List[Signal]:
    """Substring-match each signal vocabulary against already-lowercased text."""
    signals = []
    for key, terms in SIGNAL_PATTERNS.items():
        matched = [t for t in terms if t in text]
        signals.append(Signal(key=key, detected=bool(matched), matched_terms=matched))
    return signals


def grade_stakeholders_clarity(text: str) -> str:
    """Any vague audience phrase -> low; else 2+ named audiences -> high, 1 -> medium, 0 -> low."""
    if any(t in text for t in VAGUE_AUDIENCE_TERMS):
        return "low"
    matches = sum(1 for t in AUDIENCE_TERMS if t in text)
    if matches >= 2:
        return "high"
    if matches == 1:
        return "medium"
    return "low"


def compute_confidence_score(detected: Sequence[str], clarity: str) -> int:
    score = 50
    for key in detected:
        if key in STRONG_SIGNALS:
            score += 10
        elif key in SUPPORTING_SIGNALS:
            score += 5
    if clarity == "low":
        score -= 10
    elif clarity == "medium":
        score -= 5
    return max(0, min(100, score))


# -------------------------------
# Archetype decision tree
# -------------------------------

def select_archetype(detected: Sequence[str]) -> Tuple[str, Optional[str]]:
    """Return (primary, secondary) archetypes for the detected signal keys."""
    has = set(detected).__contains__
    referral = has("referral-enablement") or has("integration-of-care")

    # T1
    if has("compliance-visibility"):
        if has("launch"):
            return "compliance-visibility", "program-launch"
        if referral:
            return "compliance-visibility", "referral-enablement"
        if has("trust-building"):
            return "compliance-visibility", "trust-building"
        return "compliance-visibility", None

    # T2
    if has("launch"):
        if referral:
            return "program-launch", "referral-enablement"
        if has("trust-building"):
            return "program-launch", "trust-building"
        return "program-launch", None

    # T3
    if referral:
        return "referral-enablement", ("trust-building" if has("trust-building") else None)

    # T4
    return "trust-building", None


def build_stack(primary: str, secondary: Optional[str] = None) -> List[str]:
    stack = list(ARCHETYPE_STACKS[primary])
    if secondary and secondary in SECONDARY_STACK_ADDONS:
        stack.append(SECONDARY_STACK_ADDONS[secondary])
    return stack


def _select_questions(detected: Sequence[str], clarity: str) -> List[MissingInfoQuestion]:
    detected_set = set(detected)
    questions = [q for q in MISSING_INFO_QUESTIONS if detected_set.intersection(q.triggered_by)]
    if clarity == "low" and not any(q.id == AUDIENCE_QUESTION_ID for q in questions):
        questions.extend(q for q in MISSING_INFO_QUESTIONS if q.id == AUDIENCE_QUESTION_ID)
    return questions


# -------------------------------
# Planner prompt
# -------------------------------

_SECTION = "=== {} ==="


def build_planner_prompt(params: IntakeParams, analysis: Dict) -> str:
    """
    Compile the governed planner prompt.

    `analysis` holds every IntakeAnalysis field except planner_prompt. Section
    order is fixed: constraints, optional approval/claims notes, organization
    context, engine output, intake notes, unresolved gaps, deliverables, format.
    """
    detected = analysis["detected_signal_keys"]
    cadence = analysis["cadence_rule"]

    archetype_label = analysis["primary_archetype"].upper()
    if analysis["secondary_archetype"]:
        archetype_label += f" + {analysis['secondary_archetype'].upper()} (secondary layer)"

    lines: List[str] = [
        "You are a marketing strategy lead for a behavioral health organization.",
        "Build a campaign plan from the intake notes below.",
        "",
        _SECTION.format("MANDATORY CONSTRAINTS (non-negotiable)"),
        "- Tone: calm, trauma-informed, non-urgent throughout all deliverables",
        "- No clinical advice, outcome promises, or recovery guarantees of any kind",
        "- No urgency or scarcity language ('act now', 'limited spots', 'don't wait')",
        "- No conversion pressure: audiences decide if and when to engage",
        "- Do not include patient or client stories unless documented consent is confirmed in the intake",
        "- All proposed experiments must be format-, framing-, or sequencing-based only",
        "- Do not propose experiments that involve patient narratives, clinical claims, or urgency framing",
    ]
    if analysis["requires_approval_workflow"] or analysis["requires_visibility_archive"]:
        lines.append(
            "APPROVAL WORKFLOW NOTE: Compliance or state-review signals were detected. Every "
            "deliverable section must include an explicit approval checkpoint. No content may be "
            "marked ready-to-publish without documented sign-off."
        )
    if any(key in detected for key in CLAIMS_TRIGGER_SIGNALS):
        lines.append("CLAIMS NOTE: Confirm all program claims are qualified and do not imply clinical outcomes.")

    lines += [
        "",
        _SECTION.format("ORGANIZATION CONTEXT"),
        f"Organization type: {params.industry or 'Behavioral health provider'}",
        f"Primary audience: {params.audience or 'Unspecified - see intake gaps below'}",
        f"Campaign goals: {params.goals or 'Unspecified - see intake gaps below'}",
        "",
        _SECTION.format("ENGINE OUTPUT"),
        f"Campaign archetype: {archetype_label}",
        f"Cadence pattern: {cadence.pattern.upper()} - {cadence.description}",
        f"Email frequency: {cadence.email_frequency}",
        f"Social frequency: {cadence.social_frequency}",
        f"Cadence rationale: {cadence.rationale}",
        "",
        _SECTION.format("INTAKE NOTES"),
        params.intake_text or "No primary intake text provided.",
    ]
    if params.ideas_text:
        lines += ["", f"Rough ideas / additional context:\n{params.ideas_text}"]

    questions = analysis["missing_info_questions"]
    if questions:
        lines.append("")
        lines.append("UNRESOLVED INTAKE GAPS (treat as open assumptions; surface in plan):")
        lines += [f"  - [{q.id}] {q.question}" for q in questions]

    lines += [
        "",
        _SECTION.format("DELIVERABLES (in order)"),
        "1. Campaign brief - 2-3 sentences: what, for whom, and why this moment. No outcome claims.",
        "2. Messaging pillars - 3-4 themes. Each must be trauma-informed and non-prescriptive.",
        "3. Channel and cadence plan - use the cadence pattern above as the baseline; justify any deviations.",
        "4. Content calendar outline - 4-6 weeks; show themes and post types, not final copy.",
        "5. Recommended A/B experiments - select only from this pre-approved library:",
    ]
    lines += [f"  {e.id} - {e.name} [{e.safety_class}]" for e in analysis["experiments"]]
    lines += [
        "6. Required assets list - include suggested owners (internal vs. vendor) for each.",
        "7. Approval checkpoints - mark every step where review is required before proceeding.",
        "8. Three open questions - surface assumptions that would materially change this plan if answered differently.",
        "",
        "FORMAT: Use section headers. Write in prose, not bullet lists within sections.",
        "Do not use urgency language. Do not make outcome claims. Honor all constraints above.",
    ]
    return "\n".join(lines).strip()


# -------------------------------
# Entry point
# -------------------------------

def analyze_intake(params: IntakeParams) -> IntakeAnalysis:
    """Analyze campaign intake text. Pure and deterministic."""
    combined = "\n".join(
        [params.intake_text, params.ideas_text, params.industry, params.audience, params.goals]
    ).strip().lower()

    signals = detect_signals(combined)
    detected = [s.key for s in signals if s.detected]
    clarity = grade_stakeholders_clarity(combined)
    primary, secondary = select_archetype(detected)

    in_play = {primary} | ({secondary} if secondary else set())
    experiments = [e for e in EXPERIMENT_LIBRARY if in_play.intersection(e.applicable_archetypes)]
    suggested_audience, suggested_goals, suggested_cadence = ARCHETYPE_SUGGESTIONS[primary]

    fields = dict(
        signals=signals,
        detected_signal_keys=detected,
        primary_archetype=primary,
        secondary_archetype=secondary,
        cadence_rule=CADENCE_RULES[primary],
        experiments=experiments[:MAX_EXPERIMENTS],
        missing_info_questions=_select_questions(detected, clarity),
        requires_visibility_archive="compliance" in detected or "compliance-visibility" in detected,
        requires_approval_workflow=any(t in combined for t in APPROVAL_GATE_TERMS),
        confidence_score=compute_confidence_score(detected, clarity),
        evidence={s.key: list(s.matched_terms) for s in signals if s.detected},
        stakeholders_clarity_level=clarity,
        stack=build_stack(primary, secondary),
        suggested_audience=list(suggested_audience),
        suggested_goals=list(suggested_goals),
        suggested_cadence=list(suggested_cadence),
    )
    return IntakeAnalysis(planner_prompt=build_planner_prompt(params, fields), **fields)
