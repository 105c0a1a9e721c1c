"""
Drafting prompt generator.

Compiles 1-3 prompts from a CampaignBrief:
- A: 2-week content micro-sequence (always)
- B: provider referral enablement kit (referral-enablement primary or secondary)
- C: compliance visibility snapshot (brief requires a visibility archive)

Prompts leave the system, so unlike the brief sanitizer this module does not
degrade gracefully: a prohibited phrase in any compiled prompt raises
ProhibitedLanguageError and no prompts are returned.
"""

from __future__ import annotations

from typing import Iterable, Optional

from northnode.schemas.brief import CampaignBrief, DraftingPrompts

__all__ = ["PROHIBITED_PATTERNS", "ProhibitedLanguageError", "check_prohibited", "generate_drafting_prompts"]

PROHIBITED_PATTERNS = (
    "will cure",
    "will treat your",
    "clinically proven",
    "guarantees results",
    "proven to reduce",
    "medical treatment for",
)


class ProhibitedLanguageError(ValueError):
    """A compiled drafting prompt contains prohibited clinical language."""

    def __init__(self, label: str, phrase: str) -> None:
        self.label = label
        self.phrase = phrase
        super().__init__(
            f"Prohibited clinical language detected in drafting prompt {label}: {phrase}. "
            "Review brief fields before generating prompts."
        )


def check_prohibited(prompt: str, label: str) -> None:
    lower = prompt.lower()
    for pattern in PROHIBITED_PATTERNS:
        if pattern in lower:
            raise ProhibitedLanguageError(label, pattern)


def _audience(primary_audience: str) -> str:
    if primary_audience == "TBD":
        return "Audience not yet defined - treat as general community audience"
    return primary_audience


def _lines(items: Iterable[str], empty: str) -> str:
    rendered = [f"- {item}" for item in items]
    return "\n".join(rendered) if rendered else empty


def _prompt_a(brief: CampaignBrief, pillars: str) -> str:
    return f"""You are a behavioral health marketing strategist creating a charter-safe 2-week content micro-sequence.

Program: {brief.program_summary}
Primary Audience: {_audience(brief.primary_audience)}
Channels: {", ".join(brief.channel_plan)}
Cadence: {brief.cadence_plan.frequency}
Tone: {", ".join(brief.tone_profile.tags)}
Messaging Pillars: {pillars}
Content Themes:
{_lines(brief.content_themes, "- General awareness")}

Create a 2-week post calendar. For each post provide:
- Day and channel
- Post copy (under 280 characters for social; under 150 words for long-form)
- Visual prompt (describe image/graphic in one sentence)
- Pillar alignment

Hard rules:
- No clinical outcomes or cure language
- No urgency CTAs ("act now", "limited time")
- No patient stories or testimonials unless explicitly unlocked
- No advice statements ("you should", "you need to")
- All claims must be scoped to availability and access, not efficacy"""


def _prompt_b(brief: CampaignBrief, pillars: str, cautions: str) -> str:
    provider_audience = brief.secondary_audience or "Referring clinicians and care coordinators"
    return f"""You are a healthcare communications specialist building a provider-facing referral enablement kit.

Program: {brief.program_summary}
Provider Audience: {provider_audience}
Messaging Pillars: {pillars}
Compliance Notes:
{cautions}

Create a provider enablement kit containing:
1. One-paragraph program description (clinical-safe, no outcomes promised)
2. Referral criteria overview (access requirements, not diagnostic criteria)
3. Three FAQ answers a provider might ask (availability, intake process, urgency protocol)
4. One "how to refer" step-by-step (3-5 steps)
5. One co-branded talking points card (5 bullet points, plain language)

Hard rules:
- Do not state clinical efficacy, cure rates, or recovery outcomes
- Do not include patient stories
- All language must be appropriate for a clinical handoff context
- Frame around access and process, not results"""


def _prompt_c(brief: CampaignBrief, cautions: str) -> str:
    approval = "Yes" if brief.compliance_notes.requires_approval_workflow else "No"
    return f"""You are a compliance communications writer producing a visibility archive narrative.

Program: {brief.program_summary}
Channels Used: {", ".join(brief.channel_plan)}
Cadence: {brief.cadence_plan.frequency}
Claims Cautions:
{cautions}
Approval Workflow Required: {approval}

Write a compliance visibility snapshot narrative for internal records. Include:
1. Campaign purpose statement (1 paragraph, neutral)
2. Audience description (who will see this content and why)
3. Channel justification (why each channel was selected)
4. Claims inventory: list any health-adjacent claims and how each is scoped/qualified
5. Review pathway summary: describe the approval steps before publication
6. Archive statement: confirm content will be retained for [X] months per policy

Hard rules:
- Use plain, factual language - this is a compliance record, not marketing copy
- Do not add promotional framing
- If requiresApprovalWorkflow is true, explicitly name the required sign-off roles
- Flag any claims that require external clinical review"""


def generate_drafting_prompts(
    brief: CampaignBrief,
    primary_archetype: str,
    secondary_archetype: Optional[str] = None,
) -> DraftingPrompts:
    """
    Compile the drafting prompts for a brief.

    Raises:
        ProhibitedLanguageError: a compiled prompt contains a prohibited phrase.
            Prompts are checked in order A, B, C; the first hit is reported.
    """
    pillars = ", ".join(p.pillar for p in brief.messaging_pillars)
    cautions = _lines(brief.compliance_notes.claims_cautions, "- No additional cautions provided")

    prompt_a = _prompt_a(brief, pillars)
    prompt_b = (
        _prompt_b(brief, pillars, cautions)
        if "referral-enablement" in (primary_archetype, secondary_archetype)
        else None
    )
    prompt_c = _prompt_c(brief, cautions) if brief.compliance_notes.requires_visibility_archive else None

    check_prohibited(prompt_a, "A")
    if prompt_b is not None:
        check_prohibited(prompt_b, "B")
    if prompt_c is not None:
        check_prohibited(prompt_c, "C")

    return DraftingPrompts(prompt_a=prompt_a, prompt_b=prompt_b, prompt_c=prompt_c)
