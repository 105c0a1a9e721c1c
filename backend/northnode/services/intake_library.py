"""
Static reference data for the strategy intake engine.

Signal vocabularies, cadence rules, the charter-safe experiment library, the
missing-info question bank and per-archetype stacks/suggestions. Everything
here is immutable and loaded once at import time; intake_engine only reads it.

Every experiment is format-, framing- or sequencing-based. No entry may
contain urgency CTAs or patient/client story content (see
FORBIDDEN_EXPERIMENT_STRINGS; enforced by tests over the data itself).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from northnode.schemas.strategy import CadenceRule, Experiment, MissingInfoQuestion

__all__ = [
    "SIGNAL_PATTERNS",
    "AUDIENCE_TERMS",
    "VAGUE_AUDIENCE_TERMS",
    "STRONG_SIGNALS",
    "SUPPORTING_SIGNALS",
    "CLAIMS_TRIGGER_SIGNALS",
    "APPROVAL_GATE_TERMS",
    "CADENCE_RULES",
    "EXPERIMENT_LIBRARY",
    "MAX_EXPERIMENTS",
    "MISSING_INFO_QUESTIONS",
    "AUDIENCE_QUESTION_ID",
    "ARCHETYPE_STACKS",
    "SECONDARY_STACK_ADDONS",
    "ARCHETYPE_SUGGESTIONS",
    "URGENCY_FORBIDDEN_STRINGS",
    "STORY_FORBIDDEN_STRINGS",
    "FORBIDDEN_EXPERIMENT_STRINGS",
]


# -------------------------------
# Signal vocabularies
# -------------------------------

# Dict order is the signal order reported in IntakeAnalysis.signals.
SIGNAL_PATTERNS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "launch": (
        "launch", "launching", "new program", "rollout", "opening",
        "announcing", "announce", "debut", "introducing", "new service",
        "go live", "going live", "open enrollment", "start date",
    ),
    "compliance": (
        "compliance", "compliant", "state approval", "regulation", "regulatory",
        "review required", "approval", "hipaa", "hitech", "carf", "jcaho",
        "joint commission", "accreditation", "audit", "licensed", "licensure",
        "certification", "dhhs", "state-licensed", "medicaid", "medicare",
    ),
    "social": (
        "social", "social media", "instagram", "facebook", "linkedin",
        "tiktok", "twitter", "post", "posts", "organic", "feed", "stories",
    ),
    "email": (
        "email", "e-mail", "newsletter", "drip", "nurture", "subscriber",
        "mailing list", "mailchimp", "constant contact", "inbox", "sequence",
        "email campaign",
    ),
    "flyer": (
        "flyer", "flyers", "print", "handout", "brochure", "poster",
        "one-pager", "pamphlet", "rack card", "tear-off", "physical distribution",
    ),
    "integration-of-care": (
        "integration", "integrated care", "co-located", "collocated",
        "primary care", "pcp", "bh integration", "behavioral health integration",
        "warm handoff", "care coordination", "embedded", "co-management",
        "care team", "collaborative care",
    ),
    "referral-enablement": (
        "referral", "referrals", "referrers", "referring", "provider partner",
        "partner providers", "b2b", "physician", "physicians", "prescriber",
        "outpatient referral", "inpatient referral", "care manager",
        "case manager", "ed referral", "hospital referral",
    ),
    "trust-building": (
        "awareness", "stigma", "destigma", "community", "education",
        "outreach", "inform", "visibility", "brand awareness",
        "thought leadership", "credibility", "public facing", "community trust",
    ),
    "compliance-visibility": (
        "demonstrate compliance", "show compliance", "annual report",
        "transparency report", "compliance report", "stakeholder report",
        "board report", "funder report", "accreditation report",
        "performance dashboard",
    ),
})

# Naming any of these counts towards audience clarity.
AUDIENCE_TERMS: Tuple[str, ...] = (
    "provider", "physician", "pcp", "referrer", "family", "families",
    "adult", "adults", "client", "clients",
    "patient", "patients", "community member", "community members",
    "partner", "employer", "employee", "teenager", "adolescent", "youth",
    "caregiver", "peer", "justice-involved", "veteran", "parent",
)

VAGUE_AUDIENCE_TERMS: Tuple[str, ...] = (
    "everyone", "anybody", "general public", "all people", "everybody",
    "anyone who", "the public",
)

STRONG_SIGNALS: Tuple[str, ...] = ("launch", "referral-enablement", "compliance")
SUPPORTING_SIGNALS: Tuple[str, ...] = ("social", "email", "flyer")

# Signals that make health-adjacent claims likely.
CLAIMS_TRIGGER_SIGNALS: Tuple[str, ...] = (
    "launch", "compliance", "referral-enablement", "integration-of-care",
)

APPROVAL_GATE_TERMS: Tuple[str, ...] = (
    "approval required",
    "review required",
    "sign-off",
    "must be approved",
    "requires approval",
    "needs approval",
    "awaiting approval",
)


# -------------------------------
# Cadence rules (one per archetype)
# -------------------------------

CADENCE_RULES: Mapping[str, CadenceRule] = MappingProxyType({
    "program-launch": CadenceRule(
        archetype="program-launch",
        pattern="hybrid",
        description=(
            "Pre-launch awareness (weeks -2 to -1) -> launch-week anchor (daily social, 1 email) "
            "-> post-launch drip (3x/week social, weekly email for 4-6 weeks)"
        ),
        rationale=(
            "Launch windows are time-bounded. Front-loading awareness avoids urgency pressure on "
            "the audience; post-launch drip sustains reach while giving people space to engage on "
            "their own terms."
        ),
        email_frequency="Weekly during pre-launch; 2x during launch week; weekly for 4-6 weeks post-launch",
        social_frequency="3x/week pre-launch; daily launch week (max 7 days); 3x/week post-launch",
    ),
    "trust-building": CadenceRule(
        archetype="trust-building",
        pattern="weekly-anchor",
        description=(
            "Consistent weekly anchor post + 2 supporting posts; monthly email touchpoint; "
            "no campaign spikes or saturation windows"
        ),
        rationale=(
            "Irregular bursts in stigma-adjacent or community-trust work feel transactional and "
            "institutional. Consistent low-volume presence signals long-term commitment and allows "
            "audiences to engage at their own pace."
        ),
        email_frequency="Monthly or bimonthly; never more than 2x per month",
        social_frequency="3x/week steady-state; no more than one topic cluster per week",
    ),
    "compliance-visibility": CadenceRule(
        archetype="compliance-visibility",
        pattern="milestone-triggered",
        description=(
            "Milestone-gated communications tied to specific events (accreditation renewal, "
            "annual report, board review) rather than continuous drip"
        ),
        rationale=(
            "Compliance communications require approval before each send. Drip cadences create "
            "review bottlenecks and approval fatigue. Milestone-triggered batches consolidate "
            "review cycles into predictable windows."
        ),
        email_frequency="Event-triggered only; explicit approval gate required before each send",
        social_frequency="Event-triggered; 1-3 posts per milestone; no automated scheduling",
    ),
    "referral-enablement": CadenceRule(
        archetype="referral-enablement",
        pattern="drip",
        description=(
            "Educational drip series (5-7 touches over 6-8 weeks) for provider audiences; begins "
            "with one-pager introduction, followed by clinical context emails"
        ),
        rationale=(
            "Providers need repeated exposure to build referral confidence. Drip format respects "
            "their inbox and allows them to review clinical information between interactions "
            "without pressure to act immediately."
        ),
        email_frequency="Biweekly for 6-8 weeks; then quarterly re-engagement touchpoint",
        social_frequency="LinkedIn-first; 2x/week; clinical education framing only",
    ),
})


# -------------------------------
# Charter-safe experiment library
# -------------------------------

MAX_EXPERIMENTS = 5

EXPERIMENT_LIBRARY: Tuple[Experiment, ...] = (
    Experiment(
        id="EXP-01",
        name="Subject line: question vs. statement",
        hypothesis=(
            "Question-format subject lines increase open rates by activating curiosity "
            "without urgency pressure"
        ),
        variant_a='Statement: "Our IOP program now accepts [insurance]"',
        variant_b='Question: "Does your insurance cover intensive outpatient?"',
        safety_class="framing",
        applicable_archetypes=["program-launch", "referral-enablement"],
    ),
    Experiment(
        id="EXP-02",
        name="Email send timing: Tuesday AM vs. Thursday PM",
        hypothesis=(
            "Provider-audience emails perform differently by day/time; BH audiences may prefer "
            "end-of-week sends when workload is lower"
        ),
        variant_a="Tuesday 9-10 AM local",
        variant_b="Thursday 3-4 PM local",
        safety_class="sequencing",
        applicable_archetypes=["referral-enablement", "trust-building", "program-launch"],
    ),
    Experiment(
        id="EXP-03",
        name='CTA phrasing: "explore" vs. "learn more"',
        hypothesis=(
            '"Explore" is lower-commitment and more congruent with trauma-informed language '
            "than directive action verbs"
        ),
        variant_a='"Learn more about the program"',
        variant_b='"Explore how the program works"',
        safety_class="framing",
        applicable_archetypes=["program-launch", "trust-building", "referral-enablement"],
    ),
    Experiment(
        id="EXP-04",
        name="Content sequence: services-first vs. values-first",
        hypothesis=(
            "Leading with organizational values before clinical services improves trust signals "
            "for stigma-adjacent audiences"
        ),
        variant_a="Email 1 = services overview; Email 2 = approach/values",
        variant_b="Email 1 = approach/values; Email 2 = services overview",
        safety_class="sequencing",
        applicable_archetypes=["trust-building", "program-launch"],
    ),
    Experiment(
        id="EXP-05",
        name="Flyer layout: visual-anchor vs. text-anchor",
        hypothesis=(
            "For provider-facing print, information-dense text layouts outperform consumer-style "
            "visual layouts"
        ),
        variant_a="Visual-anchor (large image, minimal supporting text)",
        variant_b="Text-anchor (bullet-point clinical criteria, smaller supporting image)",
        safety_class="format",
        applicable_archetypes=["referral-enablement", "program-launch"],
    ),
    Experiment(
        id="EXP-06",
        name="Email length: short vs. medium",
        hypothesis=(
            "Short emails (<=150 words) reduce cognitive load for clinical audiences; medium "
            "length (<=300 words) may be needed for complex program descriptions"
        ),
        variant_a="Short (<=150 words, single topic per email)",
        variant_b="Medium (<=300 words, 2-3 supporting points per email)",
        safety_class="format",
        applicable_archetypes=["referral-enablement", "trust-building", "program-launch"],
    ),
    Experiment(
        id="EXP-07",
        name="Referral tool format: one-pager vs. checklist",
        hypothesis=(
            "Checklists reduce provider decision friction for referrals compared to narrative "
            "one-pagers"
        ),
        variant_a="Narrative one-pager (program description + contact, 1 page)",
        variant_b="Referral checklist (eligibility criteria + step-by-step process, 1 page)",
        safety_class="format",
        applicable_archetypes=["referral-enablement"],
    ),
    Experiment(
        id="EXP-08",
        name="Newsletter cadence: weekly vs. biweekly",
        hypothesis=(
            "Biweekly cadence reduces unsubscribe rates in trust-building phases without "
            "meaningful engagement loss"
        ),
        variant_a="Weekly newsletter (same day each week)",
        variant_b="Biweekly newsletter (alternating weeks)",
        safety_class="sequencing",
        applicable_archetypes=["trust-building"],
    ),
    Experiment(
        id="EXP-09",
        name="Social post format: plain text vs. branded card",
        hypothesis=(
            "Plain-text posts on LinkedIn signal authenticity and generate higher engagement for "
            "behavioral health topics"
        ),
        variant_a="Branded image card with caption",
        variant_b="Plain text post (no image, LinkedIn native format)",
        safety_class="format",
        applicable_archetypes=["trust-building", "referral-enablement"],
    ),
    Experiment(
        id="EXP-10",
        name="Header framing: program name vs. benefit statement",
        hypothesis=(
            "Benefit-statement headers outperform program-name headers for audiences unfamiliar "
            "with the program"
        ),
        variant_a="Program name as primary header (e.g., 'NorthNode IOP')",
        variant_b=(
            "Benefit statement as primary header, program name secondary "
            "(e.g., 'Specialized care for co-occurring conditions')"
        ),
        safety_class="framing",
        applicable_archetypes=["program-launch", "trust-building"],
    ),
)

URGENCY_FORBIDDEN_STRINGS: Tuple[str, ...] = (
    "call now",
    "book now",
    "book assessment",
    "act now",
    "limited spots",
    "don't wait",
    "dont wait",
    "schedule now",
)
STORY_FORBIDDEN_STRINGS: Tuple[str, ...] = ("patient story", "client story")
FORBIDDEN_EXPERIMENT_STRINGS: Tuple[str, ...] = URGENCY_FORBIDDEN_STRINGS + STORY_FORBIDDEN_STRINGS


# -------------------------------
# Missing-info question bank
# -------------------------------

# "stakeholders-unclear" is never emitted as a signal; the audience question
# is force-included when audience clarity grades low.
AUDIENCE_QUESTION_ID = "MIQ-01"

MISSING_INFO_QUESTIONS: Tuple[MissingInfoQuestion, ...] = (
    MissingInfoQuestion(
        id="MIQ-01",
        question=(
            "Who is the primary audience for this campaign (e.g., individuals seeking care, "
            "family members, referring providers, community partners)?"
        ),
        triggered_by=["stakeholders-unclear"],
        impacts_archetype=True,
        impacts_cadence=True,
        placeholder="Describe the primary audience in specific terms",
    ),
    MissingInfoQuestion(
        id="MIQ-02",
        question=(
            "What geography or service region does this campaign cover (local community, "
            "county-wide, statewide, multi-state)?"
        ),
        triggered_by=["compliance", "flyer", "launch"],
        impacts_archetype=False,
        impacts_cadence=False,
        placeholder="e.g., Greater Boston metro; statewide NH; 3 counties",
    ),
    MissingInfoQuestion(
        id="MIQ-03",
        question=(
            "Is there a required clinical, legal, or state compliance review process before "
            "content is published, and what is the typical turnaround?"
        ),
        triggered_by=["compliance"],
        impacts_archetype=False,
        impacts_cadence=True,
        placeholder="Describe the review process and typical turnaround time",
    ),
    MissingInfoQuestion(
        id="MIQ-04",
        question=(
            "Which communication channels are currently active and in use by the organization "
            "(email list size, social platforms, print distribution points)?"
        ),
        triggered_by=["social", "email", "flyer"],
        impacts_archetype=False,
        impacts_cadence=True,
        placeholder="e.g., Email list ~500 subscribers; Instagram 800 followers; no current print",
    ),
    MissingInfoQuestion(
        id="MIQ-05",
        question=(
            "Is there a specific launch date, program milestone, or external deadline this "
            "campaign must align with or precede?"
        ),
        triggered_by=["launch", "compliance-visibility"],
        impacts_archetype=True,
        impacts_cadence=True,
        placeholder="e.g., Program opens March 1; accreditation survey April 15",
    ),
    MissingInfoQuestion(
        id="MIQ-06",
        question=(
            "Are there existing referral partnerships or care coordination relationships this "
            "campaign should support, introduce, or avoid overlapping with?"
        ),
        triggered_by=["referral-enablement", "integration-of-care"],
        impacts_archetype=True,
        impacts_cadence=False,
        placeholder="e.g., 12 PCPs in our network; new hospital partnership launching Q2",
    ),
    MissingInfoQuestion(
        id="MIQ-07",
        question=(
            "Has the organization received explicit, documented consent to use any client or "
            "patient perspectives (testimonials, stories, photography) in communications?"
        ),
        triggered_by=["trust-building", "compliance"],
        impacts_archetype=False,
        impacts_cadence=False,
        placeholder="Yes / No. If yes, describe the consent process and formats available.",
    ),
    MissingInfoQuestion(
        id="MIQ-08",
        question=(
            "Who are the internal stakeholders with approval authority over campaign content, "
            "and what is their typical review timeline?"
        ),
        triggered_by=["stakeholders-unclear", "compliance", "compliance-visibility"],
        impacts_archetype=False,
        impacts_cadence=True,
        placeholder="e.g., Clinical Director + Compliance Officer; 5 business days",
    ),
    MissingInfoQuestion(
        id="MIQ-09",
        question=(
            "What is the primary campaign objective: increasing community awareness, supporting "
            "program enrollment inquiry, or generating provider referrals?"
        ),
        triggered_by=["stakeholders-unclear", "trust-building", "launch", "referral-enablement"],
        impacts_archetype=True,
        impacts_cadence=True,
        placeholder="Select or describe the primary objective",
    ),
    MissingInfoQuestion(
        id="MIQ-10",
        question=(
            "Are there other organizational communications or campaigns scheduled in the same "
            "window that this campaign must coordinate with or avoid?"
        ),
        triggered_by=["launch", "compliance-visibility"],
        impacts_archetype=False,
        impacts_cadence=True,
        placeholder="e.g., Annual appeal letter in October; board meeting in Q1; another program launch",
    ),
)


# -------------------------------
# Stacks and suggestions
# -------------------------------

ARCHETYPE_STACKS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "program-launch": (
        "Pre-launch micro-sequence (2 weeks)",
        "Launch-week anchor content",
        "Post-launch 4-week drip",
        "Approval checkpoint template",
    ),
    "referral-enablement": (
        "Provider enablement drip (5-7 touches)",
        "Referral one-pager",
        "LinkedIn post series",
    ),
    "trust-building": (
        "Weekly anchor post series",
        "Monthly newsletter",
        "Educational content clusters",
    ),
    "compliance-visibility": (
        "Milestone communication templates",
        "Documentation/archive snapshot",
        "Stakeholder one-pager",
    ),
})

SECONDARY_STACK_ADDONS: Mapping[str, str] = MappingProxyType({
    "referral-enablement": "Provider enablement one-pager (secondary)",
    "trust-building": "Community awareness post series (secondary)",
    "compliance-visibility": "Compliance milestone note (secondary)",
    "program-launch": "Launch announcement template (secondary)",
})

# archetype -> (suggested audience, suggested goals, suggested cadence)
ARCHETYPE_SUGGESTIONS: Mapping[str, Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]] = MappingProxyType({
    "trust-building": (
        ("Patients", "Families", "Community members"),
        ("Build awareness of services", "Reduce stigma", "Explain whole-person care"),
        ("3x/week social + monthly email", "2x/week social + biweekly email"),
    ),
    "program-launch": (
        ("Patients", "Families", "Community partners"),
        ("Announce the program launch", "Explain how to get started", "Drive early inquiries"),
        ("Daily social during launch week + weekly email", "3x/week social + 1 email/week"),
    ),
    "referral-enablement": (
        ("Clinicians", "Care coordinators", "Referral partners"),
        ("Educate providers on referral process", "Increase qualified referrals", "Build clinical trust"),
        ("Biweekly email drip + 2x/week LinkedIn", "Monthly provider update + 2x/week LinkedIn"),
    ),
    "compliance-visibility": (
        ("Board members", "Compliance stakeholders", "Funder partners"),
        ("Document compliance milestones", "Provide visibility into approvals", "Share audit-ready updates"),
        ("Milestone-triggered updates only", "Quarterly summary + milestone posts"),
    ),
})
