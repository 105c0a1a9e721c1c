import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.schemas.strategy import IntakeParams
from northnode.services.intake_engine import (
    analyze_intake,
    build_stack,
    compute_confidence_score,
    grade_stakeholders_clarity,
    select_archetype,
)
from northnode.services.intake_library import (
    ARCHETYPE_STACKS,
    CADENCE_RULES,
    EXPERIMENT_LIBRARY,
    FORBIDDEN_EXPERIMENT_STRINGS,
    MAX_EXPERIMENTS,
    SIGNAL_PATTERNS,
)


def _analyze(text: str = "", **kwargs):
    return analyze_intake(IntakeParams(intake_text=text, **kwargs))


# -------------------------------
# Static library safety
# -------------------------------

def test_experiment_library_contains_no_urgency_or_story_content():
    for exp in EXPERIMENT_LIBRARY:
        blob = " ".join([exp.name, exp.hypothesis, exp.variant_a, exp.variant_b]).lower()
        for forbidden in FORBIDDEN_EXPERIMENT_STRINGS:
            assert forbidden not in blob, f"{exp.id} contains '{forbidden}'"


def test_experiment_library_is_format_framing_or_sequencing():
    assert {e.safety_class for e in EXPERIMENT_LIBRARY} <= {"format", "framing", "sequencing"}
    assert [e.id for e in EXPERIMENT_LIBRARY] == [f"EXP-{i:02d}" for i in range(1, 11)]


def test_every_archetype_has_a_cadence_rule():
    assert set(CADENCE_RULES) == set(ARCHETYPE_STACKS)
    for archetype, rule in CADENCE_RULES.items():
        assert rule.archetype == archetype


# -------------------------------
# Archetype decision tree
# -------------------------------

@pytest.mark.parametrize(
    "detected, expected",
    [
        ([], ("trust-building", None)),
        (["trust-building"], ("trust-building", None)),
        (["social", "email"], ("trust-building", None)),
        (["referral-enablement"], ("referral-enablement", None)),
        (["integration-of-care"], ("referral-enablement", None)),
        (["referral-enablement", "trust-building"], ("referral-enablement", "trust-building")),
        (["launch"], ("program-launch", None)),
        (["launch", "integration-of-care"], ("program-launch", "referral-enablement")),
        (["launch", "trust-building"], ("program-launch", "trust-building")),
        (["compliance-visibility"], ("compliance-visibility", None)),
        (["compliance-visibility", "launch", "referral-enablement"], ("compliance-visibility", "program-launch")),
        (["compliance-visibility", "referral-enablement"], ("compliance-visibility", "referral-enablement")),
        (["compliance-visibility", "trust-building"], ("compliance-visibility", "trust-building")),
        (["compliance"], ("trust-building", None)),
    ],
)
def test_select_archetype(detected, expected):
    assert select_archetype(detected) == expected


def test_build_stack_appends_secondary_addon():
    assert build_stack("trust-building") == list(ARCHETYPE_STACKS["trust-building"])
    stack = build_stack("program-launch", "referral-enablement")
    assert stack[:-1] == list(ARCHETYPE_STACKS["program-launch"])
    assert stack[-1] == "Provider enablement one-pager (secondary)"


# -------------------------------
# Clarity and confidence
# -------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "low"),
        ("a campaign for veterans", "medium"),
        ("for caregivers and youth", "high"),
        ("for caregivers, youth and the general public", "low"),
        ("reach everyone", "low"),
    ],
)
def test_grade_stakeholders_clarity(text, expected):
    assert grade_stakeholders_clarity(text) == expected


def test_confidence_score_weights():
    assert compute_confidence_score([], "high") == 50
    assert compute_confidence_score(["launch"], "high") == 60
    assert compute_confidence_score(["launch", "social"], "medium") == 60
    assert compute_confidence_score(["trust-building"], "low") == 40


def test_confidence_score_is_bounded():
    many = ["launch", "referral-enablement", "compliance"] * 10
    assert compute_confidence_score(many, "high") == 100
    assert 0 <= compute_confidence_score([], "low") <= 100


def test_more_strong_signals_never_lower_confidence():
    base = _analyze("We are launching a new program for caregivers and youth.")
    more = _analyze("We are launching a new program with referrals for caregivers and youth.")
    assert more.confidence_score >= base.confidence_score


# -------------------------------
# analyze_intake
# -------------------------------

def test_empty_intake_defaults_to_trust_building():
    result = _analyze()
    assert result.primary_archetype == "trust-building"
    assert result.secondary_archetype is None
    assert result.detected_signal_keys == []
    assert result.stakeholders_clarity_level == "low"
    assert result.confidence_score == 40
    assert [q.id for q in result.missing_info_questions] == ["MIQ-01"]
    assert result.evidence == {}
    assert [s.key for s in result.signals] == list(SIGNAL_PATTERNS)


def test_launch_intake():
    result = _analyze("We are launching a new program for adults in the spring.")
    assert result.detected_signal_keys == ["launch"]
    assert result.primary_archetype == "program-launch"
    assert result.cadence_rule.pattern == "hybrid"
    assert result.evidence == {"launch": ["launch", "launching", "new program"]}
    assert result.stakeholders_clarity_level == "high"
    assert result.confidence_score == 60
    assert all("program-launch" in e.applicable_archetypes for e in result.experiments)
    assert len(result.experiments) <= MAX_EXPERIMENTS
    assert result.stack == list(ARCHETYPE_STACKS["program-launch"])
    assert result.suggested_goals[0] == "Announce the program launch"


def test_compliance_visibility_with_launch_secondary():
    result = _analyze("Launch our annual report for the board.")
    assert result.primary_archetype == "compliance-visibility"
    assert result.secondary_archetype == "program-launch"
    assert result.cadence_rule.pattern == "milestone-triggered"
    assert result.requires_visibility_archive is True
    assert result.stack[-1] == "Launch announcement template (secondary)"


def test_integration_of_care_routes_to_referral_enablement():
    result = _analyze("Integrated care with primary care practices.")
    assert "integration-of-care" in result.detected_signal_keys
    assert result.primary_archetype == "referral-enablement"
    assert result.cadence_rule.pattern == "drip"


def test_compliance_flags_are_independent():
    approval_only = _analyze("Social posts need sign-off from legal.")
    assert approval_only.requires_approval_workflow is True
    assert approval_only.requires_visibility_archive is False

    archive_only = _analyze("HIPAA compliance audit for our clinic.")
    assert archive_only.requires_visibility_archive is True
    assert archive_only.requires_approval_workflow is False

    neither = _analyze("community awareness campaign about mental health support")
    assert neither.requires_visibility_archive is False
    assert neither.requires_approval_workflow is False

    both = _analyze("We need to demonstrate compliance for our annual report; approval required before any send.")
    assert both.requires_visibility_archive is True
    assert both.requires_approval_workflow is True


def test_all_fields_are_combined_for_detection():
    result = _analyze("", ideas_text="newsletter", industry="", audience="physicians", goals="")
    assert "email" in result.detected_signal_keys
    assert "referral-enablement" in result.detected_signal_keys


def test_low_clarity_appends_audience_question():
    result = _analyze("Reach everyone with our providers newsletter.")
    assert result.stakeholders_clarity_level == "low"
    assert [q.id for q in result.missing_info_questions] == ["MIQ-04", "MIQ-01"]


def test_experiments_are_capped():
    result = _analyze("Launch a new program with community awareness events.")
    assert result.secondary_archetype == "trust-building"
    assert len(result.experiments) == MAX_EXPERIMENTS


def test_analysis_is_deterministic():
    params = IntakeParams(
        intake_text="Launching integrated care with referrals; posts need sign-off.",
        ideas_text="newsletter and flyer",
        audience="providers and families",
    )
    assert analyze_intake(params) == analyze_intake(params)


# -------------------------------
# Planner prompt
# -------------------------------

def test_planner_prompt_structure():
    prompt = _analyze("We are launching a new program for adults.", ideas_text="maybe a podcast").planner_prompt
    assert prompt.startswith("You are a marketing strategy lead for a behavioral health organization.")
    assert "=== MANDATORY CONSTRAINTS (non-negotiable) ===" in prompt
    assert "CLAIMS NOTE" in prompt
    assert "APPROVAL WORKFLOW NOTE" not in prompt
    assert "Campaign archetype: PROGRAM-LAUNCH" in prompt
    assert "Rough ideas / additional context:\nmaybe a podcast" in prompt
    assert prompt.index("=== ORGANIZATION CONTEXT ===") < prompt.index("=== ENGINE OUTPUT ===") < prompt.index(
        "=== DELIVERABLES (in order) ==="
    )


def test_planner_prompt_lists_gaps_and_experiments():
    result = _analyze()
    prompt = result.planner_prompt
    assert "Primary audience: Unspecified - see intake gaps below" in prompt
    assert "No primary intake text provided." in prompt
    assert "  - [MIQ-01]" in prompt
    assert "CLAIMS NOTE" not in prompt
    for exp in result.experiments:
        assert f"  {exp.id} - {exp.name} [{exp.safety_class}]" in prompt


def test_planner_prompt_includes_approval_note():
    prompt = _analyze("All content must be approved; review required.").planner_prompt
    assert "APPROVAL WORKFLOW NOTE" in prompt
