import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.schemas.strategy import IntakeParams
from northnode.services.intake_engine import analyze_intake
from northnode.services.strategy_recommendation import (
    PRINT_ASSET,
    PRINT_CHANNEL,
    build_recommendation,
    cadence_label,
    dedupe_channels,
)


def _recommend(text: str = "", **kwargs):
    analysis = analyze_intake(IntakeParams(intake_text=text))
    return build_recommendation(analysis, **kwargs)


def test_dedupe_channels_by_prefix():
    channels = ["Social organic", "Social organic posts", "Email (monthly)", "email (monthly)."]
    assert dedupe_channels(channels) == ["Social organic", "Email (monthly)"]


def test_default_recommendation_summary_and_risks():
    rec = _recommend()
    assert rec.primary_archetype == "trust-building"
    assert rec.summary == "Archetype: trust-building - general awareness"
    assert rec.risks == ["Audience unclear - review MIQ-01"]
    assert rec.channels == ["Social organic", "Email (monthly)"]
    assert rec.recommended_cadence.startswith("Weekly anchor - ")
    assert rec.missing_info_questions[0].startswith("Who is the primary audience")


def test_summary_uses_supplied_context():
    rec = _recommend("Launch a program for adults and families.", industry="Outpatient clinic", goals="Enrollment")
    assert rec.summary == "Outpatient clinic • Goals: Enrollment"


def test_flyer_adds_print_channel_and_asset():
    rec = _recommend("Referral flyer for physicians and care managers.")
    assert rec.primary_archetype == "referral-enablement"
    assert rec.channels == ["Provider email drip", "LinkedIn organic", PRINT_CHANNEL]
    assert rec.assets[-1] == PRINT_ASSET
    assert rec.recommended_cadence.startswith("Drip - ")


def test_approval_workflow_adds_next_step_and_risk():
    rec = _recommend("Launching a new service; every post requires approval.")
    assert "Map approval checkpoints before scheduling any content" in rec.next_steps
    assert rec.next_steps[-1].startswith("Run 2-week pilot")
    assert "Approval workflow required - schedule review gates before any publish date" in rec.risks
    assert "Confirm all program claims are qualified and do not imply clinical outcomes" in rec.risks


def test_cadence_labels():
    launch = analyze_intake(IntakeParams(intake_text="launch"))
    assert cadence_label(launch).startswith("Hybrid - Weekly during pre-launch")
    milestone = analyze_intake(IntakeParams(intake_text="annual report"))
    assert cadence_label(milestone) == (
        "Milestone-triggered - Event-triggered only; explicit approval gate required before each send"
    )


def test_experiment_summaries_mirror_analysis():
    rec = _recommend("community awareness")
    assert [e.id for e in rec.experiments] == [e.id for e in rec.analysis.experiments]
    assert "Avoid any framing that implies urgency or pressure to seek care" in rec.risks
