import json
import os
import sys
from datetime import datetime, timezone

import pytest

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.schemas.brief import BriefGenerationInput
from northnode.schemas.strategy import IntakeParams
from northnode.services.brief_generator import (
    POSITIONING_FALLBACK,
    PROGRAM_SUMMARY_FALLBACK,
    export_brief_as_json,
    export_brief_as_markdown,
    generate_campaign_brief,
    generate_export_filename,
    increment_brief_version,
    merge_locked_fields,
    sanitize_array,
    sanitize_text_or_fallback,
    strip_prohibited,
)
from northnode.services.intake_engine import analyze_intake

FIXED_NOW = datetime(2026, 1, 2, 9, 30, tzinfo=timezone.utc)


def _clock() -> datetime:
    return FIXED_NOW


def _brief(text: str = "", **kwargs):
    analysis = analyze_intake(IntakeParams(intake_text=text))
    return generate_campaign_brief(BriefGenerationInput(analysis=analysis, **kwargs), now=_clock)


# -------------------------------
# Sanitizer
# -------------------------------

def test_strip_prohibited_replaces_in_place():
    assert strip_prohibited("This is Clinically Proven care") == "This is evidence-informed care"


def test_strip_prohibited_discards_field():
    assert strip_prohibited("Our program will cure you") is None
    assert strip_prohibited("Plain text") == "Plain text"


def test_sanitize_text_or_fallback():
    assert sanitize_text_or_fallback("GUARANTEES peace of mind", "fallback") == "fallback"
    assert sanitize_text_or_fallback("Steady support", "fallback") == "Steady support"


def test_sanitize_array_drops_items_and_falls_back():
    assert sanitize_array(["ok", "will treat pain"], ["fb"]) == ["ok"]
    assert sanitize_array(["will cure", "reduces symptoms fast"], ["fb"]) == ["fb"]
    assert sanitize_array([], ["fb"]) == ["fb"]


@pytest.mark.parametrize(
    "existing, expected",
    [
        (None, "1.0.0"),
        ("", "1.0.0"),
        ("1.0.0", "1.0.1"),
        ("2.3.9", "2.3.10"),
        ("1.2", "1.0.0"),
        ("abc", "1.0.0"),
        ("1.x.3", "1.0.0"),
    ],
)
def test_increment_brief_version(existing, expected):
    assert increment_brief_version(existing) == expected


# -------------------------------
# Generation
# -------------------------------

def test_launch_brief():
    brief = _brief("We are launching a new program for adults and families.")
    assert brief.title == "Program Launch Campaign Brief"
    assert brief.primary_audience == "Community members seeking [service type]"
    assert brief.secondary_audience is None
    assert brief.channel_plan == ["Social organic", "Email (monthly)"]
    assert brief.tone_profile.tags == ["energetic", "accessible", "welcoming"]
    assert [p.pillar for p in brief.messaging_pillars] == ["Access", "Consistency", "Community"]
    assert len(brief.content_themes) <= 8
    assert brief.missing_info_questions is None
    assert brief.meta.audience_warning is None
    assert brief.meta.brief_version == "1.0.0"
    assert brief.meta.generated_at == FIXED_NOW.isoformat()
    assert brief.cadence_plan.frequency.startswith("Weekly during pre-launch")
    assert brief.compliance_notes.claims_cautions[0].startswith("All health-adjacent claims")


def test_unclear_audience_yields_tbd_and_questions():
    brief = _brief("")
    assert brief.primary_audience == "TBD"
    assert brief.missing_info_questions
    assert brief.missing_info_questions[0].startswith("Who is the primary audience")
    assert brief.meta.stakeholders_clarity_level == "low"


def test_medium_clarity_sets_audience_warning():
    brief = _brief("Launch a new program for veterans.")
    assert brief.meta.stakeholders_clarity_level == "medium"
    assert brief.meta.audience_warning == "Audience partially defined - review before publishing"
    assert brief.missing_info_questions is None


def test_referral_and_compliance_pillars_and_constraints():
    brief = _brief("HIPAA compliance review for physician referrals; posts need sign-off.")
    pillars = [p.pillar for p in brief.messaging_pillars]
    assert pillars[-2:] == ["Clinical Clarity", "Transparency"]
    assert "All content requires documented sign-off before publication" in brief.constraints
    assert "All published content must be archived with datestamp and channel record" in brief.constraints
    assert "Health-adjacent claims must cite accessible source or remove claim" in brief.constraints
    assert brief.compliance_notes.requires_visibility_archive is True
    assert brief.compliance_notes.requires_approval_workflow is True


def test_required_asset_owners_and_channels():
    brief = _brief(
        "launch",
        channels=["LinkedIn organic"],
        assets=["Provider one-pager", "Approval checklist", "Social post bank"],
    )
    assert brief.channel_plan == ["LinkedIn organic"]
    assert [a.owner for a in brief.required_assets] == [
        "Clinical communications lead",
        "Compliance officer",
        "Marketing lead",
    ]


def test_existing_version_is_bumped():
    assert _brief("launch", existing_version="1.0.4").meta.brief_version == "1.0.5"


def test_derived_text_is_sanitized():
    analysis = analyze_intake(IntakeParams(intake_text="launch"))
    unsafe = analysis.model_copy(update={"planner_prompt": "Our program will cure anxiety. More text"})
    brief = generate_campaign_brief(BriefGenerationInput(analysis=unsafe), now=_clock)
    assert brief.program_summary == PROGRAM_SUMMARY_FALLBACK
    assert brief.positioning_statement == POSITIONING_FALLBACK

    replaced = analysis.model_copy(update={"planner_prompt": "Clinically proven support. More text"})
    brief = generate_campaign_brief(BriefGenerationInput(analysis=replaced), now=_clock)
    assert brief.program_summary == "evidence-informed support"
    assert brief.positioning_statement == POSITIONING_FALLBACK


def test_generation_is_reproducible_with_fixed_clock():
    assert _brief("community awareness") == _brief("community awareness")


# -------------------------------
# Locking and export
# -------------------------------

def test_merge_locked_fields_keeps_previous_values():
    previous = _brief("launch").model_copy(update={"title": "Spring Open House", "content_themes": ["Tours"]})
    nxt = _brief("community awareness", existing_version="1.0.0")
    merged = merge_locked_fields(nxt, previous, ["title", "content_themes", "not_a_field"])
    assert merged.title == "Spring Open House"
    assert merged.content_themes == ["Tours"]
    assert merged.tone_profile == nxt.tone_profile
    assert merged.meta.brief_version == "1.0.1"
    assert nxt.title == "Trust Building Campaign Brief"


def test_merge_without_previous_returns_next():
    nxt = _brief("launch")
    assert merge_locked_fields(nxt, None, ["title"]) is nxt
    assert merge_locked_fields(nxt, _brief(""), []) is nxt


def test_export_json_round_trips_fields():
    brief = _brief("We are launching a new program for adults.")
    data = json.loads(export_brief_as_json(brief))
    assert data["title"] == brief.title
    assert data["meta"]["brief_version"] == "1.0.0"
    assert data["missing_info_questions"] is None


def test_export_markdown_sections():
    md = export_brief_as_markdown(_brief(""))
    assert md.startswith("# Trust Building Campaign Brief\n")
    for header in ("## Program summary", "## Audience", "## Messaging pillars", "## Constraints", "## Open questions"):
        assert header in md
    assert "- Primary: TBD" in md

    assert "## Open questions" not in export_brief_as_markdown(_brief("We are launching a new program for adults."))


def test_export_filename():
    brief = _brief("launch", existing_version="1.0.0")
    assert generate_export_filename(brief, "md") == "program-launch-campaign-brief-v1.0.1.md"
    assert generate_export_filename(brief, ".json") == "program-launch-campaign-brief-v1.0.1.json"
