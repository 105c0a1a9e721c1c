import io
import json
import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.tools import run_intake, run_validation


def test_run_validation_prints_violations_and_score(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Our program cures depression in weeks."))
    assert run_validation.main([]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [v["policy_id"] for v in out["violations"]] == ["medical-claims"]
    assert out["score"]["score"] == 75
    assert "violations" not in out["score"]


def test_run_validation_with_profile_file(tmp_path, monkeypatch, capsys):
    profile = tmp_path / "profile.json"
    profile.write_text(json.dumps({"enabledPolicies": [], "requiredPhrases": [
        {"id": "vary", "phrase": "Individual results vary", "explanation": "Add disclaimer"}
    ]}))
    monkeypatch.setattr(sys, "stdin", io.StringIO("Our program cures depression in weeks."))
    assert run_validation.main(["--profile", str(profile)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [v["policy_id"] for v in out["violations"]] == ["required-phrases"]


def test_run_validation_missing_profile_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("text"))
    assert run_validation.main(["--profile", str(tmp_path / "nope.json")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_run_intake_analysis_only(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("We are launching a new program."))
    assert run_intake.main(["--audience", "adults"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["analysis"]["primary_archetype"] == "program-launch"
    assert "brief" not in out


def test_run_intake_with_brief(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Referrals for physicians."))
    assert run_intake.main(["--brief", "--channel", "LinkedIn organic", "--asset", "Referral checklist"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["brief"]["channel_plan"] == ["LinkedIn organic"]
    assert out["prompts"]["prompt_b"]
