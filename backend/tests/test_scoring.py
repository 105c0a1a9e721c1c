import logging
import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.schemas.governance import Violation
from northnode.services.scoring import POLICY_WEIGHTS, calculate_compliance_score, policy_penalty


def _v(policy_id: str, start: int = 0) -> Violation:
    return Violation(
        policy_id=policy_id,
        severity="medium",
        text="x",
        explanation="y",
        start_index=start,
        end_index=start,
    )


def test_no_violations_scores_100():
    result = calculate_compliance_score([])
    assert result.score == 100
    assert result.reasoning == ["No policy violations found"]
    assert result.passed == list(POLICY_WEIGHTS)
    assert result.violations == []


def test_single_penalty_ignores_count():
    one = calculate_compliance_score([_v("medical-claims")])
    three = calculate_compliance_score([_v("medical-claims", i) for i in range(3)])
    assert one.score == three.score == 75
    assert three.reasoning == ["Unsupported medical claim: -25 points"]


def test_additive_penalty_is_capped():
    result = calculate_compliance_score([_v("stigma-language", i) for i in range(10)])
    assert result.score == 70
    assert result.reasoning == ["Stigmatizing language (10 items): -30 points"]


def test_additive_singular_wording():
    result = calculate_compliance_score([_v("required-phrases")])
    assert result.score == 90
    assert result.reasoning == ["Missing required framing (1 item): -10 points"]


def test_policy_penalty_modes():
    assert policy_penalty(POLICY_WEIGHTS["custom-patterns"], 2) == 16
    assert policy_penalty(POLICY_WEIGHTS["custom-patterns"], 9) == 32
    assert policy_penalty(POLICY_WEIGHTS["consent"], 4) == 10


def test_reasoning_and_passed_follow_weight_order():
    violations = [_v("stigma-language"), _v("consent"), _v("suicide-safety"), _v("medical-claims")]
    result = calculate_compliance_score(violations)
    assert result.reasoning == [
        "Unsupported medical claim: -25 points",
        "Suicide discussion without crisis resources: -30 points",
        "Missing patient testimonial consent: -10 points",
        "Stigmatizing language (1 item): -5 points",
    ]
    assert result.passed == [
        "treatment-qualification",
        "dsm5-terminology",
        "custom-patterns",
        "required-phrases",
    ]
    assert result.score == 30
    assert result.violations == violations


def test_score_floors_at_zero():
    violations = [_v(policy_id) for policy_id in POLICY_WEIGHTS]
    violations += [_v("stigma-language")] * 5 + [_v("custom-patterns")] * 5 + [_v("required-phrases")] * 5
    result = calculate_compliance_score(violations)
    assert result.score == 0
    assert result.passed == []


def test_unknown_policy_is_logged_without_penalty(caplog):
    with caplog.at_level(logging.WARNING):
        result = calculate_compliance_score([_v("made-up-policy")])
    assert result.score == 100
    assert result.reasoning == []
    assert result.passed == list(POLICY_WEIGHTS)
    assert any(getattr(r, "policy_id", None) == "made-up-policy" for r in caplog.records)


def test_adding_a_violation_never_raises_the_score():
    policy_ids = list(POLICY_WEIGHTS) * 5
    violations = []
    previous = calculate_compliance_score(violations).score
    for i, policy_id in enumerate(policy_ids):
        violations.append(_v(policy_id, i))
        score = calculate_compliance_score(violations).score
        assert 0 <= score <= previous
        previous = score
    assert previous == 0
