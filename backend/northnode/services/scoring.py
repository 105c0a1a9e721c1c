"""
Compliance scoring calculator.

Turns a violation list into a 0-100 score with itemized reasoning.

Scoring:
- Start at 100 and subtract one penalty per violated policy.
- single policies:   fixed penalty regardless of how many violations
- additive policies: penalty per violation, capped at the policy maximum

    medical-claims           25           single
    suicide-safety           30           single
    treatment-qualification  20           single
    dsm5-terminology         15           single
    consent                  10           single
    stigma-language           5 each, 30  additive
    custom-patterns           8 each, 32  additive
    required-phrases         10 each, 30  additive

Violations with an unknown policy_id are logged and ignored (zero penalty), so
newly introduced policies never crash scoring before the table catches up.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Literal

from northnode.core.logging import get_logger
from northnode.schemas.governance import ComplianceScore, Violation

__all__ = ["PolicyWeight", "POLICY_WEIGHTS", "policy_penalty", "calculate_compliance_score"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class PolicyWeight:
    penalty: int
    max_penalty: int
    mode: Literal["single", "additive"]
    description: str


# Ordering here is the canonical order for reasoning lines and `passed`.
POLICY_WEIGHTS: Dict[str, PolicyWeight] = {
    "medical-claims": PolicyWeight(25, 25, "single", "Unsupported medical claim"),
    "suicide-safety": PolicyWeight(30, 30, "single", "Suicide discussion without crisis resources"),
    "treatment-qualification": PolicyWeight(20, 20, "single", "Unqualified treatment advice"),
    "dsm5-terminology": PolicyWeight(15, 15, "single", "Invalid DSM-5 terminology"),
    "consent": PolicyWeight(10, 10, "single", "Missing patient testimonial consent"),
    "stigma-language": PolicyWeight(5, 30, "additive", "Stigmatizing language"),
    "custom-patterns": PolicyWeight(8, 32, "additive", "Custom forbidden pattern"),
    "required-phrases": PolicyWeight(10, 30, "additive", "Missing required framing"),
}


def policy_penalty(weight: PolicyWeight, count: int) -> int:
    """Penalty for `count` violations (count >= 1) of a single policy."""
    if weight.mode == "additive":
        return min(count * weight.penalty, weight.max_penalty)
    return weight.penalty


def calculate_compliance_score(violations: Iterable[Violation]) -> ComplianceScore:
    """
    Score a violation set.

    Returns a ComplianceScore whose `violations` field retains the full input
    for audit purposes. Reasoning lines are ordered by POLICY_WEIGHTS.
    """
    items = list(violations)
    if not items:
        return ComplianceScore(
            score=100,
            reasoning=["No policy violations found"],
            passed=list(POLICY_WEIGHTS),
            violations=[],
        )

    counts = Counter(v.policy_id for v in items)

    for policy_id in counts:
        if policy_id not in POLICY_WEIGHTS:
            logger.warning(
                "Unknown policy in scoring; no penalty applied",
                extra={"policy_id": policy_id, "count": counts[policy_id]},
            )

    total_penalty = 0
    reasoning: list[str] = []
    for policy_id, weight in POLICY_WEIGHTS.items():
        count = counts.get(policy_id, 0)
        if count == 0:
            continue
        penalty = policy_penalty(weight, count)
        total_penalty += penalty
        if weight.mode == "additive":
            plural = "s" if count > 1 else ""
            reasoning.append(f"{weight.description} ({count} item{plural}): -{penalty} points")
        else:
            reasoning.append(f"{weight.description}: -{penalty} points")

    score = max(0, min(100, round(100 - total_penalty)))
    passed = [policy_id for policy_id in POLICY_WEIGHTS if counts.get(policy_id, 0) == 0]

    return ComplianceScore(score=score, reasoning=reasoning, passed=passed, violations=items)
