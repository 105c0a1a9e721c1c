"""
Policy validators.

Six independent checkers, one per governance policy. Each takes the content
string and returns a list of Violation objects (empty when clean). They share
no state, perform no I/O and never mutate the policy tables.

Positional validators (medical claims, stigma language, DSM-5 terminology,
treatment qualification) report character offsets of every match. Whole-content
validators (suicide safety, consent) report at most one violation with
start_index == end_index == 0.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from northnode.policies.consent_requirements import CONSENT_PATTERNS, TESTIMONIAL_INDICATORS
from northnode.policies.dsm5_terminology import DSM5_TERMS
from northnode.policies.medical_claims import (
    MEDICAL_CONTEXT_KEYWORDS,
    UNSUPPORTED_CLAIMS,
    ClaimPattern,
)
from northnode.policies.stigma_language import STIGMA_TERMS, STIGMA_VALID_CONTEXTS
from northnode.policies.suicide_safety import SUICIDE_KEYWORDS, has_required_crisis_resources
from northnode.policies.treatment_qualification import UNQUALIFIED_LANGUAGE, UnqualifiedPhrase
from northnode.schemas.governance import Violation

__all__ = [
    "Validator",
    "POLICY_VALIDATORS",
    "validate_medical_claims",
    "validate_stigma_language",
    "validate_dsm5_terminology",
    "validate_treatment_qualification",
    "validate_suicide_safety",
    "validate_consent_requirement",
]

Validator = Callable[[str], List[Violation]]


# -------------------------------
# Helpers
# -------------------------------

def _snippet(content: str, start: int, end: int, pad: int) -> str:
    """Return content[start:end] widened by `pad` characters on each side."""
    return content[max(0, start - pad):min(len(content), end + pad)]


def _ensure_str(content: object) -> str:
    if not isinstance(content, str):
        raise TypeError("content must be a str")
    return content


# -------------------------------
# Medical claims
# -------------------------------

_CONTEXT_GROUP = "|".join(MEDICAL_CONTEXT_KEYWORDS)

_MEDICAL_CLAIM_PATTERNS: list[tuple[ClaimPattern, re.Pattern]] = [
    (
        claim,
        re.compile(
            rf"\b{re.escape(claim.term)}\b[^.]{{0,50}}\b({_CONTEXT_GROUP})",
            re.IGNORECASE,
        ),
    )
    for claim in UNSUPPORTED_CLAIMS
]


def validate_medical_claims(content: str) -> list[Violation]:
    """
    Flag unsupported outcome claims made about mental-health care.

    A claim term only counts when a context keyword (depression, therapy, ...)
    follows within 50 characters of the same sentence, so "a cure for the
    common cold" is left alone while "cures depression" is flagged.
    """
    content = _ensure_str(content)
    violations: list[Violation] = []
    for claim, rx in _MEDICAL_CLAIM_PATTERNS:
        for m in rx.finditer(content):
            violations.append(
                Violation(
                    policy_id="medical-claims",
                    severity="high",
                    text=_snippet(content, m.start(), m.end(), 30),
                    explanation=(
                        f'"{claim.term}" is not supported as a medical claim for {claim.context}. '
                        f'Instead, use "{claim.alternative}".'
                    ),
                    start_index=m.start(),
                    end_index=m.end(),
                )
            )
    return violations


# -------------------------------
# Stigma language
# -------------------------------

_STIGMA_PATTERNS: list[tuple[str, re.Pattern]] = [
    (term, re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)) for term in STIGMA_TERMS
]


def _in_valid_context(term: str, content: str, start: int, end: int) -> bool:
    contexts = STIGMA_VALID_CONTEXTS.get(term.lower())
    if not contexts:
        return False
    surrounding = _snippet(content, start, end, 50)
    return any(rx.search(surrounding) for rx in contexts)


def validate_stigma_language(content: str) -> list[Violation]:
    """
    Flag stigmatizing terms using whole-word, case-insensitive matching.

    Word boundaries keep "addiction" from matching "addict". The only context
    exemption is clinical usage of "mental" ("mental health", "mental illness", ...).
    """
    content = _ensure_str(content)
    violations: list[Violation] = []
    for term, rx in _STIGMA_PATTERNS:
        for m in rx.finditer(content):
            if _in_valid_context(term, content, m.start(), m.end()):
                continue
            violations.append(
                Violation(
                    policy_id="stigma-language",
                    severity="medium",
                    text=_snippet(content, m.start(), m.end(), 20),
                    explanation=(
                        f'"{m.group(0)}" is stigmatizing language. '
                        "Use person-first or strengths-based language instead."
                    ),
                    start_index=m.start(),
                    end_index=m.end(),
                )
            )
    return violations


# -------------------------------
# DSM-5 terminology
# -------------------------------

_DIAGNOSIS_RE = re.compile(
    r"(?:diagnosed with|has|suffering from|living with)\s+([a-z\s]+(?:disorder|condition|syndrome))",
    re.IGNORECASE,
)


def validate_dsm5_terminology(content: str) -> list[Violation]:
    """
    Flag diagnostic phrases that contain no recognised DSM-5 term.

    Inverse allow-list check: "diagnosed with generalized anxiety disorder"
    passes, "has a chemical imbalance condition" is flagged for review.
    False positives are expected; the result is advisory.
    """
    content = _ensure_str(content)
    violations: list[Violation] = []
    for m in _DIAGNOSIS_RE.finditer(content):
        term = m.group(1).strip().lower()
        if any(dsm5_term in term for dsm5_term in DSM5_TERMS):
            continue
        violations.append(
            Violation(
                policy_id="dsm5-terminology",
                severity="medium",
                text=m.group(0),
                explanation=(
                    f'"{term}" may not be valid DSM-5 terminology. '
                    "Verify against DSM-5-TR or use general language."
                ),
                start_index=m.start(),
                end_index=m.end(),
            )
        )
    return violations


# -------------------------------
# Treatment qualification
# -------------------------------

_UNQUALIFIED_PATTERNS: list[tuple[UnqualifiedPhrase, re.Pattern]] = [
    (phrase, re.compile(re.escape(phrase.term), re.IGNORECASE)) for phrase in UNQUALIFIED_LANGUAGE
]


def validate_treatment_qualification(content: str) -> list[Violation]:
    """Flag absolute treatment-outcome language ("will cure", "always works")."""
    content = _ensure_str(content)
    violations: list[Violation] = []
    for phrase, rx in _UNQUALIFIED_PATTERNS:
        for m in rx.finditer(content):
            violations.append(
                Violation(
                    policy_id="treatment-qualification",
                    severity="high",
                    text=_snippet(content, m.start(), m.end(), 20),
                    explanation=(
                        f'"{m.group(0)}" is unqualified treatment advice. '
                        f'Use "{phrase.qualified}" instead.'
                    ),
                    start_index=m.start(),
                    end_index=m.end(),
                )
            )
    return violations


# -------------------------------
# Suicide safety (whole-content)
# -------------------------------

def validate_suicide_safety(content: str) -> list[Violation]:
    """
    Require crisis resources whenever content discusses suicide or self-harm.

    Safety-critical: this policy carries the highest scoring penalty.
    """
    content = _ensure_str(content)
    lower = content.lower()
    if not any(keyword in lower for keyword in SUICIDE_KEYWORDS):
        return []
    if has_required_crisis_resources(content):
        return []
    return [
        Violation(
            policy_id="suicide-safety",
            severity="high",
            text="Content discusses suicide without crisis resources",
            explanation=(
                "Content mentions suicide but does not include required crisis resources "
                "(988 Lifeline or Crisis Text Line). "
                "Add: \"If you're in crisis, call 988 or text HOME to 741741.\""
            ),
            start_index=0,
            end_index=0,
        )
    ]


# -------------------------------
# Consent (whole-content)
# -------------------------------

def validate_consent_requirement(content: str) -> list[Violation]:
    """Require documented consent language whenever a patient story or testimonial appears."""
    content = _ensure_str(content)
    lower = content.lower()
    if not any(indicator in lower for indicator in TESTIMONIAL_INDICATORS):
        return []
    if any(pattern in lower for pattern in CONSENT_PATTERNS):
        return []
    return [
        Violation(
            policy_id="consent",
            severity="medium",
            text="Patient testimonial without documented consent",
            explanation=(
                "Content includes patient story/testimonial but does not mention consent. "
                'Add: "Shared with written consent" or similar HIPAA-compliant language.'
            ),
            start_index=0,
            end_index=0,
        )
    ]


# Canonical built-in policy order; also the default "all enabled" set.
POLICY_VALIDATORS: Dict[str, Validator] = {
    "medical-claims": validate_medical_claims,
    "stigma-language": validate_stigma_language,
    "dsm5-terminology": validate_dsm5_terminology,
    "treatment-qualification": validate_treatment_qualification,
    "suicide-safety": validate_suicide_safety,
    "consent": validate_consent_requirement,
}
