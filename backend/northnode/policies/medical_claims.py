"""
Medical claims policy data.

Unsupported outcome claims that must not be made about mental-health care.
Based on FTC health-claims guidance and FDA advertising rules. A claim term
only counts when a mental-health context keyword follows it within the same
sentence (see northnode.services.validators.validate_medical_claims).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ClaimPattern", "UNSUPPORTED_CLAIMS", "MEDICAL_CONTEXT_KEYWORDS"]


@dataclass(frozen=True)
class ClaimPattern:
    term: str
    context: str
    alternative: str
    explanation: str


_CURE = 'No mental health condition can be "cured" - use "manage" or "treat" instead'
_GUARANTEE = "Treatment outcomes cannot be guaranteed - results vary by individual"
_ELIMINATE = "Symptoms can be reduced but rarely fully eliminated"

UNSUPPORTED_CLAIMS: tuple[ClaimPattern, ...] = (
    ClaimPattern("cure", "mental health", "effective treatment for", _CURE),
    ClaimPattern("cures", "mental health", "helps manage", _CURE),
    ClaimPattern("guaranteed", "treatment outcome", "may help", _GUARANTEE),
    ClaimPattern("guarantee", "treatment outcome", "shown to help", _GUARANTEE),
    ClaimPattern("proven to eliminate", "symptoms", "shown to reduce", _ELIMINATE),
    ClaimPattern("eliminates", "symptoms", "reduces", _ELIMINATE),
    ClaimPattern(
        "fixes",
        "mental health",
        "supports improvement in",
        'Mental health is not "fixed" - use person-first language',
    ),
    ClaimPattern(
        "permanent solution",
        "mental health",
        "long-term management strategy",
        "Mental health requires ongoing management, not permanent solutions",
    ),
    ClaimPattern(
        "instant relief",
        "mental health",
        "may provide relief over time",
        "Mental health treatment takes time - avoid implying instant results",
    ),
    ClaimPattern(
        "completely reverse",
        "mental health",
        "improve",
        'Mental health conditions cannot be "reversed"',
    ),
    ClaimPattern(
        "100% effective",
        "treatment",
        "highly effective for many people",
        "No treatment is 100% effective for everyone",
    ),
    ClaimPattern(
        "works for everyone",
        "treatment",
        "works for many people",
        "Individual responses to treatment vary",
    ),
    ClaimPattern(
        "scientifically proven to cure",
        "mental health",
        "clinically shown to help manage",
        'Even with clinical evidence, "cure" is not appropriate for mental health',
    ),
)

# A claim is only flagged when one of these follows it within 50 chars.
MEDICAL_CONTEXT_KEYWORDS: tuple[str, ...] = (
    "mental",
    "psychiatric",
    "psychological",
    "emotional",
    "behavioral",
    "depression",
    "anxiety",
    "ptsd",
    "ocd",
    "bipolar",
    "schizophrenia",
    "therapy",
    "treatment",
    "medication",
)
