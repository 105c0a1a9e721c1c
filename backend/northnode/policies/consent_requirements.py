"""
Consent requirements policy data.

Patient testimonials and success stories need documented consent
(HIPAA Privacy Rule, 45 CFR 164.508; CMS marketing guidance).
"""

from __future__ import annotations

__all__ = ["TESTIMONIAL_INDICATORS", "CONSENT_PATTERNS"]

TESTIMONIAL_INDICATORS: tuple[str, ...] = (
    "patient story",
    "patient testimonial",
    "client testimonial",
    "success story",
    "patient experience",
    "real story",
    "client story",
    "client experience",
    "treatment journey",
    "recovery story",
    "personal story",
    "case study",
    "patient case",
)

# Matched case-insensitively against lowercased content.
CONSENT_PATTERNS: tuple[str, ...] = (
    "written consent",
    "with consent",
    "consent obtained",
    "authorized",
    "permission obtained",
    "consent on file",
    "approved for sharing",
    "shared with permission",
    "hipaa authorization",
    "authorized disclosure",
)
