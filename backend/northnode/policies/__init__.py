"""
Static policy reference data.

Each module holds the curated term tables for one governance policy. The
tables are immutable tuples loaded once at import time; validators in
northnode.services.validators read them and never mutate them.
"""

from northnode.policies.consent_requirements import CONSENT_PATTERNS, TESTIMONIAL_INDICATORS
from northnode.policies.dsm5_terminology import DSM5_TERMS
from northnode.policies.medical_claims import MEDICAL_CONTEXT_KEYWORDS, UNSUPPORTED_CLAIMS
from northnode.policies.stigma_language import STIGMA_TERMS, STIGMA_VALID_CONTEXTS
from northnode.policies.suicide_safety import (
    REQUIRED_RESOURCES,
    SUICIDE_KEYWORDS,
    has_required_crisis_resources,
)
from northnode.policies.treatment_qualification import UNQUALIFIED_LANGUAGE

__all__ = [
    "CONSENT_PATTERNS",
    "DSM5_TERMS",
    "MEDICAL_CONTEXT_KEYWORDS",
    "REQUIRED_RESOURCES",
    "STIGMA_TERMS",
    "STIGMA_VALID_CONTEXTS",
    "SUICIDE_KEYWORDS",
    "TESTIMONIAL_INDICATORS",
    "UNQUALIFIED_LANGUAGE",
    "UNSUPPORTED_CLAIMS",
    "has_required_crisis_resources",
]
