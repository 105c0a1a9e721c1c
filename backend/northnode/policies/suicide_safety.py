"""
Suicide safety policy data.

Content that discusses suicide or self-harm must carry crisis resources.
This is the highest-weighted policy in compliance scoring.

References:
- 988 Suicide and Crisis Lifeline (https://988lifeline.org/)
- Crisis Text Line (https://www.crisistextline.org/)
- SAMHSA guidelines for messaging about suicide
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "CrisisResource",
    "REQUIRED_RESOURCES",
    "SUICIDE_KEYWORDS",
    "has_required_crisis_resources",
]


@dataclass(frozen=True)
class CrisisResource:
    name: str
    phone: Optional[str]
    text: str
    website: str
    description: str


REQUIRED_RESOURCES: tuple[CrisisResource, ...] = (
    CrisisResource(
        name="988 Suicide and Crisis Lifeline",
        phone="988",
        text="Text 988",
        website="https://988lifeline.org/",
        description="Free, 24/7 crisis support in English and Spanish",
    ),
    CrisisResource(
        name="Crisis Text Line",
        phone=None,
        text="Text HOME to 741741",
        website="https://www.crisistextline.org/",
        description="Free, 24/7 text-based crisis support",
    ),
    CrisisResource(
        name="Veterans Crisis Line",
        phone="988 then press 1",
        text="Text 838255",
        website="https://www.veteranscrisisline.net/",
        description="Specialized support for veterans and their families",
    ),
)

SUICIDE_KEYWORDS: tuple[str, ...] = (
    "suicide",
    "suicidal",
    "kill myself",
    "kill themselves",
    "end my life",
    "end their life",
    "take my life",
    "take their life",
    "self-harm",
    "self harm",
    "hurt myself",
    "hurt themselves",
    "die by suicide",
    "suicidal thoughts",
    "suicidal ideation",
    "suicide attempt",
    "suicide plan",
    "suicide prevention",
    "crisis hotline",
    "crisis line",
)


def has_required_crisis_resources(content: str) -> bool:
    """
    Return True when content names the 988 Lifeline or the Crisis Text Line.

    "988" only counts alongside "lifeline", "crisis" or "suicide" so that an
    unrelated number (a street address, a price) does not satisfy the check.
    """
    lower = content.lower()

    has_988 = "988" in lower and (
        "lifeline" in lower or "crisis" in lower or "suicide" in lower
    )
    has_crisis_text = "741741" in lower or (
        "crisis text line" in lower and "home" in lower
    )
    return has_988 or has_crisis_text
