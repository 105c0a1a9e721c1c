"""
Treatment qualification policy data.

Absolute outcome language that must be qualified ("will cure" -> "may help
manage"). Source: FDA social-media guidance, FTC truth-in-advertising.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["UnqualifiedPhrase", "UNQUALIFIED_LANGUAGE"]


@dataclass(frozen=True)
class UnqualifiedPhrase:
    term: str
    qualified: str
    explanation: str


UNQUALIFIED_LANGUAGE: tuple[UnqualifiedPhrase, ...] = (
    UnqualifiedPhrase(
        "will cure", "may help manage",
        'Treatment outcomes vary - avoid absolute claims like "will cure"',
    ),
    UnqualifiedPhrase(
        "will eliminate", "may reduce",
        "Symptoms can often be reduced but rarely completely eliminated",
    ),
    UnqualifiedPhrase(
        "eliminates symptoms", "can reduce symptoms",
        'Use "can" or "may" instead of absolute "eliminates"',
    ),
    UnqualifiedPhrase(
        "prevents relapse", "may help prevent relapse",
        "Relapse prevention is not guaranteed - use qualified language",
    ),
    UnqualifiedPhrase(
        "completely resolves", "can improve",
        "Complete resolution is rare - use more realistic language",
    ),
    UnqualifiedPhrase(
        "ensures recovery", "supports recovery",
        "Recovery cannot be ensured - use supportive language instead",
    ),
    UnqualifiedPhrase(
        "guarantees improvement", "often leads to improvement",
        "Individual responses vary - avoid guarantees",
    ),
    UnqualifiedPhrase(
        "always works", "works for many people",
        "No treatment works for everyone - be realistic about outcomes",
    ),
    UnqualifiedPhrase(
        "never fails", "has shown effectiveness",
        "All treatments can fail for some individuals",
    ),
    UnqualifiedPhrase(
        "permanent fix", "long-term management tool",
        "Mental health requires ongoing management, not permanent fixes",
    ),
)
