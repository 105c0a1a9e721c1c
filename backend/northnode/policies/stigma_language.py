"""
Stigma language policy data.

Curated stigmatizing mental-health terms to avoid, with person-first or
strengths-based alternatives noted per group.

References:
- SAMHSA: Words Matter - Terms to Use and Avoid When Talking About Addiction
- NAMI language guide
- APA style guide
"""

from __future__ import annotations

import re

__all__ = ["STIGMA_TERMS", "STIGMA_VALID_CONTEXTS"]

STIGMA_TERMS: tuple[str, ...] = (
    # Substance use -> "person with substance use disorder"
    "addict",
    "junkie",
    "dopehead",
    "doper",
    "druggie",
    "alcoholic",
    "drunk",
    "crackhead",
    "tweaker",
    "pothead",
    "boozer",
    "substance abuser",
    "drug abuser",
    # Mental health -> "person with schizophrenia", "person experiencing psychosis"
    "psycho",
    "psychotic",
    "schizo",
    "schizophrenic",
    "crazy",
    "insane",
    "nuts",
    "mental",
    "deranged",
    "demented",
    "lunatic",
    "maniac",
    "mad",
    "disturbed",
    "unstable",
    # Intellectual disability -> "person with intellectual disability"
    "retarded",
    "retard",
    "idiot",
    "stupid",
    "dumb",
    "moron",
    "imbecile",
    "feeble-minded",
    # Trauma -> "person who experienced trauma"
    "damaged",
    "broken",
    "traumatized",
    "shell-shocked",
    # Personality disorders
    "borderline",
    "narcissist",
    "sociopath",
    "psychopath",
    # Depression / suicide -> "died by suicide"
    "committed suicide",
    "successful suicide",
    "failed suicide attempt",
    "attention-seeking",
    "manipulative",
    "lazy",
    # General -> "living with", "person with mental illness"
    "suffering from",
    "afflicted with",
    "victim of",
    "stricken with",
    "plagued by",
    "handicapped",
    "invalid",
    "confined to",
    # Eating disorders
    "anorexic",
    "bulimic",
    "binge eater",
    # Addiction-specific
    "clean",
    "dirty",
    "habit",
    "recreational drug use",
    # Autism / developmental
    "autistic",
    "suffers from autism",
    "high-functioning",
    "low-functioning",
    "mild",
    "severe",
    # Self-harm
    "cutter",
    "self-mutilator",
    # General
    "normal",
    "abnormal",
    "defective",
    "disabled",
)

# Clinical phrases in which an otherwise-flagged term is acceptable.
STIGMA_VALID_CONTEXTS: dict[str, tuple[re.Pattern, ...]] = {
    "mental": (
        re.compile(r"\bmental health\b", re.IGNORECASE),
        re.compile(r"\bmental illness\b", re.IGNORECASE),
        re.compile(r"\bmental disorder\b", re.IGNORECASE),
        re.compile(r"\bmental wellness\b", re.IGNORECASE),
        re.compile(r"\bmental healthcare\b", re.IGNORECASE),
    ),
}
