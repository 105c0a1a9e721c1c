"""
DSM-5 terminology policy data.

A curated subset of DSM-5-TR diagnostic terms (plus common abbreviations and
alternate names). Diagnostic phrases in content that contain none of these
are flagged for review; the full manual lists 300+ conditions, so the check is
advisory.
"""

from __future__ import annotations

__all__ = ["DSM5_TERMS"]

DSM5_TERMS: tuple[str, ...] = (
    # Depressive
    "major depressive disorder",
    "persistent depressive disorder",
    "dysthymia",
    "disruptive mood dysregulation disorder",
    "premenstrual dysphoric disorder",
    # Anxiety
    "generalized anxiety disorder",
    "panic disorder",
    "agoraphobia",
    "social anxiety disorder",
    "social phobia",
    "specific phobia",
    "separation anxiety disorder",
    # Trauma and stressor-related
    "post-traumatic stress disorder",
    "ptsd",
    "acute stress disorder",
    "adjustment disorder",
    # Obsessive-compulsive and related
    "obsessive-compulsive disorder",
    "ocd",
    "body dysmorphic disorder",
    "hoarding disorder",
    "trichotillomania",
    "excoriation disorder",
    # Bipolar and related
    "bipolar i disorder",
    "bipolar ii disorder",
    "bipolar disorder",
    "cyclothymic disorder",
    # Schizophrenia spectrum
    "schizophrenia",
    "schizoaffective disorder",
    "delusional disorder",
    "brief psychotic disorder",
    # Eating
    "anorexia nervosa",
    "bulimia nervosa",
    "binge-eating disorder",
    "avoidant/restrictive food intake disorder",
    "arfid",
    # Substance-related and addictive
    "alcohol use disorder",
    "substance use disorder",
    "cannabis use disorder",
    "opioid use disorder",
    "stimulant use disorder",
    "gambling disorder",
    # Neurodevelopmental
    "autism spectrum disorder",
    "asd",
    "attention-deficit/hyperactivity disorder",
    "adhd",
    "intellectual disability",
    # Personality
    "borderline personality disorder",
    "narcissistic personality disorder",
    "antisocial personality disorder",
    "avoidant personality disorder",
    "obsessive-compulsive personality disorder",
    # Sleep-wake
    "insomnia disorder",
    "hypersomnolence disorder",
    "narcolepsy",
    "obstructive sleep apnea hypopnea",
    # Disruptive, impulse-control and conduct
    "oppositional defiant disorder",
    "intermittent explosive disorder",
    "conduct disorder",
    # Gender dysphoria
    "gender dysphoria",
)
