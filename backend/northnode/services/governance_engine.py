"""
Composite and contextual governance validation.

Two modes:

- validate_content(content)
    Runs all six built-in policy validators unconditionally. Used for live
    editing feedback where no client context exists.

- validate_content_with_context(content, context, repo=None)
    Resolves a GovernanceContext to a profile config (and optional campaign
    config) through a GovernanceConfigRepo, then runs:
        1) enabled built-in validators (profile enabled minus campaign disabled)
        2) profile custom patterns
        3) profile required phrases
        4) campaign extra forbidden patterns
        5) campaign required phrases

Both modes return violations sorted by start_index (stable, so whole-content
findings at index 0 keep their validator order).

Resolution precedence is campaign -> explicit profile -> most recently updated
active profile for the client. Anything that fails to resolve falls back to
"all policies enabled, no custom rules"; malformed configuration never blocks
validation.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from northnode.core.contracts import GovernanceConfigRepo
from northnode.core.logging import get_logger
from northnode.schemas.governance import (
    CampaignConfig,
    ContextualValidationResult,
    CustomPattern,
    GovernanceContext,
    GovernanceProfileConfig,
    RequiredPhrase,
    Violation,
)
from northnode.services.validators import POLICY_VALIDATORS

__all__ = [
    "ResolvedGovernanceConfig",
    "default_profile_config",
    "normalize_profile_config",
    "normalize_campaign_config",
    "compile_custom_pattern",
    "validate_custom_patterns",
    "validate_required_phrases",
    "validate_content",
    "validate_content_async",
    "resolve_governance_config",
    "validate_content_with_config",
    "validate_content_with_context",
]

logger = get_logger(__name__)

_DEFAULT_FLAGS = "gi"

# JavaScript-style flag letters accepted on custom patterns.
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "g": 0,  # every match is enumerated anyway
    "u": 0,  # str patterns are unicode already
}


# -------------------------------
# Config normalization
# -------------------------------

def _sort_violations(violations: Iterable[Violation]) -> list[Violation]:
    return sorted(violations, key=lambda v: v.start_index)


def default_profile_config() -> GovernanceProfileConfig:
    return GovernanceProfileConfig(enabled_policies=list(POLICY_VALIDATORS))


def _pick(raw: Mapping[str, Any], snake: str, camel: str) -> Any:
    # Persisted configs may use either naming style.
    if snake in raw:
        return raw[snake]
    return raw.get(camel)


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _parse_rules(entries: Any, model: type, kind: str) -> list:
    rules = []
    for entry in _as_list(entries):
        if isinstance(entry, model):
            rules.append(entry)
            continue
        try:
            rules.append(model.model_validate(entry))
        except ValidationError:
            rule_id = entry.get("id") if isinstance(entry, Mapping) else None
            logger.warning("Dropping malformed governance rule", extra={"rule_kind": kind, "rule_id": rule_id})
    return rules


def normalize_profile_config(raw: Any) -> GovernanceProfileConfig:
    """
    Build a GovernanceProfileConfig from raw persisted JSON. Never raises.

    - enabled_policies missing or not a list -> all six built-in policies
    - unknown policy IDs are dropped (an explicit empty list stays empty)
    - malformed custom patterns / required phrases are dropped with a warning
    """
    if isinstance(raw, GovernanceProfileConfig):
        return raw
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    enabled_raw = _pick(data, "enabled_policies", "enabledPolicies")
    if isinstance(enabled_raw, (list, tuple)):
        enabled = [p for p in enabled_raw if isinstance(p, str) and p in POLICY_VALIDATORS]
    else:
        enabled = list(POLICY_VALIDATORS)

    return GovernanceProfileConfig(
        enabled_policies=enabled,
        custom_patterns=_parse_rules(
            _pick(data, "custom_patterns", "customPatterns"), CustomPattern, "custom_pattern"
        ),
        required_phrases=_parse_rules(
            _pick(data, "required_phrases", "requiredPhrases"), RequiredPhrase, "required_phrase"
        ),
    )


def normalize_campaign_config(raw: Any) -> CampaignConfig:
    """Build a CampaignConfig from raw persisted JSON. Never raises."""
    if isinstance(raw, CampaignConfig):
        return raw
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    disabled = [
        p for p in _as_list(_pick(data, "disabled_policies", "disabledPolicies")) if isinstance(p, str)
    ]
    return CampaignConfig(
        disabled_policies=disabled,
        extra_forbidden_patterns=_parse_rules(
            _pick(data, "extra_forbidden_patterns", "extraForbiddenPatterns"),
            CustomPattern,
            "extra_forbidden_pattern",
        ),
        required_phrases=_parse_rules(
            _pick(data, "required_phrases", "requiredPhrases"), RequiredPhrase, "required_phrase"
        ),
    )


# -------------------------------
# Generic rule types
# -------------------------------

def compile_custom_pattern(rule: CustomPattern) -> Optional[re.Pattern]:
    """
    Compile a user-authored regex, translating JS-style flag letters.

    Returns None (after logging a warning) for invalid patterns or flags.
    """
    flags_text = rule.flags or _DEFAULT_FLAGS
    flags = 0
    for letter in flags_text:
        if letter not in _FLAG_MAP:
            logger.warning(
                "Invalid custom pattern flags; rule skipped",
                extra={"rule_id": rule.id, "flags": flags_text},
            )
            return None
        flags |= _FLAG_MAP[letter]
    try:
        return re.compile(rule.pattern, flags)
    except re.error as exc:
        logger.warning(
            "Invalid custom pattern regex; rule skipped",
            extra={"rule_id": rule.id, "error": str(exc)},
        )
        return None


def validate_custom_patterns(
    content: str,
    patterns: Iterable[CustomPattern],
    policy_id: str = "custom-patterns",
) -> list[Violation]:
    """One violation per non-empty match of each rule; invalid rules are skipped."""
    violations: list[Violation] = []
    for rule in patterns:
        rx = compile_custom_pattern(rule)
        if rx is None:
            continue
        for m in rx.finditer(content):
            if m.start() == m.end():
                continue
            violations.append(
                Violation(
                    policy_id=policy_id,
                    severity=rule.severity or "medium",
                    text=content[max(0, m.start() - 20):min(len(content), m.end() + 20)],
                    explanation=rule.explanation,
                    start_index=m.start(),
                    end_index=m.end(),
                )
            )
    return violations


def validate_required_phrases(content: str, required: Iterable[RequiredPhrase]) -> list[Violation]:
    """One whole-content violation per phrase missing from content (case-insensitive)."""
    lower = content.lower()
    violations: list[Violation] = []
    for requirement in required:
        if requirement.phrase.lower() in lower:
            continue
        violations.append(
            Violation(
                policy_id="required-phrases",
                severity=requirement.severity or "medium",
                text=requirement.phrase,
                explanation=requirement.explanation,
                start_index=0,
                end_index=0,
            )
        )
    return violations


# -------------------------------
# Default composite
# -------------------------------

def validate_content(content: str) -> list[Violation]:
    """Run all six built-in validators and return violations sorted by start_index."""
    if not isinstance(content, str):
        raise TypeError("content must be a str")
    violations: list[Violation] = []
    for validator in POLICY_VALIDATORS.values():
        violations.extend(validator(content))
    return _sort_violations(violations)


async def validate_content_async(content: str) -> list[Violation]:
    """Same result as validate_content, with validators fanned out to worker threads."""
    if not isinstance(content, str):
        raise TypeError("content must be a str")
    results = await asyncio.gather(
        *(asyncio.to_thread(validator, content) for validator in POLICY_VALIDATORS.values())
    )
    return _sort_violations(v for batch in results for v in batch)


# -------------------------------
# Contextual validation
# -------------------------------

@dataclass(frozen=True)
class ResolvedGovernanceConfig:
    profile_config: GovernanceProfileConfig
    campaign_config: Optional[CampaignConfig] = None
    profile_id: Optional[str] = None
    campaign_id: Optional[str] = None
    client_id: Optional[str] = None


def _campaign_profile_config(campaign: Any, repo: GovernanceConfigRepo) -> Any:
    profile = getattr(campaign, "governance_profile", None)
    if profile is None and getattr(campaign, "governance_profile_id", None):
        profile = repo.get_profile(campaign.governance_profile_id)
    return getattr(profile, "config", None)


def resolve_governance_config(
    context: Optional[GovernanceContext],
    repo: Optional[GovernanceConfigRepo],
) -> ResolvedGovernanceConfig:
    """
    Resolve the effective configuration for a context.

    Only the most specific identifier supplied is consulted: a campaign_id that
    does not resolve yields defaults rather than falling through to the profile.
    """
    default = ResolvedGovernanceConfig(profile_config=default_profile_config())
    if context is None or repo is None:
        return default

    if context.campaign_id:
        campaign = repo.get_campaign(context.campaign_id)
        if campaign is None:
            return default
        return ResolvedGovernanceConfig(
            profile_config=normalize_profile_config(_campaign_profile_config(campaign, repo)),
            campaign_config=normalize_campaign_config(getattr(campaign, "config", None)),
            profile_id=getattr(campaign, "governance_profile_id", None),
            campaign_id=campaign.id,
            client_id=getattr(campaign, "client_id", None),
        )

    if context.profile_id:
        profile = repo.get_profile(context.profile_id)
    elif context.client_id:
        profile = repo.get_latest_active_profile(context.client_id)
    else:
        profile = None

    if profile is None:
        return default
    return ResolvedGovernanceConfig(
        profile_config=normalize_profile_config(getattr(profile, "config", None)),
        profile_id=profile.id,
        client_id=getattr(profile, "client_id", None),
    )


def validate_content_with_config(
    content: str,
    profile: GovernanceProfileConfig,
    campaign: Optional[CampaignConfig] = None,
) -> list[Violation]:
    """Validate content under an already-resolved profile (and optional campaign) config."""
    if not isinstance(content, str):
        raise TypeError("content must be a str")

    disabled = set(campaign.disabled_policies) if campaign else set()
    enabled: List[str] = [p for p in profile.enabled_policies if p not in disabled]

    violations: list[Violation] = []
    for policy_id in enabled:
        validator = POLICY_VALIDATORS.get(policy_id)
        if validator is not None:
            violations.extend(validator(content))

    violations.extend(validate_custom_patterns(content, profile.custom_patterns))
    violations.extend(validate_required_phrases(content, profile.required_phrases))
    if campaign is not None:
        violations.extend(validate_custom_patterns(content, campaign.extra_forbidden_patterns))
        violations.extend(validate_required_phrases(content, campaign.required_phrases))

    return _sort_violations(violations)


def validate_content_with_context(
    content: str,
    context: Optional[GovernanceContext] = None,
    repo: Optional[GovernanceConfigRepo] = None,
) -> ContextualValidationResult:
    """Validate content under the governance configuration resolved for `context`."""
    if not isinstance(content, str):
        raise TypeError("content must be a str")

    resolved = resolve_governance_config(context, repo)
    return ContextualValidationResult(
        violations=validate_content_with_config(content, resolved.profile_config, resolved.campaign_config),
        profile_id=resolved.profile_id,
        campaign_id=resolved.campaign_id,
        client_id=resolved.client_id,
    )
