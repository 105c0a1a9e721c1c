"""
Campaign brief endpoint.

POST /api/briefs
- Analyzes the intake, generates a sanitized brief and keeps any locked
  fields from previous_brief.
- Compiles drafting prompts; a prohibited phrase in any prompt becomes a
  422 prohibited_language error and nothing is returned.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from northnode.core.config import Settings
from northnode.core.deps import get_app_settings
from northnode.core.errors import UnsafePromptError
from northnode.core.logging import get_logger
from northnode.schemas.brief import BriefGenerationInput, BriefRequest, BriefResponse
from northnode.services.brief_generator import generate_campaign_brief, merge_locked_fields
from northnode.services.drafting_prompts import ProhibitedLanguageError, generate_drafting_prompts
from northnode.services.intake_engine import analyze_intake

router = APIRouter(prefix="/api", tags=["briefs"])
log = get_logger(__name__)


@router.post("/briefs", response_model=BriefResponse)
def create_brief_endpoint(
    payload: BriefRequest,
    settings: Settings = Depends(get_app_settings),
) -> BriefResponse:
    analysis = analyze_intake(payload.intake)

    existing_version = payload.existing_version
    if existing_version is None and payload.previous_brief is not None:
        existing_version = payload.previous_brief.meta.brief_version

    brief = generate_campaign_brief(
        BriefGenerationInput(
            analysis=analysis,
            channels=payload.channels,
            assets=payload.assets,
            engine_version=settings.brief_engine_version,
            existing_version=existing_version,
        )
    )
    brief = merge_locked_fields(brief, payload.previous_brief, payload.locked_fields)

    try:
        prompts = generate_drafting_prompts(brief, analysis.primary_archetype, analysis.secondary_archetype)
    except ProhibitedLanguageError as e:
        log.warning("Drafting prompt blocked", extra={"prompt": e.label, "phrase": e.phrase})
        raise UnsafePromptError(str(e), details={"prompt": e.label, "phrase": e.phrase}) from e

    return BriefResponse(brief=brief, prompts=prompts)
