"""
Strategy intake endpoint.

POST /api/strategy/intake
- Runs the deterministic intake engine.
- Returns the planner-facing recommendation (which embeds the full analysis).
"""

from __future__ import annotations

from fastapi import APIRouter

from northnode.schemas.strategy import IntakeParams, StrategyRecommendation
from northnode.services.intake_engine import analyze_intake
from northnode.services.strategy_recommendation import build_recommendation

router = APIRouter(prefix="/api/strategy", tags=["strategy"])


@router.post("/intake", response_model=StrategyRecommendation)
def intake_endpoint(payload: IntakeParams) -> StrategyRecommendation:
    analysis = analyze_intake(payload)
    return build_recommendation(
        analysis,
        industry=payload.industry.strip(),
        audience=payload.audience.strip(),
        goals=payload.goals.strip(),
    )
