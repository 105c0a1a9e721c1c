"""
Shared API router.

Aggregates the sub-routers from northnode.api.routes.*. No top-level prefix:
each sub-router owns its path under /api/...

- northnode.api.routes.governance -> /api/governance
- northnode.api.routes.strategy   -> /api/strategy
- northnode.api.routes.briefs     -> /api/briefs
"""

from __future__ import annotations

from fastapi import APIRouter

from northnode.api.routes import briefs, governance, strategy

__all__ = ["router"]

router = APIRouter()
router.include_router(governance.router)
router.include_router(strategy.router)
router.include_router(briefs.router)
