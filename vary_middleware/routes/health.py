"""
vary_middleware.routes.health

Purpose:
    Health endpoint for container/orchestrator checks.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from fastapi import APIRouter

from vary_middleware.contracts.api_paths import ApiPaths
from vary_middleware.contracts.api_tags import ApiTags

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health)
def health() -> dict:
    return {"ok": True}
