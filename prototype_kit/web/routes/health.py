"""
prototype_kit.web.routes.health

Purpose:
    Health endpoint for container/orchestrator checks.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter

from prototype_kit.web.contracts.page_paths import RouteTags, ServicePaths

_paths = ServicePaths()
_tags = RouteTags()

router = APIRouter(tags=[_tags.service])


@router.get(_paths.health)
def health() -> dict:
    return {"ok": True}
