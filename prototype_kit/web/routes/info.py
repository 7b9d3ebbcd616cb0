"""
prototype_kit.web.routes.info

Purpose:
    Info endpoint listing the mounted prototype versions and their prefixes,
    so designers can see what the running process serves.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from prototype_kit.web.contracts.page_paths import QuestionPaths, RouteTags, ServicePaths
from prototype_kit.web.settings import Settings

_paths = ServicePaths()
_questions = QuestionPaths()
_tags = RouteTags()


def create_info_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=[_tags.service])

    @router.get(_paths.info)
    def info() -> dict:
        return {
            "service": settings.service_name,
            "service_version": settings.service_version,
            "redirect_status_code": settings.redirect_status_code,
            "versions": [
                {"name": m.name, "prefix": m.prefix} for m in settings.mounts()
            ],
            "question_paths": list(asdict(_questions).values()),
        }

    return router
