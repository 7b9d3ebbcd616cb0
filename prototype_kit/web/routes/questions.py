"""
prototype_kit.web.routes.questions

Purpose:
    Form-submission handlers shared by every prototype version.
    Each POST redirects to the next page with a bare, group-relative path;
    the version's RedirectPrefixMiddleware adds "/v1", "/v2", ... on the way out.

Notes:
    - create_question_router() returns a fresh router per call so each version
      sub-application owns its own copy of the routes.
    - Handlers never build the prefix themselves.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from prototype_kit.web.contracts.page_paths import QuestionPaths, RouteTags
from prototype_kit.web.settings import Settings

logger = logging.getLogger(__name__)

_paths = QuestionPaths()
_tags = RouteTags()


def create_question_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=[_tags.questions])
    status_code = settings.redirect_status_code

    def _next(path: str) -> RedirectResponse:
        logger.debug("question answered; next page %s", path)
        return RedirectResponse(url=path, status_code=status_code)

    @router.post(_paths.question_1)
    def submit_question_1() -> RedirectResponse:
        return _next(_paths.question_2)

    @router.post(_paths.question_2)
    def submit_question_2() -> RedirectResponse:
        return _next(_paths.question_1)

    # Nested pages use the full group-relative path as the redirect target
    @router.post(_paths.nested_question_1)
    def submit_nested_question_1() -> RedirectResponse:
        return _next(_paths.nested_question_2)

    @router.post(_paths.nested_question_2)
    def submit_nested_question_2() -> RedirectResponse:
        return _next(_paths.nested_question_1)

    return router
