"""
prototype_kit.web.middleware.redirect_prefix

Purpose:
    Per-version redirect interceptor. Installed once on each version
    sub-application so every handler in the group can return a plain
    RedirectResponse("/question-2") and the client still lands on
    "/v1/question-2".

Design Notes:
    - The prefix comes from the request's own routing context: Starlette's
      Mount sets scope["root_path"] to the path the group was mounted at.
      No process-wide prefix registry.
    - Only 3xx responses with a Location header are touched; the rewrite
      rules live in prototype_kit.shared.redirects.
    - redirect_within_group() is the explicit alternative for code that wants
      to build the prefixed redirect itself. Both paths are idempotent, so
      combining them never double-prefixes. Its status code defaults to the
      group app's Settings.redirect_status_code (302 without settings).
    - Behind an outer root path ("/proto"), targets already under the
      group's own mount ("/v1/...") only gain the outer part.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from prototype_kit.shared.redirects import normalize_mount_prefix, prefix_redirect_target
from prototype_kit.web.contracts.request_id_policy import RequestIdPolicy
from prototype_kit.web.logging.request_context import mount_prefix_ctx_var

logger = logging.getLogger(__name__)


def mount_prefix_for(request: Request) -> str:
    """
    Prefix under which the current handler was matched ("" at the root).
    Includes any outer root path the app itself is served under.
    """
    return normalize_mount_prefix(request.scope.get("root_path", ""))


def mount_path_for(request: Request) -> str:
    """
    The group's own mount ("/v1"), without the outer root path ("/proto").
    Starlette's Mount records the outer part as scope["app_root_path"].
    """
    root_path = request.scope.get("root_path", "") or ""
    outer = request.scope.get("app_root_path", "") or ""
    if outer and root_path.startswith(outer):
        root_path = root_path[len(outer):]
    return normalize_mount_prefix(root_path)


def _default_status_code(request: Request) -> int:
    settings = getattr(request.app.state, "settings", None)
    return getattr(settings, "redirect_status_code", 302)


def redirect_within_group(
    request: Request, target: str, status_code: int | None = None
) -> RedirectResponse:
    url = prefix_redirect_target(
        target, mount_prefix_for(request), mount_path=mount_path_for(request)
    )
    if status_code is None:
        status_code = _default_status_code(request)
    return RedirectResponse(url=url, status_code=status_code)


class RedirectPrefixMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        prefix = mount_prefix_for(request)

        token = mount_prefix_ctx_var.set(prefix or None)
        try:
            response: Response = await call_next(request)
            self._rewrite_location(response, prefix, mount_path_for(request))
        finally:
            mount_prefix_ctx_var.reset(token)

        if prefix:
            response.headers[self._policy.mount_prefix_header] = prefix
        return response

    @staticmethod
    def _rewrite_location(response: Response, prefix: str, mount_path: str) -> None:
        if not 300 <= response.status_code < 400:
            return

        location = response.headers.get("location")
        if location is None:
            return

        rewritten = prefix_redirect_target(location, prefix, mount_path=mount_path)
        if rewritten != location:
            response.headers["location"] = rewritten
            logger.info("redirect prefixed: %s -> %s", location, rewritten)
        else:
            logger.debug("redirect passed through: %s", location)
