"""
prototype_kit.web.routes.pages

Purpose:
    GET handlers that render a version's HTML form pages.
    "/v1/question-1" renders "v1/question-1.html"; "/v1/" renders "v1/index.html".

Notes:
    - Pages live in the version's own template folder, so each version can
      diverge freely after it is duplicated.
    - Missing templates raise PrototypeError (404 envelope). Jinja's loader
      refuses paths that escape the template dir.
    - A mounted version with no template folder is a CONFIG_ERROR (500).

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status
from jinja2 import TemplateNotFound
from starlette.responses import Response
from starlette.templating import Jinja2Templates

from prototype_kit.shared.version_mount import VersionMount
from prototype_kit.web.contracts.page_paths import RouteTags
from prototype_kit.web.errors import page_not_found, version_not_configured
from prototype_kit.web.middleware.redirect_prefix import mount_prefix_for
from prototype_kit.web.settings import Settings
from prototype_kit.web.templating import page_template_name

_tags = RouteTags()


def create_page_router(
    mount: VersionMount, templates: Jinja2Templates, settings: Settings
) -> APIRouter:
    router = APIRouter(tags=[_tags.pages])
    version_dir = settings.template_dir / mount.name

    @router.get("/{page_path:path}", include_in_schema=False)
    def render_page(page_path: str, request: Request) -> Response:
        if not version_dir.is_dir():
            raise version_not_configured(mount.name, version_dir)

        name = page_template_name(mount.name, page_path)
        try:
            templates.get_template(name)
        except TemplateNotFound:
            raise page_not_found(mount.name, page_path or "index") from None

        return templates.TemplateResponse(
            request,
            name,
            {
                "version": mount.name,
                "base_path": mount_prefix_for(request),
                "versions": settings.mounts(),
            },
        )

    # Pages only answer GET; other methods on unknown paths get the framework 404.
    @router.api_route(
        "/{page_path:path}",
        methods=["POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    def unknown_submission(page_path: str) -> Response:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    return router
