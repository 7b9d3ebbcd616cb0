"""
prototype_kit.web.main

Purpose:
    FastAPI application entrypoint for the versioned prototype.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from prototype_kit.web.contracts.page_paths import ServicePaths
from prototype_kit.web.contracts.request_id_policy import RequestIdPolicy
from prototype_kit.web.error_handlers import register_error_handlers
from prototype_kit.web.logging.logging_config import configure_logging
from prototype_kit.web.middleware.request_id import RequestIdMiddleware
from prototype_kit.web.routes.health import router as health_router
from prototype_kit.web.routes.info import create_info_router
from prototype_kit.web.settings import Settings, get_settings
from prototype_kit.web.templating import create_templates
from prototype_kit.web.versions import mount_versions

_paths = ServicePaths()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    templates = create_templates(settings.template_dir)

    @app.get(_paths.index, response_class=HTMLResponse)
    def index(request: Request) -> Response:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"service_name": settings.service_name, "versions": settings.mounts()},
        )

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(create_info_router(settings))

    # Mounts go last so service routes win over any version named like them.
    mount_versions(app, settings, templates)

    return app
