"""
prototype_kit.web.versions

Purpose:
    Build and mount one sub-application per prototype version.

Design Notes:
    - Mounting is static: every version in Settings.versions is attached once,
      at startup, under its literal prefix ("/v1", "/v2", ...).
    - Each version app gets its own RedirectPrefixMiddleware. The middleware
      reads the prefix from the request's root_path, so two versions sharing
      the same route set never redirect into each other.
    - To add a version: duplicate its template folder
      (`prototype-kit new-version v3 --from v2`) and add it to
      PROTOTYPE_VERSIONS.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from starlette.templating import Jinja2Templates

from prototype_kit.shared.version_mount import VersionMount
from prototype_kit.web.error_handlers import register_error_handlers
from prototype_kit.web.middleware.redirect_prefix import RedirectPrefixMiddleware
from prototype_kit.web.routes.pages import create_page_router
from prototype_kit.web.routes.questions import create_question_router
from prototype_kit.web.settings import Settings

logger = logging.getLogger(__name__)


def create_version_app(
    mount: VersionMount, settings: Settings, templates: Jinja2Templates
) -> FastAPI:
    app = FastAPI(
        title=f"{settings.service_name} {mount.name}",
        version=settings.service_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_middleware(RedirectPrefixMiddleware)

    register_error_handlers(app)

    app.include_router(create_question_router(settings))
    app.include_router(create_page_router(mount, templates, settings))

    return app


def mount_versions(app: FastAPI, settings: Settings, templates: Jinja2Templates) -> list[VersionMount]:
    mounts = settings.mounts()
    for mount in mounts:
        version_dir = settings.template_dir / mount.name
        if not version_dir.is_dir():
            logger.warning(
                "version %s has no template folder at %s; its pages will return CONFIG_ERROR",
                mount.name,
                version_dir,
            )

        app.mount(mount.prefix, create_version_app(mount, settings, templates), name=mount.name)
        logger.info("mounted version %s at %s", mount.name, mount.prefix)

    return mounts
