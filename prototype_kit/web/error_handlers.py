"""
prototype_kit.web.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures request_id is always included.

Notes:
    - Registered on the root app and on every version sub-application;
      mounted FastAPI apps do not inherit the parent's handlers.
    - Unknown routes are left to the framework's default 404.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from prototype_kit.web.contracts.error_contract import ErrorCode, ErrorResponse
from prototype_kit.web.errors import PrototypeError
from prototype_kit.web.logging.request_context import request_id_ctx_var

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return "-"


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on a FastAPI app.
    """

    @app.exception_handler(PrototypeError)
    async def handle_prototype_error(request: Request, exc: PrototypeError) -> JSONResponse:
        rid = _get_request_id(request)
        logger.info("prototype error: %s", exc)
        payload = ErrorResponse(
            request_id=rid,
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in prototype request", exc_info=exc)

        rid = _get_request_id(request)
        payload = ErrorResponse(
            request_id=rid,
            error_code=ErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
