"""
prototype_kit.web.logging.logging_config

Purpose:
    Central logging configuration for the prototype web app.
    Ensures request_id and the version mount prefix are present in logs
    (including uvicorn.access and uvicorn.error).

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from prototype_kit.web.logging.request_context_filter import RequestContextFilter

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | request_id=%(request_id)s | prefix=%(mount_prefix)s"
    " | %(name)s | %(message)s"
)


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestContextFilter())
    return handler


def _configure_logger(
    logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool
) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level_name: str = "INFO") -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = _make_handler(level)

    # Root/app logs (don’t clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, level, clear_handlers=True)
