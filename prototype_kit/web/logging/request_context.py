"""
prototype_kit.web.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Carries the request id and the mount prefix of the version being served
    so both show up in log lines.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)

mount_prefix_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "mount_prefix",
    default=None,
)
