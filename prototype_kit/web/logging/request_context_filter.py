"""
prototype_kit.web.logging.request_context_filter

Purpose:
    Logging filter that injects request_id and mount_prefix from contextvars
    into log records.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from prototype_kit.web.logging.request_context import mount_prefix_ctx_var, request_id_ctx_var


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get() or "-"
        record.mount_prefix = mount_prefix_ctx_var.get() or "-"
        return True
