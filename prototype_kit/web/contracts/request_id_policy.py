"""
prototype_kit.web.contracts.request_id_policy

Purpose:
    Header names used to correlate a request across logs and responses,
    including the version prefix a request was served under.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    # Incoming, checked in order
    incoming_headers: tuple[str, ...] = ("X-Request-Id", "X-Correlation-Id")

    # Outgoing
    response_header: str = "X-Request-Id"
    mount_prefix_header: str = "X-Prototype-Version-Prefix"
