"""
prototype_kit.web.errors

Purpose:
    Internal exception types for prototype error handling.
    Routes raise PrototypeError; global handler converts to ErrorResponse.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from prototype_kit.web.contracts.error_contract import ErrorCode


@dataclass(frozen=True)
class PrototypeError(Exception):
    status_code: int
    error_code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


def page_not_found(version: str, page: str) -> PrototypeError:
    return PrototypeError(
        status_code=404,
        error_code=ErrorCode.PAGE_NOT_FOUND,
        message=f"No page '{page}' in version '{version}'",
        details={"version": version, "page": page},
    )


def version_not_configured(version: str, version_dir: Path) -> PrototypeError:
    return PrototypeError(
        status_code=500,
        error_code=ErrorCode.CONFIG_ERROR,
        message=f"Version '{version}' is mounted but has no template folder",
        details={"version": version, "template_dir": str(version_dir)},
    )
