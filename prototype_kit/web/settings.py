# prototype_kit/web/settings.py
"""
prototype_kit.web.settings

Purpose:
    Centralized configuration for the prototype web app.
    Versions to mount, template location, and redirect behavior come from here
    instead of being hard-coded in route modules.

Environment:
    PROTOTYPE_SERVICE_NAME     service title (default "prototype-kit")
    PROTOTYPE_VERSIONS         comma-separated version names (default "v1,v2")
    PROTOTYPE_TEMPLATE_DIR     directory holding one sub-folder per version
    PROTOTYPE_REDIRECT_STATUS  status code for question redirects (default 302)
    PROTOTYPE_LOG_LEVEL        logging level name (default INFO)

Created:
    2026-10-19
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from prototype_kit.shared.version_mount import VersionMount, validate_version_name

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_REDIRECT_STATUS_CODES = (301, 302, 303, 307, 308)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    service_name: str = Field(default="prototype-kit")
    service_version: str = Field(default="0.1.0")

    versions: tuple[str, ...] = Field(default=("v1", "v2"))
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)

    redirect_status_code: int = Field(default=302)
    log_level: str = Field(default="INFO")

    @field_validator("versions", mode="before")
    @classmethod
    def split_versions(cls, v: Any) -> Any:
        if isinstance(v, str):
            return tuple(part for part in v.split(",") if part.strip())
        return v

    @field_validator("versions")
    @classmethod
    def validate_versions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        names = tuple(validate_version_name(n) for n in v)
        seen: set[str] = set()
        for n in names:
            if n in seen:
                raise ValueError(f"Duplicate version: {n}.")
            seen.add(n)
        return names

    @field_validator("redirect_status_code")
    @classmethod
    def validate_redirect_status(cls, v: int) -> int:
        if v not in _REDIRECT_STATUS_CODES:
            allowed = ", ".join(str(c) for c in _REDIRECT_STATUS_CODES)
            raise ValueError(f"Unsupported redirect status {v}. Allowed values: {allowed}.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level {v!r}. Allowed values: {', '.join(_LOG_LEVELS)}.")
        return level

    def mounts(self) -> list[VersionMount]:
        return [VersionMount.for_version(name) for name in self.versions]


# ---------------------------------------------------------------------------
# Env Parsing Helpers
# ---------------------------------------------------------------------------

def _as_int(raw: str | None, *, default: int | None = None) -> int | None:
    """
    Parse an environment variable-ish value into an int.

    Accepts:
      - None / "" -> default
      - "303" -> 303
    Raises:
      ValueError for non-integer strings.
    """
    if raw is None:
        return default
    s = str(raw).strip()
    if not s:
        return default
    return int(s)


def _set_if_present(values: Dict[str, Any], key: str, raw: str | None) -> None:
    if raw is None or not str(raw).strip():
        return
    values[key] = str(raw).strip()


def get_settings() -> Settings:
    values: Dict[str, Any] = {}

    _set_if_present(values, "service_name", os.getenv("PROTOTYPE_SERVICE_NAME"))
    _set_if_present(values, "versions", os.getenv("PROTOTYPE_VERSIONS"))
    _set_if_present(values, "template_dir", os.getenv("PROTOTYPE_TEMPLATE_DIR"))
    _set_if_present(values, "log_level", os.getenv("PROTOTYPE_LOG_LEVEL"))

    status_code = _as_int(os.getenv("PROTOTYPE_REDIRECT_STATUS"), default=None)
    if status_code is not None:
        values["redirect_status_code"] = status_code

    return Settings(**values)
