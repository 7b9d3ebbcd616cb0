"""
prototype_kit.shared.version_mount

Purpose:
    The route-group value object: one prototype version and the literal path
    prefix it is mounted under.

Design Notes:
    - Frozen: a mount prefix is assigned once at startup and never changes.
    - Version names are a single path segment (letters, digits, '-', '_', '.').

Created:
    2026-10-19
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from prototype_kit.shared.redirects import normalize_mount_prefix

_VERSION_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]{0,63}")


def validate_version_name(raw: str) -> str:
    """
    Normalize and validate a version name ("/v1/" -> "v1").

    Raises:
      ValueError for empty names, nested paths, or unsupported characters.
    """
    name = str(raw).strip().strip("/")
    if not _VERSION_NAME_RE.fullmatch(name):
        raise ValueError(
            f"Invalid version name {raw!r}. Use a single path segment of letters/digits "
            "with optional '.', '-' or '_' (1–64 chars)."
        )
    return name


@dataclass(frozen=True)
class VersionMount:
    name: str
    prefix: str

    @classmethod
    def for_version(cls, raw_name: str) -> "VersionMount":
        name = validate_version_name(raw_name)
        return cls(name=name, prefix=normalize_mount_prefix(name))
