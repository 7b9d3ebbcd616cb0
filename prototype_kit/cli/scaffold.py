"""
prototype_kit.cli.scaffold

Purpose:
    Create a new prototype version by duplicating an existing version's
    template folder ("v2/" -> "v3/"). Form pages carry no absolute action,
    so the copy works unchanged under its new prefix.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from prototype_kit.shared.version_mount import VersionMount, validate_version_name

logger = logging.getLogger(__name__)


class ScaffoldError(Exception):
    """Raised when a version folder cannot be created."""


@dataclass(frozen=True)
class ScaffoldResult:
    mount: VersionMount
    source_dir: Path
    target_dir: Path
    files_copied: int


def create_version(
    template_dir: Path,
    name: str,
    *,
    source: str,
    force: bool = False,
) -> ScaffoldResult:
    """
    Copy template_dir/<source> to template_dir/<name>.

    Raises:
      ValueError for invalid version names.
      ScaffoldError when the source is missing or the target exists (without force).
    """
    mount = VersionMount.for_version(name)
    source_name = validate_version_name(source)

    if mount.name == source_name:
        raise ScaffoldError(f"Source and target version are the same: {mount.name}")

    source_dir = template_dir / source_name
    target_dir = template_dir / mount.name

    if not source_dir.is_dir():
        raise ScaffoldError(f"Source version folder not found: {source_dir}")

    if target_dir.exists():
        if not force:
            raise ScaffoldError(f"Version folder already exists: {target_dir} (use --force)")
        logger.info("removing existing folder %s", target_dir)
        shutil.rmtree(target_dir)

    shutil.copytree(source_dir, target_dir)
    files_copied = sum(1 for p in target_dir.rglob("*") if p.is_file())
    logger.debug("copied %d files from %s to %s", files_copied, source_dir, target_dir)

    return ScaffoldResult(
        mount=mount,
        source_dir=source_dir,
        target_dir=target_dir,
        files_copied=files_copied,
    )
