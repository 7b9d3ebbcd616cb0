"""
prototype_kit.shared.redirects

Purpose:
    Pure helpers that rewrite redirect targets so they stay inside the route
    group (prototype version) that issued them.

Rules (applied in order):
    - Empty prefix (group mounted at the root) -> target unchanged.
    - Target not root-relative (relative path, scheme URL, protocol-relative
      "//host") -> target unchanged.
    - Target already under the prefix -> target unchanged (idempotent).
    - Target already under the group's own mount, with the prefix also
      carrying an outer root path -> outer root + target.
    - Otherwise -> prefix + target.

Design Notes:
    - Prefix matching compares whole path segments: "/v1" owns "/v1" and
      "/v1/...", but not "/v10/...".
    - No validation beyond these checks; malformed input passes through.

Used By:
    - prototype_kit.web.middleware.redirect_prefix

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Optional

# Characters that may legally follow a complete prefix segment.
_SEGMENT_BOUNDARIES = ("/", "?", "#")


def normalize_mount_prefix(raw: Optional[str]) -> str:
    """
    Normalize a mount prefix into "/name" form.

    "v1", "/v1", "/v1/" -> "/v1"
    None, "", "/"       -> ""   (root mount; nothing to prepend)
    """
    if raw is None:
        return ""
    s = str(raw).strip().strip("/")
    if not s:
        return ""
    return "/" + s


def is_root_relative(target: str) -> bool:
    """
    True when target is a path on the same host, e.g. "/question-2".

    "//example.com" and "/\\example.com" are treated by browsers as
    protocol-relative URLs and so are not root-relative.
    """
    if not target or not target.startswith("/"):
        return False
    return not target.startswith(("//", "/\\"))


def has_mount_prefix(target: str, prefix: str) -> bool:
    if not prefix or not target.startswith(prefix):
        return False
    rest = target[len(prefix):]
    return rest == "" or rest.startswith(_SEGMENT_BOUNDARIES)


def prefix_redirect_target(
    target: str, prefix: Optional[str], *, mount_path: Optional[str] = None
) -> str:
    """
    Return target rewritten to live under prefix (see module rules).

    mount_path is the group's own mount ("/v1") when prefix also carries an
    outer root path ("/proto/v1"). A target already under the group's own
    mount only gets the outer part: "/v1/question-2" -> "/proto/v1/question-2".
    """
    norm = normalize_mount_prefix(prefix)
    if not norm:
        return target
    if not is_root_relative(target):
        return target
    if has_mount_prefix(target, norm):
        return target

    own = normalize_mount_prefix(mount_path)
    if own and own != norm and norm.endswith(own) and has_mount_prefix(target, own):
        return norm[: -len(own)] + target

    return norm + target
