"""
prototype_kit.web.templating

Purpose:
    Jinja2 template setup for the prototype pages.
    One folder per version under the template dir ("v1/", "v2/", ...) plus
    shared layout files at the top level.

Created:
    2026-10-19
"""

from __future__ import annotations

from pathlib import Path

from starlette.templating import Jinja2Templates


def create_templates(template_dir: Path) -> Jinja2Templates:
    return Jinja2Templates(directory=str(template_dir))


def page_template_name(version: str, page_path: str) -> str:
    """
    Map a group-relative request path onto a template name.

    ""                    -> "v1/index.html"
    "question-1"          -> "v1/question-1.html"
    "nested/"             -> "v1/nested/index.html"
    "nested/question-2"   -> "v1/nested/question-2.html"
    """
    path = page_path.strip().strip("/")
    if not path:
        return f"{version}/index.html"
    if page_path.endswith("/"):
        return f"{version}/{path}/index.html"
    return f"{version}/{path}.html"
