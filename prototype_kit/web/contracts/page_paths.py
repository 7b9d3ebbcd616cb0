# prototype_kit/web/contracts/page_paths.py
"""
prototype_kit.web.contracts.page_paths

Purpose:
    Central definition of the service paths and of the question pages every
    prototype version exposes. Paths are group-relative: the version prefix
    ("/v1") is never written here.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServicePaths:
    index: str = "/"
    health: str = "/health"
    info: str = "/info"


@dataclass(frozen=True)
class QuestionPaths:
    question_1: str = "/question-1"
    question_2: str = "/question-2"
    nested_question_1: str = "/nested/question-1"
    nested_question_2: str = "/nested/question-2"


@dataclass(frozen=True)
class RouteTags:
    service: str = "service"
    questions: str = "questions"
    pages: str = "pages"
