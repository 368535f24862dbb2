"""Template registry and layout entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.exceptions import UnknownTemplateError
from resume_builder.templates.base import ResumeTemplate, TemplateId
from resume_builder.templates.classic import ClassicResumeTemplate
from resume_builder.templates.creative import CreativeResumeTemplate
from resume_builder.templates.executive import ExecutiveResumeTemplate
from resume_builder.templates.minimal import MinimalResumeTemplate
from resume_builder.templates.modern import ModernResumeTemplate
from resume_builder.templates.primitives import Line, Page, Rect, Text
from resume_builder.templates.tech import TechResumeTemplate

if TYPE_CHECKING:
    from datetime import date

    from resume_builder.services.resume_data import ResumeData

__all__ = [
    "Line",
    "Page",
    "Rect",
    "ResumeTemplate",
    "TemplateId",
    "Text",
    "get_template",
    "layout",
    "list_templates",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    template.template_id.value: template
    for template in (
        ModernResumeTemplate(),
        MinimalResumeTemplate(),
        CreativeResumeTemplate(),
        ExecutiveResumeTemplate(),
        TechResumeTemplate(),
        ClassicResumeTemplate(),
    )
}


def get_template(template_id: str | TemplateId) -> ResumeTemplate:
    """Return the template registered under *template_id*.

    Raises:
        UnknownTemplateError: If no template with that id exists.
    """
    try:
        return _REGISTRY[str(template_id)]
    except KeyError:
        raise UnknownTemplateError(str(template_id), list_templates()) from None


def list_templates() -> list[str]:
    """Return template ids in picker order."""
    return list(_REGISTRY)


def layout(
    data: ResumeData,
    template_id: str | TemplateId,
    *,
    generated_on: date | None = None,
) -> Page:
    """Lay *data* out with the template registered under *template_id*."""
    return get_template(template_id).layout(data, generated_on=generated_on)
