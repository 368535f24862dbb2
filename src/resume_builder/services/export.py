"""Export pipeline: lay a resume out, render it to PDF, name the file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.errors import FPDFException

from resume_builder.exceptions import RenderError, TemplateNotSelectedError
from resume_builder.templates import Line, Rect, Text, layout
from resume_builder.templates.metrics import to_latin1

if TYPE_CHECKING:
    from datetime import date

    from resume_builder.services.resume_data import PersonalInfo, ResumeData
    from resume_builder.templates import Page, TemplateId

logger = logging.getLogger(__name__)

__all__ = [
    "ExportArtifact",
    "export_pdf",
    "render_page",
    "resume_filename",
]

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class ExportArtifact:
    """A downloadable file held in memory."""

    filename: str
    content: bytes
    media_type: str


def _sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in filenames and collapse whitespace."""
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    return re.sub(r"\s+", "_", sanitized.strip())


def resume_filename(info: PersonalInfo) -> str:
    """Return ``{first}_{last}_Resume.pdf`` with whitespace runs as underscores."""
    parts = [p.strip() for p in (info.first_name, info.last_name) if p.strip()]
    parts.append("Resume")
    return _sanitize_filename("_".join(parts)) + ".pdf"


def render_page(page: Page, *, title: str | None = None) -> bytes:
    """Draw every primitive of *page* onto a single PDF page.

    Raises:
        RenderError: If fpdf2 rejects a primitive.
    """
    pdf = FPDF(unit="mm", format=(page.width, page.height))
    pdf.set_auto_page_break(auto=False)
    if title:
        pdf.set_title(to_latin1(title))

    try:
        pdf.add_page()
        for primitive in page.primitives:
            if isinstance(primitive, Rect):
                pdf.set_fill_color(*primitive.color)
                pdf.set_draw_color(*primitive.color)
                pdf.rect(
                    primitive.x,
                    primitive.y,
                    primitive.w,
                    primitive.h,
                    style="F" if primitive.filled else "D",
                )
            elif isinstance(primitive, Line):
                pdf.set_draw_color(*primitive.color)
                pdf.set_line_width(primitive.width)
                pdf.line(primitive.x1, primitive.y1, primitive.x2, primitive.y2)
            elif isinstance(primitive, Text):
                pdf.set_font(primitive.font, "B" if primitive.bold else "", primitive.font_size)
                pdf.set_text_color(*primitive.color)
                pdf.text(primitive.x, primitive.y, to_latin1(primitive.content))
        return bytes(pdf.output())
    except FPDFException as exc:
        raise RenderError(f"Failed to render resume PDF: {exc}") from exc


def export_pdf(
    data: ResumeData,
    template_id: str | TemplateId | None,
    *,
    generated_on: date | None = None,
) -> ExportArtifact:
    """Produce the resume PDF for *data* using *template_id*.

    Args:
        data: Resume to export; it is only read.
        template_id: Template chosen by the caller.  There is no default.
        generated_on: Date for the "Generated on" footer, omitted when None.

    Raises:
        TemplateNotSelectedError: If *template_id* is empty.
        UnknownTemplateError: If *template_id* is not registered.
        RenderError: If PDF rendering fails.
    """
    if not template_id:
        raise TemplateNotSelectedError("Please select a template before exporting")

    page = layout(data, template_id, generated_on=generated_on)
    info = data.personal_info
    content = render_page(page, title=f"{info.full_name} Resume".strip())
    filename = resume_filename(info)
    logger.info("Exported %s with template %s (%d bytes)", filename, template_id, len(content))
    return ExportArtifact(filename=filename, content=content, media_type=PDF_MEDIA_TYPE)
