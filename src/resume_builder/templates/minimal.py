"""Minimal resume template.

No colour at all: name and title centred on the page, a horizontal rule
under the header, and the contact fields joined on one centred line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, TemplateId

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["MinimalResumeTemplate"]


class MinimalResumeTemplate(ResumeTemplate):
    """Centred, colourless layout."""

    template_id = TemplateId.MINIMAL
    name = "Minimalist Elite"
    description = "Ultra-clean design for maximum impact and readability"

    contact_style = "centered"
    contact_separator = " · "

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        y = 30.0
        lines = builder.paragraph(
            info.full_name,
            self.body_x,
            self.body_width,
            size=24,
            bold=True,
            y=y,
            line_height=10,
            align="center",
        )
        y += 10 * max(lines, 1)

        if info.title.strip():
            lines = builder.paragraph(
                info.title.strip(),
                self.body_x,
                self.body_width,
                size=14,
                y=y,
                line_height=7,
                align="center",
            )
            y += 7 * (lines - 1) + 15

        builder.line(self.body_x, y, builder.width - self.body_x, y)
        return y + 15
