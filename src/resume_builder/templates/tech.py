"""Tech resume template.

Cyan accent stripe down the left edge, monospaced name and headings
(``> skills``), and a single-line contact strip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, Section, TemplateId
from resume_builder.templates.primitives import Color

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["TechResumeTemplate"]

CYAN: Color = (8, 145, 178)
INK: Color = (15, 23, 42)
STRIPE_WIDTH = 6.0


class TechResumeTemplate(ResumeTemplate):
    """Project-forward layout for engineering roles."""

    template_id = TemplateId.TECH
    name = "Tech Innovator"
    description = "Modern tech-focused design with project highlights"

    heading_font = "courier"
    heading_size = 13.0
    heading_color = CYAN
    text_color = INK
    contact_style = "inline"

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        builder.rect(0, 0, STRIPE_WIDTH, builder.height, color=CYAN)

        y = 28.0
        lines = builder.paragraph(
            info.full_name,
            self.body_x,
            self.body_width,
            size=24,
            bold=True,
            color=INK,
            font="courier",
            y=y,
            line_height=10,
        )
        y += 10 * max(lines - 1, 0) + 9

        if info.title.strip():
            lines = builder.paragraph(
                info.title.strip(),
                self.body_x,
                self.body_width,
                size=13,
                color=CYAN,
                font="courier",
                y=y,
            )
            y += self.line_height * (lines - 1)

        y += 6
        builder.line(self.body_x, y, builder.width - self.body_x, y, color=CYAN, width=0.8)
        return y + 12

    def heading_label(self, section: Section) -> str:
        return f"> {section.value}"
