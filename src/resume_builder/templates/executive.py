"""Executive resume template.

A dark slate name block with an amber accent bar, upper-case section
headings each underlined by an amber rule, and contact details on a
single line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, Section, TemplateId
from resume_builder.templates.primitives import WHITE, Color

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["ExecutiveResumeTemplate"]

SLATE: Color = (30, 41, 59)
AMBER: Color = (180, 83, 9)
BLOCK_HEIGHT = 48.0
ACCENT_HEIGHT = 3.0


class ExecutiveResumeTemplate(ResumeTemplate):
    """Premium layout for leadership roles."""

    template_id = TemplateId.EXECUTIVE
    name = "Executive Premium"
    description = "Sophisticated layout for senior leadership positions"

    heading_size = 13.0
    heading_color = SLATE
    contact_style = "inline"
    contact_separator = "  |  "

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        builder.rect(0, 0, builder.width, BLOCK_HEIGHT, color=SLATE)
        builder.rect(0, BLOCK_HEIGHT, builder.width, ACCENT_HEIGHT, color=AMBER)
        builder.paragraph(
            info.full_name,
            self.body_x,
            self.body_width,
            size=26,
            bold=True,
            color=WHITE,
            y=24,
            line_height=10,
        )
        if info.title.strip():
            builder.paragraph(
                info.title.upper().strip(),
                self.body_x,
                self.body_width,
                size=13,
                color=AMBER,
                y=38,
            )
        return BLOCK_HEIGHT + ACCENT_HEIGHT + 15

    def heading_label(self, section: Section) -> str:
        return section.value.upper()

    def decorate_heading(self, builder: PageBuilder) -> None:
        y = builder.y + 2
        builder.line(self.body_x, y, self.body_x + self.body_width, y, color=AMBER, width=0.4)
