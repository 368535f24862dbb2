"""Classic resume template.

Times throughout, centred name, title and contact line, and section
headings underlined by full-width black rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, TemplateId

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["ClassicResumeTemplate"]


class ClassicResumeTemplate(ResumeTemplate):
    """Traditional layout for corporate positions."""

    template_id = TemplateId.CLASSIC
    name = "Classic Executive"
    description = "Traditional format ideal for corporate positions"

    font = "times"
    body_size = 11.0
    heading_size = 13.0
    contact_style = "centered"

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        y = 28.0
        lines = builder.paragraph(
            info.full_name,
            self.body_x,
            self.body_width,
            size=22,
            bold=True,
            font=self.font,
            y=y,
            line_height=9,
            align="center",
        )
        y += 9 * max(lines, 1)

        if info.title.strip():
            lines = builder.paragraph(
                info.title.strip(),
                self.body_x,
                self.body_width,
                size=13,
                font=self.font,
                y=y,
                align="center",
            )
            y += self.line_height * lines
        return y + 6

    def decorate_heading(self, builder: PageBuilder) -> None:
        y = builder.y + 2
        builder.line(self.body_x, y, self.body_x + self.body_width, y, width=0.3)
