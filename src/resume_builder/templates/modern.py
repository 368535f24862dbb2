"""Modern resume template.

A full-width blue band carries the name and title in white; everything
else flows below it in one left-aligned column with labelled contact lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, TemplateId
from resume_builder.templates.primitives import WHITE, Color

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["ModernResumeTemplate"]

BLUE: Color = (59, 130, 246)
BAND_HEIGHT = 40.0
NAME_LINE_HEIGHT = 9.0


class ModernResumeTemplate(ResumeTemplate):
    """Header-band layout for tech roles."""

    template_id = TemplateId.MODERN
    name = "Modern Professional"
    description = "Clean layout with header highlight perfect for tech roles"

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        name_lines = builder.measurer.wrap(info.full_name, self.body_width, size=24, bold=True)
        # Each extra name line pushes the title down and grows the band with it.
        extra = NAME_LINE_HEIGHT * max(len(name_lines) - 1, 0)
        band_height = BAND_HEIGHT + extra

        builder.rect(0, 0, builder.width, band_height, color=BLUE)
        builder.paragraph(
            info.full_name,
            self.body_x,
            self.body_width,
            size=24,
            bold=True,
            color=WHITE,
            y=25,
            line_height=NAME_LINE_HEIGHT,
        )
        if info.title.strip():
            builder.paragraph(
                info.title.strip(),
                self.body_x,
                self.body_width,
                size=14,
                color=WHITE,
                y=35 + extra,
            )
        return band_height + 15
