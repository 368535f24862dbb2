"""Creative resume template.

A purple sidebar runs the full page height with the name and title in
white.  The sidebar does not use the page cursor.  A second column to its
right holds Contact, Education and Skills only; Projects and Summary are
not part of this layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.templates.base import PageBuilder, ResumeTemplate, Section, TemplateId
from resume_builder.templates.primitives import WHITE, Color

if TYPE_CHECKING:
    from resume_builder.services.resume_data import ResumeData

__all__ = ["CreativeResumeTemplate"]

PURPLE: Color = (147, 51, 234)
SIDEBAR_WIDTH = 70.0
SIDEBAR_X = 10.0
SIDEBAR_TEXT_WIDTH = SIDEBAR_WIDTH - 2 * SIDEBAR_X


class CreativeResumeTemplate(ResumeTemplate):
    """Sidebar layout for design roles."""

    template_id = TemplateId.CREATIVE
    name = "Creative Portfolio"
    description = "Eye-catching side layout for design professionals"

    body_x = 80.0
    body_width = 110.0
    heading_size = 12.0
    contact_heading = True
    contact_labels = False
    footer_x = 80.0
    sections = (Section.CONTACT, Section.EDUCATION, Section.SKILLS)

    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        info = data.personal_info
        builder.rect(0, 0, SIDEBAR_WIDTH, builder.height, color=PURPLE)

        side_y = 30.0
        for part in (info.first_name.strip(), info.last_name.strip()):
            lines = builder.paragraph(
                part,
                SIDEBAR_X,
                SIDEBAR_TEXT_WIDTH,
                size=18,
                bold=True,
                color=WHITE,
                y=side_y,
                line_height=8,
            )
            side_y += 15 + 8 * max(lines - 1, 0)

        if info.title.strip():
            builder.paragraph(
                info.title.strip(),
                SIDEBAR_X,
                SIDEBAR_TEXT_WIDTH,
                size=12,
                color=WHITE,
                y=side_y,
            )
        return 30.0
