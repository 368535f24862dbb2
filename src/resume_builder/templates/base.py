"""Abstract base class and shared layout machinery for resume templates.

Every template lays the page out the same way: it draws its header, then
walks the sections in a fixed order keeping a running vertical cursor.  A
section with no backing data is skipped outright, emitting nothing and
leaving the cursor where it was.  Templates only differ in their header and
in the handful of class attributes and hooks below.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Literal

from resume_builder.templates.metrics import TextMeasurer
from resume_builder.templates.primitives import (
    A4_HEIGHT,
    A4_WIDTH,
    BLACK,
    GRAY,
    Color,
    Line,
    Page,
    Primitive,
    Rect,
    Text,
)

if TYPE_CHECKING:
    from datetime import date

    from resume_builder.services.resume_data import Education, PersonalInfo, ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "PageBuilder",
    "ResumeTemplate",
    "Section",
    "TemplateId",
    "section_has_content",
]

LINE_HEIGHT = 6.0
SECTION_GAP = 10.0
BOTTOM_MARGIN = 15.0


class TemplateId(StrEnum):
    MODERN = "modern"
    MINIMAL = "minimal"
    CREATIVE = "creative"
    EXECUTIVE = "executive"
    TECH = "tech"
    CLASSIC = "classic"


class Section(StrEnum):
    CONTACT = "contact"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    SUMMARY = "summary"


SECTION_ORDER: tuple[Section, ...] = tuple(Section)


# ---------------------------------------------------------------------------
# Section content helpers
# ---------------------------------------------------------------------------


def visible_education(data: ResumeData) -> list[Education]:
    return [e for e in data.education if e.degree.strip() or e.institution.strip()]


def skill_names(data: ResumeData) -> list[str]:
    return [s.name.strip() for s in data.skills if s.name.strip()]


def contact_fields(info: PersonalInfo) -> list[tuple[str, str]]:
    """Non-empty ``(label, value)`` contact pairs in display order."""
    pairs = [
        ("Email", info.email),
        ("Phone", info.phone),
        ("Location", info.location),
        ("LinkedIn", info.linkedin),
        ("GitHub", info.github),
    ]
    return [(label, value.strip()) for label, value in pairs if value.strip()]


def section_has_content(section: Section, data: ResumeData) -> bool:
    if section is Section.CONTACT:
        return bool(contact_fields(data.personal_info))
    if section is Section.EDUCATION:
        return bool(visible_education(data))
    if section is Section.SKILLS:
        return bool(skill_names(data))
    if section is Section.PROJECTS:
        return bool(data.projects)
    return bool(data.summary.strip())


def degree_line(entry: Education) -> str:
    degree = entry.degree.strip()
    field = entry.field_of_study.strip()
    if degree and field:
        return f"{degree} in {field}"
    return degree or field


def year_range(entry: Education) -> str | None:
    if entry.start_year is not None and entry.end_year is not None:
        return f"{entry.start_year} - {entry.end_year}"
    return None


# ---------------------------------------------------------------------------
# Page builder
# ---------------------------------------------------------------------------


class PageBuilder:
    """Collects primitives and tracks the vertical cursor ``y``."""

    def __init__(
        self,
        width: float = A4_WIDTH,
        height: float = A4_HEIGHT,
        measurer: TextMeasurer | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.measurer = measurer or TextMeasurer()
        self.y = 0.0
        self._primitives: list[Primitive] = []

    def rect(
        self, x: float, y: float, w: float, h: float, *, color: Color, filled: bool = True
    ) -> None:
        self._primitives.append(Rect(x, y, w, h, color, filled))

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: Color = BLACK,
        width: float = 0.5,
    ) -> None:
        self._primitives.append(Line(x1, y1, x2, y2, color, width))

    def text(
        self,
        content: str,
        x: float,
        y: float,
        *,
        size: float,
        bold: bool = False,
        color: Color = BLACK,
        font: str = "helvetica",
    ) -> None:
        self._primitives.append(Text(content, x, y, size, bold, color, font))

    def paragraph(
        self,
        content: str,
        x: float,
        width: float,
        *,
        size: float,
        bold: bool = False,
        color: Color = BLACK,
        font: str = "helvetica",
        line_height: float = LINE_HEIGHT,
        y: float | None = None,
        align: Literal["left", "center"] = "left",
    ) -> int:
        """Wrap *content* to *width* and emit one Text per line.

        With ``y`` omitted the lines start at the cursor, which then moves
        down one ``line_height`` per line.  With an explicit ``y`` the
        cursor is left untouched.

        Returns:
            The number of lines emitted.
        """
        lines = self.measurer.wrap(content, width, size=size, bold=bold, font=font)
        top = self.y if y is None else y
        for i, line in enumerate(lines):
            line_x = x
            if align == "center":
                line_width = self.measurer.width(line, size=size, bold=bold, font=font)
                line_x = x + (width - line_width) / 2
            self.text(
                line, line_x, top + i * line_height, size=size, bold=bold, color=color, font=font
            )
        if y is None:
            self.y += len(lines) * line_height
        return len(lines)

    def build(self) -> Page:
        return Page(tuple(self._primitives), self.width, self.height)


# ---------------------------------------------------------------------------
# Template base class
# ---------------------------------------------------------------------------


class ResumeTemplate(ABC):
    """Interface that every resume template must implement.

    Subclasses draw their header in :meth:`draw_header`; the section loop,
    wrapping and cursor bookkeeping are shared.
    """

    template_id: ClassVar[TemplateId]
    name: ClassVar[str]
    description: ClassVar[str] = ""
    sections: ClassVar[tuple[Section, ...]] = SECTION_ORDER

    font: ClassVar[str] = "helvetica"
    heading_font: ClassVar[str | None] = None
    body_x: ClassVar[float] = 20.0
    body_width: ClassVar[float] = 170.0
    body_size: ClassVar[float] = 10.0
    heading_size: ClassVar[float] = 16.0
    heading_step: ClassVar[float] = 10.0
    line_height: ClassVar[float] = LINE_HEIGHT
    section_gap: ClassVar[float] = SECTION_GAP
    text_color: ClassVar[Color] = BLACK
    heading_color: ClassVar[Color] = BLACK

    # "lines": one labelled line per field; "inline"/"centered": joined.
    contact_style: ClassVar[Literal["lines", "inline", "centered"]] = "lines"
    contact_separator: ClassVar[str] = " | "
    contact_labels: ClassVar[bool] = True
    contact_heading: ClassVar[bool] = False
    footer_x: ClassVar[float] = 20.0

    def layout(self, data: ResumeData, *, generated_on: date | None = None) -> Page:
        """Lay *data* out on one page.

        Pure: the same input always yields the same primitives.  A
        "Generated on" footer is added only when *generated_on* is given.
        """
        builder = PageBuilder()
        builder.y = self.draw_header(builder, data)

        for section in self.sections:
            if not section_has_content(section, data):
                continue
            getattr(self, f"draw_{section.value}")(builder, data)
            builder.y += self.section_gap

        if builder.y > builder.height - BOTTOM_MARGIN:
            logger.warning(
                "Template %s overflows the page (cursor at %.1fmm)", self.template_id, builder.y
            )

        if generated_on is not None:
            self.draw_footer(builder, generated_on)
        return builder.build()

    @abstractmethod
    def draw_header(self, builder: PageBuilder, data: ResumeData) -> float:
        """Draw the name/title block; return the cursor for the first section."""

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    def body(self, builder: PageBuilder, content: str, *, bold: bool = False) -> int:
        return builder.paragraph(
            content,
            self.body_x,
            self.body_width,
            size=self.body_size,
            bold=bold,
            color=self.text_color,
            font=self.font,
            line_height=self.line_height,
        )

    def heading_label(self, section: Section) -> str:
        return section.value.title()

    def draw_heading(self, builder: PageBuilder, section: Section) -> None:
        lines = builder.paragraph(
            self.heading_label(section),
            self.body_x,
            self.body_width,
            size=self.heading_size,
            bold=True,
            color=self.heading_color,
            font=self.heading_font or self.font,
            y=builder.y,
        )
        self.decorate_heading(builder)
        builder.y += self.heading_step + (lines - 1) * self.line_height

    def decorate_heading(self, builder: PageBuilder) -> None:
        """Hook for rules or marks drawn next to a section heading."""

    def draw_footer(self, builder: PageBuilder, generated_on: date) -> None:
        stamp = f"Generated on {generated_on.month}/{generated_on.day}/{generated_on.year}"
        builder.text(stamp, self.footer_x, builder.height - 10, size=8, color=GRAY, font=self.font)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def draw_contact(self, builder: PageBuilder, data: ResumeData) -> None:
        if self.contact_heading:
            self.draw_heading(builder, Section.CONTACT)
        fields = contact_fields(data.personal_info)

        if self.contact_style == "lines":
            for label, value in fields:
                self.body(builder, f"{label}: {value}" if self.contact_labels else value)
            return

        joined = self.contact_separator.join(value for _, value in fields)
        builder.paragraph(
            joined,
            self.body_x,
            self.body_width,
            size=self.body_size,
            color=self.text_color,
            font=self.font,
            line_height=self.line_height,
            align="center" if self.contact_style == "centered" else "left",
        )

    def draw_education(self, builder: PageBuilder, data: ResumeData) -> None:
        self.draw_heading(builder, Section.EDUCATION)
        for i, entry in enumerate(visible_education(data)):
            if i:
                builder.y += 2
            self.body(builder, degree_line(entry))
            self.body(builder, entry.institution.strip())
            years = year_range(entry)
            if years:
                self.body(builder, years)
            if entry.gpa.strip():
                self.body(builder, f"GPA: {entry.gpa.strip()}")

    def draw_skills(self, builder: PageBuilder, data: ResumeData) -> None:
        self.draw_heading(builder, Section.SKILLS)
        self.body(builder, ", ".join(skill_names(data)))

    def draw_projects(self, builder: PageBuilder, data: ResumeData) -> None:
        self.draw_heading(builder, Section.PROJECTS)
        for i, project in enumerate(data.projects):
            if i:
                builder.y += 2
            self.body(builder, project.title, bold=True)
            if project.description.strip():
                self.body(builder, project.description.strip())
            if project.technologies:
                self.body(builder, "Technologies: " + ", ".join(project.technologies))
            if project.link.strip():
                self.body(builder, f"Link: {project.link.strip()}")
            if project.github.strip():
                self.body(builder, f"GitHub: {project.github.strip()}")

    def draw_summary(self, builder: PageBuilder, data: ResumeData) -> None:
        self.draw_heading(builder, Section.SUMMARY)
        self.body(builder, data.summary.strip())
