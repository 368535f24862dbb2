"""Template-agnostic data contracts for resume building.

These models define the shape of the draft that flows from the wizard to
every resume template.  All of them are frozen: an edit replaces the whole
object (``model_copy(update=...)``) rather than mutating a field in place.

Field types here are deliberately permissive so that a half-filled draft is
always representable; the strict per-step checks live in
:mod:`resume_builder.services.validation`.

The JSON form uses camelCase keys (``personalInfo``, ``startYear``...);
both the alias and the Python field name are accepted on input.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "AISuggestion",
    "Education",
    "EnhancedText",
    "PersonalInfo",
    "Project",
    "ResumeData",
    "ResumeScore",
    "Skill",
    "default_resume",
]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class PersonalInfo(_ResumeModel):
    """Name and contact details shown in the resume header."""

    first_name: str = ""
    last_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Education(_ResumeModel):
    """A single education record."""

    degree: str = ""
    field_of_study: str = ""
    institution: str = ""
    gpa: str = ""
    start_year: int | None = None
    end_year: int | None = None


class Skill(_ResumeModel):
    """A skill; insertion order is display order."""

    name: str
    category: str = ""


class Project(_ResumeModel):
    """A portfolio project."""

    title: str
    description: str = ""
    link: str = ""
    github: str = ""
    technologies: tuple[str, ...] = ()


class ResumeData(_ResumeModel):
    """Aggregate root for a draft resume; every field has an empty default."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: tuple[Education, ...] = ()
    skills: tuple[Skill, ...] = ()
    projects: tuple[Project, ...] = ()
    summary: str = ""
    selected_role: str = ""

    def to_json(self) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=2)


def default_resume() -> ResumeData:
    """Return the canonical all-empty draft."""
    return ResumeData()


# ---------------------------------------------------------------------------
# AI side-inputs (display only, never merged into ResumeData)
# ---------------------------------------------------------------------------


class AISuggestion(_ResumeModel):
    type: Literal["skill", "improvement", "content"]
    title: str
    description: str
    priority: Literal["low", "medium", "high"]


class ResumeScore(_ResumeModel):
    score: float = Field(ge=0, le=10)
    feedback: str
    suggestions: tuple[AISuggestion, ...] = ()


class EnhancedText(_ResumeModel):
    enhanced: str
    explanation: str = ""
