"""Pydantic schemas for the wizard and draft endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_builder.api.schemas.common import FieldErrorResponse
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.wizard import DEFAULT_SKILL_CATEGORY, TOTAL_STEPS


class WizardStateResponse(BaseModel):
    """Current wizard position plus the draft it is editing."""

    step: int = Field(ge=1, le=TOTAL_STEPS)
    step_title: str
    total_steps: int = TOTAL_STEPS
    progress: float = Field(description="Percentage through the wizard")
    completed: bool
    data: ResumeData


class StepResultResponse(BaseModel):
    """Outcome of a wizard transition."""

    ok: bool
    step: int
    errors: list[FieldErrorResponse] = Field(default_factory=list)


class RoleRequest(BaseModel):
    role: str


class SummaryRequest(BaseModel):
    summary: str = ""


class SkillRequest(BaseModel):
    name: str
    category: str = DEFAULT_SKILL_CATEGORY


class ProjectRequest(BaseModel):
    """Raw project form input; technologies are comma separated."""

    title: str
    description: str = ""
    technologies: str = Field("", description="Comma-separated list, e.g. 'Python, SQL'")
    link: str = ""
    github: str = ""
