"""Pydantic schemas for the AI advice endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_builder.services.resume_data import AISuggestion, ResumeData, Skill


class _CamelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ResumeReviewRequest(_CamelRequest):
    """Request body for suggestions and scoring."""

    resume_data: ResumeData = Field(description="Resume to review")
    role: str = Field(description="Target role, e.g. developer")


class EnhanceRequest(_CamelRequest):
    """Request body for rewriting a piece of resume text."""

    text: str = Field(min_length=1, description="Text to enhance")
    type: str = Field("summary", description="What the text is (summary, description...)")
    role: str = Field(description="Target role, e.g. developer")


class SuggestionsResponse(BaseModel):
    suggestions: list[AISuggestion]


class SkillSuggestionsResponse(BaseModel):
    skills: list[Skill]
