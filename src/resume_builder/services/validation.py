"""Per-step schema checks for resume drafts.

Each leaf (personal info, education, skill, project) is validated on its
own so that a wizard step is only ever blocked by its own fields.  Checks
return a list of :class:`FieldError`; an empty list means valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from resume_builder.exceptions import ResumeValidationError
from resume_builder.services.resume_data import (
    Education,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FieldError",
    "validate_education",
    "validate_personal_info",
    "validate_project",
    "validate_resume",
    "validate_skill",
]

_URL_ADAPTER = TypeAdapter(HttpUrl)

# Messages shown next to the offending form field.
_MESSAGES = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Invalid email format",
    "degree": "Degree is required",
    "institution": "Institution is required",
    "name": "Skill name is required",
    "title": "Project title is required",
}


@dataclass(frozen=True)
class FieldError:
    """A single failed check, keyed by the field it belongs to."""

    field: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}


def _optional_url(value: str) -> str:
    if value == "":
        return value
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Must be a valid URL") from None
    return value


class _StrictModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class _PersonalInfoSchema(_StrictModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    title: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""

    @field_validator("linkedin", "github")
    @classmethod
    def check_urls(cls, value: str) -> str:
        return _optional_url(value)


class _EducationSchema(_StrictModel):
    degree: str = Field(min_length=1)
    institution: str = Field(min_length=1)
    field_of_study: str = ""
    gpa: str = ""
    start_year: int | None = None
    end_year: int | None = None


class _SkillSchema(_StrictModel):
    name: str = Field(min_length=1)
    category: str = ""


class _ProjectSchema(_StrictModel):
    title: str = Field(min_length=1)
    description: str = ""
    link: str = ""
    github: str = ""
    technologies: tuple[str, ...] = ()

    @field_validator("link", "github")
    @classmethod
    def check_urls(cls, value: str) -> str:
        return _optional_url(value)


def _collect(schema: type[BaseModel], values: dict[str, Any], prefix: str = "") -> list[FieldError]:
    """Run *schema* over *values* and flatten failures into ``FieldError``s."""
    try:
        schema.model_validate(values)
    except PydanticValidationError as exc:
        errors: list[FieldError] = []
        seen: set[str] = set()
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            if field in seen:
                continue
            seen.add(field)
            reason = _MESSAGES.get(field)
            if reason is None:
                reason = str(err["msg"]).removeprefix("Value error, ")
            errors.append(FieldError(f"{prefix}{field}", reason))
        return errors
    return []


def validate_personal_info(info: PersonalInfo) -> list[FieldError]:
    return _collect(_PersonalInfoSchema, info.model_dump())


def validate_education(entry: Education, *, prefix: str = "") -> list[FieldError]:
    return _collect(_EducationSchema, entry.model_dump(), prefix)


def validate_skill(skill: Skill, *, prefix: str = "") -> list[FieldError]:
    return _collect(_SkillSchema, skill.model_dump(), prefix)


def validate_project(project: Project, *, prefix: str = "") -> list[FieldError]:
    return _collect(_ProjectSchema, project.model_dump(), prefix)


def validate_resume(candidate: ResumeData | dict[str, Any]) -> ResumeData:
    """Validate a complete resume.

    Args:
        candidate: A ``ResumeData`` or its JSON-compatible dict form
            (camelCase or snake_case keys).

    Returns:
        The validated ``ResumeData``.

    Raises:
        ResumeValidationError: With every failing field when any leaf is
            invalid or the payload has the wrong shape.
    """
    if isinstance(candidate, ResumeData):
        data = candidate
    else:
        try:
            data = ResumeData.model_validate(candidate)
        except PydanticValidationError as exc:
            raise ResumeValidationError(
                [
                    FieldError(".".join(str(p) for p in err["loc"]), str(err["msg"]))
                    for err in exc.errors()
                ]
            ) from exc

    errors = validate_personal_info(data.personal_info)
    for i, entry in enumerate(data.education):
        errors.extend(validate_education(entry, prefix=f"education.{i}."))
    for i, skill in enumerate(data.skills):
        errors.extend(validate_skill(skill, prefix=f"skills.{i}."))
    for i, project in enumerate(data.projects):
        errors.extend(validate_project(project, prefix=f"projects.{i}."))

    if errors:
        logger.warning("Resume validation failed: %s", errors)
        raise ResumeValidationError(errors)
    return data
