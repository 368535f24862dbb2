"""Tests for the resume data contracts and schema validation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from resume_builder.exceptions import ResumeValidationError
from resume_builder.services.resume_data import (
    Education,
    PersonalInfo,
    Project,
    ResumeData,
    ResumeScore,
    Skill,
    default_resume,
)
from resume_builder.services.validation import (
    FieldError,
    validate_education,
    validate_personal_info,
    validate_project,
    validate_resume,
    validate_skill,
)


def _valid_info(**overrides: str) -> PersonalInfo:
    values = {"first_name": "Jane", "last_name": "Doe", "email": "jane@x.io"}
    values.update(overrides)
    return PersonalInfo(**values)


class TestResumeData:
    def test_default_resume_is_empty(self) -> None:
        data = default_resume()
        assert data.personal_info.first_name == ""
        assert data.education == ()
        assert data.skills == ()
        assert data.projects == ()
        assert data.summary == ""
        assert data.selected_role == ""

    def test_models_are_frozen(self) -> None:
        data = default_resume()
        with pytest.raises(ValidationError):
            data.summary = "changed"

    def test_json_uses_camel_case_keys(self) -> None:
        data = ResumeData(
            personal_info=_valid_info(),
            education=(Education(degree="BSc", field_of_study="CS", start_year=2020),),
            selected_role="developer",
        )
        payload = json.loads(data.to_json())
        assert payload["personalInfo"]["firstName"] == "Jane"
        assert payload["education"][0]["fieldOfStudy"] == "CS"
        assert payload["education"][0]["startYear"] == 2020
        assert payload["selectedRole"] == "developer"

    def test_accepts_alias_and_field_names(self) -> None:
        by_alias = ResumeData.model_validate({"personalInfo": {"firstName": "Jane"}})
        by_name = ResumeData.model_validate({"personal_info": {"first_name": "Jane"}})
        assert by_alias == by_name

    def test_full_name_trims_missing_parts(self) -> None:
        assert PersonalInfo(first_name="Jane").full_name == "Jane"
        assert _valid_info().full_name == "Jane Doe"

    def test_score_is_bounded(self) -> None:
        with pytest.raises(ValidationError):
            ResumeScore(score=11, feedback="too high")


class TestPersonalInfoValidation:
    def test_valid(self) -> None:
        assert validate_personal_info(_valid_info()) == []

    def test_missing_first_name(self) -> None:
        errors = validate_personal_info(_valid_info(first_name="   "))
        assert FieldError("first_name", "First name is required") in errors

    def test_bad_email(self) -> None:
        errors = validate_personal_info(_valid_info(email="not-an-email"))
        assert errors == [FieldError("email", "Invalid email format")]

    def test_empty_urls_are_allowed(self) -> None:
        assert validate_personal_info(_valid_info(linkedin="", github="")) == []

    def test_malformed_url_rejected(self) -> None:
        errors = validate_personal_info(_valid_info(linkedin="not a url"))
        assert [e.field for e in errors] == ["linkedin"]
        assert errors[0].reason == "Must be a valid URL"

    def test_one_error_per_field(self) -> None:
        errors = validate_personal_info(PersonalInfo())
        fields = [e.field for e in errors]
        assert len(fields) == len(set(fields))
        assert {"first_name", "last_name", "email"} <= set(fields)


class TestLeafValidation:
    def test_education_requires_degree_and_institution(self) -> None:
        errors = validate_education(Education())
        assert {e.field for e in errors} == {"degree", "institution"}

    def test_education_years_are_not_ordered(self) -> None:
        entry = Education(degree="BSc", institution="Uni", start_year=2024, end_year=2020)
        assert validate_education(entry) == []

    def test_skill_name_required(self) -> None:
        assert validate_skill(Skill(name=" ")) == [FieldError("name", "Skill name is required")]

    def test_project_urls(self) -> None:
        project = Project(title="App", link="https://example.com", github="nope")
        errors = validate_project(project, prefix="projects.0.")
        assert errors == [FieldError("projects.0.github", "Must be a valid URL")]


class TestValidateResume:
    def test_returns_valid_resume(self) -> None:
        data = ResumeData(personal_info=_valid_info(), skills=(Skill(name="SQL"),))
        assert validate_resume(data) is data

    def test_accepts_camel_case_dict(self) -> None:
        result = validate_resume(
            {"personalInfo": {"firstName": "Jane", "lastName": "Doe", "email": "jane@x.io"}}
        )
        assert result.personal_info.full_name == "Jane Doe"

    def test_collects_nested_errors(self) -> None:
        data = ResumeData(
            personal_info=_valid_info(),
            education=(Education(degree="BSc"),),
            projects=(Project(title="App", link="bad"),),
        )
        with pytest.raises(ResumeValidationError) as exc_info:
            validate_resume(data)
        fields = {e.field for e in exc_info.value.errors}
        assert fields == {"education.0.institution", "projects.0.link"}

    def test_wrong_shape_is_reported(self) -> None:
        with pytest.raises(ResumeValidationError) as exc_info:
            validate_resume({"education": "not a list"})
        assert exc_info.value.errors
