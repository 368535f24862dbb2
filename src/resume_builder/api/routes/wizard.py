"""Wizard routes: step navigation and per-step edits of the draft.

These handlers are ``async`` so they run on the event loop, the same thread
that owns the AI requests a step change cancels.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import get_wizard
from resume_builder.api.schemas.common import FieldErrorResponse
from resume_builder.api.schemas.wizard import (
    ProjectRequest,
    RoleRequest,
    SkillRequest,
    StepResultResponse,
    SummaryRequest,
    WizardStateResponse,
)
from resume_builder.services.resume_data import Education, PersonalInfo, Project, Skill
from resume_builder.services.validation import FieldError
from resume_builder.services.wizard import ResumeWizard, StepResult

router = APIRouter(prefix="/wizard", tags=["wizard"])

WizardDep = Annotated[ResumeWizard, Depends(get_wizard)]


def _state(wizard: ResumeWizard) -> WizardStateResponse:
    return WizardStateResponse(
        step=wizard.current_step,
        step_title=wizard.current_step.title,
        progress=wizard.progress,
        completed=wizard.completed,
        data=wizard.data,
    )


def _error_list(errors: list[FieldError] | tuple[FieldError, ...]) -> list[dict[str, str]]:
    return [FieldErrorResponse.from_error(e).model_dump() for e in errors]


def _step_result(result: StepResult) -> StepResultResponse:
    """Convert a transition outcome, raising 422 when it was refused."""
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"step": int(result.step), "errors": _error_list(result.errors)},
        )
    return StepResultResponse(ok=True, step=result.step)


def _index_or_404(kind: str, index: int, size: int) -> None:
    if index >= size:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {kind} at index {index}",
        )


@router.get("", response_model=WizardStateResponse)
async def get_state(wizard: WizardDep) -> WizardStateResponse:
    """Return the current step, progress and draft."""
    return _state(wizard)


@router.post(
    "/next",
    response_model=StepResultResponse,
    responses={422: {"description": "Current step has invalid fields"}},
)
async def next_step(wizard: WizardDep) -> StepResultResponse:
    """Validate the current step and advance (completes on the last step)."""
    return _step_result(wizard.next())


@router.post("/back", response_model=StepResultResponse)
async def previous_step(wizard: WizardDep) -> StepResultResponse:
    """Go back one step without validating."""
    return _step_result(wizard.back())


@router.post(
    "/complete",
    response_model=StepResultResponse,
    responses={422: {"description": "Wizard is not on the Summary step"}},
)
async def complete(wizard: WizardDep) -> StepResultResponse:
    """Finish the wizard from the Summary step."""
    return _step_result(wizard.complete())


@router.put("/role", response_model=WizardStateResponse)
async def select_role(request: RoleRequest, wizard: WizardDep) -> WizardStateResponse:
    wizard.select_role(request.role)
    return _state(wizard)


@router.put("/personal-info", response_model=WizardStateResponse)
async def update_personal_info(info: PersonalInfo, wizard: WizardDep) -> WizardStateResponse:
    wizard.update_personal_info(info)
    return _state(wizard)


@router.put("/education", response_model=WizardStateResponse)
async def update_education(entry: Education, wizard: WizardDep) -> WizardStateResponse:
    """Replace the primary education entry."""
    wizard.update_education(entry)
    return _state(wizard)


@router.put("/summary", response_model=WizardStateResponse)
async def update_summary(request: SummaryRequest, wizard: WizardDep) -> WizardStateResponse:
    wizard.update_summary(request.summary)
    return _state(wizard)


@router.post("/skills", response_model=WizardStateResponse)
async def add_skill(request: SkillRequest, wizard: WizardDep) -> WizardStateResponse:
    """Append a skill; a blank name leaves the draft unchanged."""
    wizard.add_skill(request.name, request.category)
    return _state(wizard)


@router.post("/skills/suggested", response_model=WizardStateResponse)
async def add_suggested_skill(skill: Skill, wizard: WizardDep) -> WizardStateResponse:
    """Append a skill picked from the AI suggestions, keeping its category."""
    wizard.add_suggested_skill(skill)
    return _state(wizard)


@router.delete(
    "/skills/{index}",
    response_model=Skill,
    responses={404: {"description": "No skill at that index"}},
)
async def remove_skill(
    index: Annotated[int, PathParam(ge=0, description="Position in the skill list")],
    wizard: WizardDep,
) -> Skill:
    _index_or_404("skill", index, len(wizard.data.skills))
    return wizard.remove_skill(index)


@router.post(
    "/projects",
    response_model=WizardStateResponse,
    responses={422: {"description": "A project URL is malformed"}},
)
async def add_project(request: ProjectRequest, wizard: WizardDep) -> WizardStateResponse:
    """Append a project; a blank title leaves the draft unchanged."""
    errors = wizard.add_project(
        request.title,
        description=request.description,
        technologies=request.technologies,
        link=request.link,
        github=request.github,
    )
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": _error_list(errors)},
        )
    return _state(wizard)


@router.delete(
    "/projects/{index}",
    response_model=Project,
    responses={404: {"description": "No project at that index"}},
)
async def remove_project(
    index: Annotated[int, PathParam(ge=0, description="Position in the project list")],
    wizard: WizardDep,
) -> Project:
    _index_or_404("project", index, len(wizard.data.projects))
    return wizard.remove_project(index)
