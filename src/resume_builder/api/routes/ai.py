"""AI advice routes.

Failures never reach the client as tracebacks: any :class:`LLMError` is
logged and answered with status 500 and ``{"error": ...}``.

Advisor calls block on the network, so each one runs in a worker thread as
a task registered with the wizard.  Moving to another step cancels it and
the request is answered with 409 instead of a stale result.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Annotated, Any, TypeVar

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from resume_builder.api.dependencies import get_wizard
from resume_builder.api.schemas.ai import (
    EnhanceRequest,
    ResumeReviewRequest,
    SkillSuggestionsResponse,
    SuggestionsResponse,
)
from resume_builder.api.schemas.common import ErrorResponse
from resume_builder.services import ai_advisor
from resume_builder.services.llm_providers import LLMError
from resume_builder.services.resume_data import EnhancedText, ResumeScore
from resume_builder.services.wizard import ResumeWizard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])
skills_router = APIRouter(prefix="/skills", tags=["ai"])

WizardDep = Annotated[ResumeWizard, Depends(get_wizard)]

T = TypeVar("T")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    409: {"description": "Cancelled by a wizard step change"},
    500: {"model": ErrorResponse, "description": "AI provider failed"},
}


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )


async def run_tracked(wizard: ResumeWizard, call: Callable[..., T], *args: Any) -> T:
    """Run a blocking advisor call off the loop, cancellable by the wizard.

    Raises:
        HTTPException: 409 when a step change cancelled the call.
    """
    task = asyncio.ensure_future(asyncio.to_thread(call, *args))
    wizard.track_request(task)
    await asyncio.wait({task})
    if task.cancelled():
        logger.info("Discarding AI result after a wizard step change")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Request cancelled by a wizard step change",
        )
    return task.result()


@router.post(
    "/suggestions",
    response_model=SuggestionsResponse,
    responses=_ERROR_RESPONSES,
)
async def ai_suggestions(
    request: ResumeReviewRequest, wizard: WizardDep
) -> SuggestionsResponse | JSONResponse:
    """Suggest improvements to a resume for the target role."""
    try:
        suggestions = await run_tracked(
            wizard, ai_advisor.suggest_improvements, request.resume_data, request.role
        )
    except LLMError:
        logger.exception("AI suggestions error")
        return _error("Failed to generate AI suggestions")
    return SuggestionsResponse(suggestions=suggestions)


@router.post("/score", response_model=ResumeScore, responses=_ERROR_RESPONSES)
async def ai_score(request: ResumeReviewRequest, wizard: WizardDep) -> ResumeScore | JSONResponse:
    """Score a resume 0-10 for the target role."""
    try:
        return await run_tracked(
            wizard, ai_advisor.score_resume, request.resume_data, request.role
        )
    except LLMError:
        logger.exception("AI scoring error")
        return _error("Failed to generate resume score")


@router.post("/enhance", response_model=EnhancedText, responses=_ERROR_RESPONSES)
async def ai_enhance(request: EnhanceRequest, wizard: WizardDep) -> EnhancedText | JSONResponse:
    """Rewrite a piece of resume text to be more impactful."""
    try:
        return await run_tracked(
            wizard, ai_advisor.enhance_text, request.text, request.type, request.role
        )
    except LLMError:
        logger.exception("AI enhancement error")
        return _error("Failed to enhance content")


@skills_router.get(
    "/{role}",
    response_model=SkillSuggestionsResponse,
    responses=_ERROR_RESPONSES,
)
async def skill_suggestions(
    role: str, wizard: WizardDep
) -> SkillSuggestionsResponse | JSONResponse:
    """Suggest 10-15 skills relevant to *role*."""
    try:
        skills = await run_tracked(wizard, ai_advisor.suggest_skills, role)
    except LLMError:
        logger.exception("Skill suggestions error")
        return _error("Failed to get skill suggestions")
    return SkillSuggestionsResponse(skills=skills)
