"""AI-assisted resume advice: suggestions, scoring, text enhancement, skills.

Every call is best-effort.  Any failure, from a missing API key to a reply
that is not the JSON shape asked for, surfaces as :class:`LLMError`; callers
show a notification and carry on without AI.  Results are display data and
are never written back into the draft.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from resume_builder.services.llm_providers import LLMError
from resume_builder.services.llm_service import LLMService
from resume_builder.services.resume_data import (
    AISuggestion,
    EnhancedText,
    ResumeData,
    ResumeScore,
    Skill,
)

logger = logging.getLogger(__name__)

__all__ = [
    "enhance_text",
    "score_resume",
    "suggest_improvements",
    "suggest_skills",
]

_SUGGESTION_FORMAT = """{
  "type": "skill|improvement|content",
  "title": "suggestion title",
  "description": "detailed suggestion",
  "priority": "low|medium|high"
}"""

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def _request_json(
    system_instructions: str,
    user_content: str,
    service: LLMService | None,
) -> dict[str, Any]:
    """Send a JSON-mode prompt and decode the reply into a dict."""
    try:
        llm = service or LLMService()
        text = llm.generate_llm_response(
            system_instructions=system_instructions,
            user_content=user_content,
            temperature=0.7,
            json_mode=True,
        )
    except LLMError:
        raise
    except Exception as e:
        raise LLMError(f"LLM API call failed: {e}") from e

    try:
        parsed = json.loads(_FENCE.sub("", text.strip()))
    except json.JSONDecodeError as e:
        logger.warning("Discarding non-JSON LLM reply: %.200s", text)
        raise LLMError("LLM returned malformed JSON") from e
    if not isinstance(parsed, dict):
        raise LLMError("LLM returned JSON that is not an object")
    return parsed


def _resume_json(resume: ResumeData) -> str:
    return resume.model_dump_json(by_alias=True)


def suggest_improvements(
    resume: ResumeData,
    role: str,
    *,
    service: LLMService | None = None,
) -> list[AISuggestion]:
    """Ask for actionable improvement suggestions for *role*."""
    system = (
        "You are a professional resume advisor. Provide specific, actionable "
        "suggestions to improve resumes for different career roles."
    )
    user = (
        f"Analyze this resume data for a {role} role and provide improvement suggestions.\n"
        f"Resume: {_resume_json(resume)}\n\n"
        'Respond with JSON in this format:\n{"suggestions": [' + _SUGGESTION_FORMAT + "]}"
    )
    payload = _request_json(system, user, service)
    try:
        return [AISuggestion.model_validate(s) for s in payload.get("suggestions", [])]
    except (ValidationError, TypeError) as e:
        raise LLMError(f"Unexpected suggestions payload: {e}") from e


def score_resume(
    resume: ResumeData,
    role: str,
    *,
    service: LLMService | None = None,
) -> ResumeScore:
    """Score the resume 0-10 for *role* with feedback."""
    system = (
        "You are a professional resume scorer. Evaluate resumes objectively based on "
        "industry standards, completeness, and relevance to the target role."
    )
    user = (
        f"Score this resume for a {role} role on a scale of 1-10 and provide feedback.\n"
        f"Resume: {_resume_json(resume)}\n\n"
        "Respond with JSON in this format:\n"
        '{"score": 7, "feedback": "specific feedback about strengths and areas for '
        'improvement", "suggestions": [' + _SUGGESTION_FORMAT + "]}"
    )
    payload = _request_json(system, user, service)
    try:
        return ResumeScore.model_validate(payload)
    except ValidationError as e:
        raise LLMError(f"Unexpected score payload: {e}") from e


def enhance_text(
    text: str,
    kind: str,
    role: str,
    *,
    service: LLMService | None = None,
) -> EnhancedText:
    """Rewrite a piece of resume text (*kind*: summary, description...)."""
    system = (
        "You are a professional resume writer. Enhance resume content to be more "
        "impactful while maintaining accuracy and relevance."
    )
    user = (
        f"Enhance this {kind} for a {role} resume to be more professional and impactful:\n"
        f'"{text}"\n\n'
        "Respond with JSON in this format:\n"
        '{"enhanced": "improved version of the text", '
        '"explanation": "brief explanation of improvements made"}'
    )
    payload = _request_json(system, user, service)
    try:
        return EnhancedText.model_validate(payload)
    except ValidationError as e:
        raise LLMError(f"Unexpected enhancement payload: {e}") from e


def suggest_skills(role: str, *, service: LLMService | None = None) -> list[Skill]:
    """Suggest 10-15 relevant skills for *role*."""
    system = (
        "You are a career advisor. Suggest relevant skills for different job roles "
        "based on current industry requirements."
    )
    user = (
        f"Suggest 10-15 relevant technical and soft skills for a {role} role.\n\n"
        "Respond with JSON in this format:\n"
        '{"skills": [{"name": "skill name", "category": "technical|soft|tool"}]}'
    )
    payload = _request_json(system, user, service)
    try:
        skills = [Skill.model_validate(s) for s in payload.get("skills", [])]
    except (ValidationError, TypeError) as e:
        raise LLMError(f"Unexpected skills payload: {e}") from e
    return [s for s in skills if s.name.strip()]
