"""Five-step resume wizard over the draft held by a :class:`DraftStore`.

Steps run Personal Info -> Education -> Skills -> Projects -> Summary.
Moving forward validates only the current step; moving back never does.
Every edit derives a new :class:`ResumeData` through
``DraftStore.update``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

from resume_builder.services.resume_data import Education, PersonalInfo, Project, ResumeData, Skill
from resume_builder.services.validation import (
    FieldError,
    validate_education,
    validate_personal_info,
    validate_project,
)

if TYPE_CHECKING:
    from resume_builder.services.draft_store import DraftStore

logger = logging.getLogger(__name__)

__all__ = [
    "ResumeWizard",
    "StepResult",
    "WizardStep",
    "parse_technologies",
]

DEFAULT_SKILL_CATEGORY = "technical"


class WizardStep(IntEnum):
    PERSONAL_INFO = 1
    EDUCATION = 2
    SKILLS = 3
    PROJECTS = 4
    SUMMARY = 5

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES = {
    WizardStep.PERSONAL_INFO: "Personal Info",
    WizardStep.EDUCATION: "Education",
    WizardStep.SKILLS: "Skills",
    WizardStep.PROJECTS: "Projects",
    WizardStep.SUMMARY: "Summary",
}

TOTAL_STEPS = len(WizardStep)


class Cancellable(Protocol):
    def cancel(self) -> bool: ...

    def done(self) -> bool: ...


@dataclass(frozen=True)
class StepResult:
    """Outcome of a transition attempt."""

    ok: bool
    step: WizardStep
    errors: tuple[FieldError, ...] = field(default_factory=tuple)


def parse_technologies(raw: str) -> tuple[str, ...]:
    """Split a comma-separated list, trimming pieces and dropping blanks."""
    return tuple(t for t in (piece.strip() for piece in raw.split(",")) if t)


def _check_index(index: int) -> None:
    if index < 0:
        raise IndexError(f"Index must be non-negative, got {index}")


class ResumeWizard:
    """Linear step machine; the draft itself lives in the store."""

    def __init__(self, store: DraftStore) -> None:
        self.store = store
        self.current_step = WizardStep.PERSONAL_INFO
        self.completed = False
        self._pending: list[Cancellable] = []

    # ------------------------------------------------------------------
    # derived state
    # ------------------------------------------------------------------

    @property
    def data(self) -> ResumeData:
        return self.store.current

    @property
    def progress(self) -> float:
        return self.current_step / TOTAL_STEPS * 100

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------

    def step_errors(self, step: WizardStep | None = None) -> list[FieldError]:
        """Validation errors blocking *step* (default: the current one)."""
        step = step or self.current_step
        data = self.store.current
        if step is WizardStep.PERSONAL_INFO:
            return validate_personal_info(data.personal_info)
        if step is WizardStep.EDUCATION:
            entry = data.education[0] if data.education else Education()
            return validate_education(entry)
        return []

    def next(self) -> StepResult:
        if self.current_step is WizardStep.SUMMARY:
            return self.complete()

        errors = self.step_errors()
        if errors:
            logger.info("Step %s blocked: %s", self.current_step.title, errors)
            return StepResult(ok=False, step=self.current_step, errors=tuple(errors))

        self._move_to(WizardStep(self.current_step + 1))
        return StepResult(ok=True, step=self.current_step)

    def back(self) -> StepResult:
        if self.current_step > WizardStep.PERSONAL_INFO:
            self._move_to(WizardStep(self.current_step - 1))
        return StepResult(ok=True, step=self.current_step)

    def complete(self) -> StepResult:
        """Finish the wizard. Only allowed from the Summary step."""
        if self.current_step is not WizardStep.SUMMARY:
            return StepResult(
                ok=False,
                step=self.current_step,
                errors=(FieldError("step", "Complete every step before finishing"),),
            )
        self._cancel_pending()
        self.completed = True
        return StepResult(ok=True, step=self.current_step)

    def reset(self) -> None:
        self._cancel_pending()
        self.current_step = WizardStep.PERSONAL_INFO
        self.completed = False

    def _move_to(self, step: WizardStep) -> None:
        self._cancel_pending()
        self.current_step = step
        self.completed = False

    # ------------------------------------------------------------------
    # pending AI requests
    # ------------------------------------------------------------------

    def track_request(self, request: Cancellable) -> None:
        """Register an in-flight request to cancel on the next transition."""
        self._pending = [r for r in self._pending if not r.done()]
        self._pending.append(request)

    def _cancel_pending(self) -> None:
        for request in self._pending:
            if not request.done():
                request.cancel()
        self._pending.clear()

    # ------------------------------------------------------------------
    # ------------------------------------------------------------------
    # edits
    # ------------------------------------------------------------------

    def _commit(self, **changes: object) -> ResumeData:
        return self.store.update(lambda data: data.model_copy(update=changes))

    def select_role(self, role: str) -> ResumeData:
        return self._commit(selected_role=role.strip())

    def update_personal_info(self, info: PersonalInfo) -> ResumeData:
        return self._commit(personal_info=info)

    def update_education(self, entry: Education) -> ResumeData:
        """Replace the first education entry, keeping any others."""
        return self.store.update(
            lambda data: data.model_copy(update={"education": (entry, *data.education[1:])})
        )

    def update_summary(self, summary: str) -> ResumeData:
        return self._commit(summary=summary.strip())

    def add_skill(self, name: str, category: str = DEFAULT_SKILL_CATEGORY) -> bool:
        """Append a skill. Blank names are ignored and return ``False``."""
        name = name.strip()
        if not name:
            return False
        skill = Skill(name=name, category=category)
        self.store.update(lambda data: data.model_copy(update={"skills": (*data.skills, skill)}))
        return True

    def add_suggested_skill(self, skill: Skill) -> bool:
        return self.add_skill(skill.name, skill.category or DEFAULT_SKILL_CATEGORY)

    def remove_skill(self, index: int) -> Skill:
        _check_index(index)
        removed: list[Skill] = []

        def drop(data: ResumeData) -> ResumeData:
            skills = list(data.skills)
            removed.append(skills.pop(index))
            return data.model_copy(update={"skills": tuple(skills)})

        self.store.update(drop)
        return removed[0]

    def add_project(
        self,
        title: str,
        description: str = "",
        technologies: str = "",
        link: str = "",
        github: str = "",
    ) -> list[FieldError]:
        """Append a project built from raw form input.

        A blank title is a silent no-op.  Malformed URLs are reported and
        nothing is added.
        """
        title = title.strip()
        if not title:
            return []

        project = Project(
            title=title,
            description=description.strip(),
            technologies=parse_technologies(technologies),
            link=link.strip(),
            github=github.strip(),
        )
        errors = validate_project(project)
        if errors:
            return errors

        self.store.update(
            lambda data: data.model_copy(update={"projects": (*data.projects, project)})
        )
        return []

    def remove_project(self, index: int) -> Project:
        _check_index(index)
        removed: list[Project] = []

        def drop(data: ResumeData) -> ResumeData:
            projects = list(data.projects)
            removed.append(projects.pop(index))
            return data.model_copy(update={"projects": tuple(projects)})

        self.store.update(drop)
        return removed[0]
