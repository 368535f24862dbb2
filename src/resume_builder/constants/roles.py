"""Target career roles offered by the role picker.

Each role carries the copy shown on its card and a few sample skills.  The
wizard itself accepts any role string; these are only the suggested ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TargetRole(StrEnum):
    """Enumeration of the roles a resume can be tailored for."""

    DEVELOPER = "developer"
    ANALYST = "analyst"
    MARKETING = "marketing"
    DESIGN = "design"
    BUSINESS = "business"
    HR = "hr"


@dataclass(frozen=True)
class RoleMetadata:
    """Metadata associated with a target role."""

    role: TargetRole
    title: str
    description: str
    sample_skills: tuple[str, ...]


# Role metadata mapping
ROLE_METADATA: dict[TargetRole, RoleMetadata] = {
    TargetRole.DEVELOPER: RoleMetadata(
        role=TargetRole.DEVELOPER,
        title="Software Developer",
        description="Backend, Frontend, Full-stack development roles",
        sample_skills=("JavaScript", "Python", "React"),
    ),
    TargetRole.ANALYST: RoleMetadata(
        role=TargetRole.ANALYST,
        title="Data Analyst",
        description="Business intelligence, data science, analytics",
        sample_skills=("SQL", "Excel", "Tableau"),
    ),
    TargetRole.MARKETING: RoleMetadata(
        role=TargetRole.MARKETING,
        title="Marketing",
        description="Digital marketing, content, social media",
        sample_skills=("SEO", "Analytics", "Content"),
    ),
    TargetRole.DESIGN: RoleMetadata(
        role=TargetRole.DESIGN,
        title="UI/UX Designer",
        description="User experience, interface design, product design",
        sample_skills=("Figma", "Sketch", "Adobe XD"),
    ),
    TargetRole.BUSINESS: RoleMetadata(
        role=TargetRole.BUSINESS,
        title="Business Analyst",
        description="Process improvement, requirements analysis",
        sample_skills=("JIRA", "Confluence", "SQL"),
    ),
    TargetRole.HR: RoleMetadata(
        role=TargetRole.HR,
        title="Human Resources",
        description="Recruitment, employee relations, training",
        sample_skills=("Recruiting", "HRIS", "Training"),
    ),
}


def get_role_metadata(role: str) -> RoleMetadata | None:
    """Return metadata for *role*, or ``None`` for a free-form role."""
    try:
        return ROLE_METADATA[TargetRole(role)]
    except ValueError:
        return None
