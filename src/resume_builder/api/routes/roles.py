"""Target role routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from resume_builder.api.schemas.export import RoleResponse
from resume_builder.constants.roles import ROLE_METADATA, RoleMetadata, get_role_metadata

router = APIRouter(prefix="/roles", tags=["roles"])


def _to_response(meta: RoleMetadata) -> RoleResponse:
    return RoleResponse(
        id=meta.role.value,
        title=meta.title,
        description=meta.description,
        sample_skills=list(meta.sample_skills),
    )


@router.get("", response_model=list[RoleResponse])
def list_roles() -> list[RoleResponse]:
    """Return the suggested target roles with their sample skills."""
    return [_to_response(meta) for meta in ROLE_METADATA.values()]


@router.get(
    "/{role}",
    response_model=RoleResponse,
    responses={404: {"description": "Not one of the suggested roles"}},
)
def get_role(role: str) -> RoleResponse:
    """Return the card details for one suggested role."""
    meta = get_role_metadata(role)
    if meta is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown role: {role}",
        )
    return _to_response(meta)
