"""Saved resume snapshot routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.schemas.common import SnapshotSavedResponse
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_snapshots import (
    delete_snapshot,
    list_snapshots,
    save_snapshot,
)

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("", response_model=list[ResumeData])
def list_resumes() -> list[ResumeData]:
    """List every saved resume, oldest first."""
    return list_snapshots()


@router.post("", response_model=SnapshotSavedResponse)
def save_resume(data: ResumeData) -> SnapshotSavedResponse:
    """Store a copy of the submitted resume."""
    key = save_snapshot(data)
    return SnapshotSavedResponse(message="Resume saved successfully", id=key)


@router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume(key: Annotated[str, PathParam(description="Snapshot key")]) -> None:
    """Delete a saved resume."""
    if not delete_snapshot(key):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Resume {key} not found",
        )
