"""Routes for the locally persisted draft."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from resume_builder.api.dependencies import get_draft_store, get_wizard
from resume_builder.api.schemas.common import MessageResponse
from resume_builder.exceptions import PersistenceError
from resume_builder.services.draft_store import DraftStore
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.wizard import ResumeWizard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/draft", tags=["draft"])

StoreDep = Annotated[DraftStore, Depends(get_draft_store)]


@router.get("", response_model=ResumeData)
def get_draft(store: StoreDep) -> ResumeData:
    """Return the in-memory draft."""
    return store.current


@router.put("", response_model=ResumeData)
def replace_draft(data: ResumeData, store: StoreDep) -> ResumeData:
    """Replace the whole draft. Not persisted until the next save."""
    store.replace(data)
    return store.current


@router.post("/save", response_model=MessageResponse)
def save_draft(store: StoreDep) -> MessageResponse:
    """Persist the draft to its local slot now."""
    try:
        store.save()
    except PersistenceError as exc:
        logger.exception("Manual draft save failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return MessageResponse(message="Draft saved")


@router.post("/load", response_model=ResumeData)
def load_draft(store: StoreDep) -> ResumeData:
    """Reload the draft from its slot, falling back to an empty one."""
    return store.load()


@router.delete("", response_model=ResumeData)
async def clear_draft(
    store: StoreDep,
    wizard: Annotated[ResumeWizard, Depends(get_wizard)],
) -> ResumeData:
    """Reset the draft to empty and send the wizard back to the first step.

    Runs on the event loop because resetting cancels pending AI tasks.
    """
    store.clear()
    wizard.reset()
    return store.current
