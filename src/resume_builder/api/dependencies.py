"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Request

from resume_builder.services.draft_store import DraftStore
from resume_builder.services.wizard import ResumeWizard


def get_draft_store(request: Request) -> DraftStore:
    """Return the session draft store created at startup."""
    return request.app.state.draft_store


def get_wizard(request: Request) -> ResumeWizard:
    """Return the wizard bound to the session draft."""
    return request.app.state.wizard
