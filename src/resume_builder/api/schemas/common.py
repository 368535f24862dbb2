"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from resume_builder.services.validation import FieldError


class FieldErrorResponse(BaseModel):
    """A single failed validation check."""

    field: str = Field(description="Name of the offending field")
    reason: str = Field(description="Message to show next to the field")

    @classmethod
    def from_error(cls, error: FieldError) -> FieldErrorResponse:
        return cls(field=error.field, reason=error.reason)


class MessageResponse(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Body returned when an upstream service fails."""

    error: str


class SnapshotSavedResponse(MessageResponse):
    """Acknowledgement for a stored resume snapshot."""

    id: str = Field(description="Key to delete the snapshot with")
