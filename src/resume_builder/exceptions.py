"""Error types shared across the resume builder services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resume_builder.services.validation import FieldError

__all__ = [
    "ExportError",
    "PersistenceError",
    "QRGenerationError",
    "RenderError",
    "ResumeValidationError",
    "TemplateNotSelectedError",
    "UnknownTemplateError",
]


class ResumeValidationError(ValueError):
    """Raised when resume data fails one or more schema checks."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors = tuple(errors)
        summary = "; ".join(f"{e.field}: {e.reason}" for e in self.errors)
        super().__init__(summary or "Invalid resume data")


class PersistenceError(OSError):
    """Raised when the draft slot cannot be written."""


class ExportError(RuntimeError):
    """Base class for failures while producing a downloadable artifact."""


class TemplateNotSelectedError(ExportError):
    """Raised when an export is requested without a template."""


class UnknownTemplateError(ExportError):
    """Raised when a template identifier is not registered."""

    def __init__(self, template_id: str, available: Sequence[str]) -> None:
        self.template_id = template_id
        self.available = tuple(available)
        super().__init__(
            f"Unknown template {template_id!r}. Available: {', '.join(self.available)}"
        )


class RenderError(ExportError):
    """Raised when a laid-out page cannot be rendered to PDF."""


class QRGenerationError(ExportError):
    """Raised when a QR code image cannot be produced."""
