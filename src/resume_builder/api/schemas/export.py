"""Pydantic schemas for templates, roles and export endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class TemplateResponse(BaseModel):
    id: str
    name: str
    description: str


class RoleResponse(BaseModel):
    id: str
    title: str
    description: str
    sample_skills: list[str]


class PdfExportRequest(BaseModel):
    """Request schema for a PDF export of the current draft."""

    template_id: str | None = Field(None, description="One of the ids from GET /api/templates")
    generated_on: date | None = Field(
        None, description="Footer date (ISO format); defaults to today"
    )


class QRExportRequest(BaseModel):
    payload: str = Field(..., description="Text or URL to encode")


class QRDataUriResponse(BaseModel):
    """QR code inlined as a ``data:image/png;base64,`` URI."""

    data_uri: str
