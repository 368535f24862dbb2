"""Template listing and export routes."""

from __future__ import annotations

import logging
from datetime import date
from typing import Annotated, Literal
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from resume_builder.api.dependencies import get_draft_store
from resume_builder.api.schemas.export import (
    PdfExportRequest,
    QRDataUriResponse,
    QRExportRequest,
    TemplateResponse,
)
from resume_builder.exceptions import (
    QRGenerationError,
    RenderError,
    TemplateNotSelectedError,
    UnknownTemplateError,
)
from resume_builder.services.draft_store import DraftStore
from resume_builder.services.export import ExportArtifact, export_pdf
from resume_builder.services.qr import export_qr, qr_data_uri
from resume_builder.templates import get_template, list_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["export"])


def _content_disposition(filename: str) -> str:
    """Attachment header value; non-ASCII names use the RFC 5987 form."""
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        return f"attachment; filename*=UTF-8''{quote(filename)}"
    return f'attachment; filename="{filename}"'


def _download(artifact: ExportArtifact) -> Response:
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": _content_disposition(artifact.filename)},
    )


@router.get("/templates", response_model=list[TemplateResponse])
def get_templates() -> list[TemplateResponse]:
    """List the available resume templates in picker order."""
    templates = [get_template(template_id) for template_id in list_templates()]
    return [
        TemplateResponse(id=t.template_id.value, name=t.name, description=t.description)
        for t in templates
    ]


@router.post(
    "/export/pdf",
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"description": "No template selected"},
        404: {"description": "Unknown template"},
        500: {"description": "PDF rendering failed"},
    },
)
def export_pdf_endpoint(
    request: PdfExportRequest,
    store: Annotated[DraftStore, Depends(get_draft_store)],
) -> Response:
    """Render the current draft with the chosen template and download it."""
    try:
        artifact = export_pdf(
            store.current,
            request.template_id,
            generated_on=request.generated_on or date.today(),
        )
    except TemplateNotSelectedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UnknownTemplateError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except RenderError as exc:
        logger.exception("PDF export failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        ) from exc
    return _download(artifact)


@router.post(
    "/export/qr",
    responses={
        200: {
            "content": {
                "image/png": {},
                "application/json": {"schema": QRDataUriResponse.model_json_schema()},
            }
        },
        500: {"description": "QR generation failed"},
    },
)
def export_qr_endpoint(
    request: QRExportRequest,
    output: Annotated[
        Literal["png", "data-uri"],
        Query(description="Download a PNG or get a data URI to embed"),
    ] = "png",
) -> Response:
    """Encode the payload (usually a share URL) as a QR code."""
    try:
        if output == "data-uri":
            body = QRDataUriResponse(data_uri=qr_data_uri(request.payload))
            return JSONResponse(content=body.model_dump())
        artifact = export_qr(request.payload)
    except QRGenerationError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="QR generation failed",
        ) from exc
    return _download(artifact)
