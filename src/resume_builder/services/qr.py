"""QR code artifacts pointing at a shared resume."""

from __future__ import annotations

import base64
import io
import logging

import qrcode
from qrcode.exceptions import DataOverflowError

from resume_builder.exceptions import QRGenerationError
from resume_builder.services.export import ExportArtifact

logger = logging.getLogger(__name__)

__all__ = ["QR_FILENAME", "export_qr", "generate_qr_png", "qr_data_uri"]

QR_FILENAME = "resume-qr-code.png"
PNG_MEDIA_TYPE = "image/png"


def generate_qr_png(
    payload: str,
    *,
    width: int = 200,
    margin: int = 2,
    dark_color: str = "#000000",
    light_color: str = "#FFFFFF",
) -> bytes:
    """Encode *payload* as a PNG roughly *width* pixels square.

    Raises:
        QRGenerationError: On an empty payload or any encoding failure.
    """
    if not payload.strip():
        raise QRGenerationError("QR generation failed: nothing to encode")

    try:
        qr = qrcode.QRCode(border=margin, box_size=1)
        qr.add_data(payload)
        qr.make(fit=True)
        qr.box_size = max(1, width // (qr.modules_count + 2 * margin))
        image = qr.make_image(fill_color=dark_color, back_color=light_color)
        buffer = io.BytesIO()
        image.save(buffer)
    except (DataOverflowError, ValueError, OSError) as exc:
        logger.exception("QR code generation failed")
        raise QRGenerationError("QR generation failed") from exc
    return buffer.getvalue()


def qr_data_uri(payload: str, **options: object) -> str:
    """Return the QR PNG as a ``data:image/png;base64,...`` URI."""
    encoded = base64.b64encode(generate_qr_png(payload, **options)).decode("ascii")
    return f"data:{PNG_MEDIA_TYPE};base64,{encoded}"


def export_qr(payload: str) -> ExportArtifact:
    return ExportArtifact(
        filename=QR_FILENAME,
        content=generate_qr_png(payload),
        media_type=PNG_MEDIA_TYPE,
    )
