"""Stateless PDF preview route."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from resume_builder.api.schemas.resumes import RenderRequest
from resume_builder.rendering import PdfGenerationError, render_pdf_bytes

router = APIRouter(tags=["render"])


@router.post(
    "/render",
    responses={200: {"content": {"application/pdf": {}}}},
    response_class=Response,
)
def render_preview(data: RenderRequest) -> Response:
    """Render a resume to PDF and return the bytes without storing anything."""
    try:
        pdf_bytes = render_pdf_bytes(data.structured_data, data.template, data.custom_styles)
    except PdfGenerationError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'inline; filename="resume.pdf"'},
    )
