"""Serve generated PDFs back to clients."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, status
from fastapi import Path as PathParam
from fastapi.responses import FileResponse

from resume_builder.services.pdf_storage import resolve_generated_pdf

router = APIRouter(tags=["files"])


@router.get(
    "/uploads/generated/{filename}",
    responses={200: {"content": {"application/pdf": {}}}},
)
def get_generated_pdf(
    filename: Annotated[str, PathParam(description="Generated PDF filename")],
) -> FileResponse:
    """Download a previously generated resume PDF."""
    path = resolve_generated_pdf(filename)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="File not found",
        )
    return FileResponse(path=str(path), media_type="application/pdf", filename=path.name)
