"""Resume routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi import Path as PathParam

from resume_builder.api.dependencies import get_session_id
from resume_builder.api.schemas.common import ApiResponse, MessageResponse
from resume_builder.api.schemas.resumes import (
    ResumeCreateRequest,
    ResumeResponse,
    ResumeStyleRequest,
    ResumeUpdateRequest,
    TemplateInfo,
)
from resume_builder.rendering import PdfGenerationError
from resume_builder.services.resume import (
    activate_resume,
    create_resume,
    delete_resume,
    get_current_resume,
    get_resume,
    get_resume_history,
    regenerate_pdf,
    restyle_resume,
    update_resume,
)
from resume_builder.services.style_instructions import parse_style_instruction
from resume_builder.templates import list_templates

router = APIRouter(prefix="/resumes", tags=["resumes"])

SessionId = Annotated[str, Depends(get_session_id)]
ResumeId = Annotated[int, PathParam(description="Resume ID")]


def _pdf_failure(exc: PdfGenerationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


def _not_found(resume_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Resume {resume_id} not found",
    )


def _respond(result: dict[str, Any] | None, resume_id: int) -> ApiResponse[ResumeResponse]:
    if result is None:
        raise _not_found(resume_id)
    return ApiResponse(data=ResumeResponse.model_validate(result))


# --- static paths MUST come before /{resume_id} to avoid path conflicts ---


@router.get("/templates", response_model=ApiResponse[list[TemplateInfo]])
def get_templates() -> ApiResponse[list[TemplateInfo]]:
    """List the available PDF templates."""
    return ApiResponse(data=[TemplateInfo.model_validate(t) for t in list_templates()])


@router.post(
    "",
    response_model=ApiResponse[ResumeResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_resume_endpoint(
    data: ResumeCreateRequest,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Render a resume PDF and store it as the session's active resume."""
    try:
        result = create_resume(
            session_id,
            data.structured_data,
            template=data.template,
            custom_styles=data.custom_styles,
        )
    except PdfGenerationError as exc:
        raise _pdf_failure(exc) from exc
    return ApiResponse(data=ResumeResponse.model_validate(result))


@router.get("/current", response_model=ApiResponse[ResumeResponse])
def get_current_resume_endpoint(session_id: SessionId) -> ApiResponse[ResumeResponse]:
    """Get the session's active resume."""
    result = get_current_resume(session_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No active resume found",
        )
    return ApiResponse(data=ResumeResponse.model_validate(result))


@router.get("/history", response_model=ApiResponse[list[ResumeResponse]])
def get_resume_history_endpoint(session_id: SessionId) -> ApiResponse[list[ResumeResponse]]:
    """List every resume of the session, newest first."""
    results = get_resume_history(session_id)
    return ApiResponse(data=[ResumeResponse.model_validate(r) for r in results])


@router.get("/{resume_id}", response_model=ApiResponse[ResumeResponse])
def get_resume_endpoint(
    resume_id: ResumeId,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Get a specific resume."""
    return _respond(get_resume(session_id, resume_id), resume_id)


@router.put("/{resume_id}/update", response_model=ApiResponse[ResumeResponse])
def update_resume_endpoint(
    resume_id: ResumeId,
    data: ResumeUpdateRequest,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Replace a resume's content and re-render its PDF."""
    try:
        result = update_resume(session_id, resume_id, data.structured_data)
    except PdfGenerationError as exc:
        raise _pdf_failure(exc) from exc
    return _respond(result, resume_id)


@router.post("/{resume_id}/style", response_model=ApiResponse[ResumeResponse])
def restyle_resume_endpoint(
    resume_id: ResumeId,
    data: ResumeStyleRequest,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Change a resume's template or style overrides and re-render its PDF."""
    styles: dict[str, Any] = {}
    if data.instruction:
        styles.update(parse_style_instruction(data.instruction))
    if data.custom_styles:
        styles.update(data.custom_styles)

    try:
        result = restyle_resume(
            session_id,
            resume_id,
            template=data.template,
            custom_styles=styles,
        )
    except PdfGenerationError as exc:
        raise _pdf_failure(exc) from exc
    return _respond(result, resume_id)


@router.put("/{resume_id}/activate", response_model=ApiResponse[ResumeResponse])
def activate_resume_endpoint(
    resume_id: ResumeId,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Make a resume the session's active one."""
    return _respond(activate_resume(session_id, resume_id), resume_id)


@router.delete("/{resume_id}", response_model=MessageResponse)
def delete_resume_endpoint(resume_id: ResumeId, session_id: SessionId) -> MessageResponse:
    """Delete a resume and its PDF."""
    if not delete_resume(session_id, resume_id):
        raise _not_found(resume_id)
    return MessageResponse(message="Resume deleted successfully")


@router.post("/{resume_id}/regenerate-pdf", response_model=ApiResponse[ResumeResponse])
def regenerate_pdf_endpoint(
    resume_id: ResumeId,
    session_id: SessionId,
) -> ApiResponse[ResumeResponse]:
    """Render the stored resume again and replace its PDF."""
    try:
        result = regenerate_pdf(session_id, resume_id)
    except PdfGenerationError as exc:
        raise _pdf_failure(exc) from exc
    return _respond(result, resume_id)
