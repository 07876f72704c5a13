"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_builder.services.resume_data import ResumeData


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TemplateInfo(_CamelModel):
    """A selectable PDF template."""

    id: str
    name: str
    header_style: str
    section_style: str


class ResumeCreateRequest(_CamelModel):
    """Request schema for rendering and storing a new resume."""

    structured_data: ResumeData = Field(..., description="Structured resume content")
    template: str = Field("modern", description="Template identifier")
    custom_styles: dict[str, Any] = Field(
        default_factory=dict,
        description="Optional primaryColor, accentColor and lineSpacing overrides",
    )


class RenderRequest(ResumeCreateRequest):
    """Request schema for rendering a PDF without storing it."""


class ResumeUpdateRequest(_CamelModel):
    """Request schema for replacing the content of a resume."""

    structured_data: ResumeData = Field(..., description="Structured resume content")


class ResumeStyleRequest(_CamelModel):
    """Request schema for restyling a resume.

    All fields are optional; ``custom_styles`` keys win over keys parsed
    from ``instruction``.
    """

    template: str | None = Field(None, description="New template identifier")
    custom_styles: dict[str, Any] | None = Field(None, description="Style overrides to merge")
    instruction: str | None = Field(
        None, description='Free-text request such as "make it navy with tighter spacing"'
    )


class ResumeResponse(_CamelModel):
    """Response schema for a stored resume."""

    id: int = Field(alias="resumeId")
    structured_data: dict[str, Any]
    template: str
    custom_styles: dict[str, Any] = {}
    pdf_url: str
    version: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
