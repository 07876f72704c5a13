"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope every JSON endpoint answers with."""

    success: bool = Field(True, description="Whether the request succeeded")
    data: T


class MessageResponse(BaseModel):
    success: bool = True
    message: str
