"""Liveness route for the resume builder service."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])

HEALTHY = {"status": "healthy"}


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report that the service is accepting requests."""
    return dict(HEALTHY)
