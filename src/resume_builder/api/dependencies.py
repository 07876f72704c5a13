"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status

from resume_builder.services.session import is_valid_session_id, touch_session


def get_session_id(
    x_session_id: Annotated[
        str | None,
        Header(
            description=(
                "Client-generated UUIDv4 identifying the browser session. "
                "Scopes resumes to a session; it is not authentication."
            )
        ),
    ] = None,
) -> str:
    """Validate the session header and record activity for it.

    Args:
        x_session_id: Session token from the x-session-id header.

    Returns:
        str: The session id.

    Raises:
        HTTPException: If the header is missing or not a UUIDv4 (400).
    """
    if not x_session_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session ID is required in x-session-id header",
        )
    if not is_valid_session_id(x_session_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid session ID format",
        )
    touch_session(x_session_id)
    return x_session_id
