"""Client session bookkeeping.

Sessions are identified by an opaque client-generated UUID.  They scope
which resumes a caller can see; they do not authenticate anyone.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime

from resume_builder.data.db import get_session
from resume_builder.data.models import ClientSession

logger = logging.getLogger(__name__)

__all__ = ["is_valid_session_id", "touch_session"]

_UUID4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_session_id(session_id: str | None) -> bool:
    """Return True if *session_id* looks like a version 4 UUID."""
    return bool(session_id) and _UUID4.match(session_id) is not None


def touch_session(session_id: str) -> None:
    """Record activity for *session_id*, creating the session on first use."""
    with get_session() as session:
        record = (
            session.query(ClientSession).filter(ClientSession.session_id == session_id).first()
        )
        if record is None:
            session.add(ClientSession(session_id=session_id))
            logger.debug("Created session %s", session_id)
        else:
            record.last_activity = datetime.now(UTC)
