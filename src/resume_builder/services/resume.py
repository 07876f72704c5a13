"""Resume record service.

CRUD over :class:`~resume_builder.data.models.Resume` rows, scoped to a
client session.  Every operation that changes what a resume looks like
re-renders the whole PDF and retires the previous file; a failed render
leaves the stored record untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy.orm import Session

from resume_builder.data.db import get_session
from resume_builder.data.models import Resume
from resume_builder.rendering import render_resume_pdf
from resume_builder.rendering.styles import StyleOverride
from resume_builder.services.pdf_storage import remove_generated_pdf
from resume_builder.services.resume_data import ResumeData
from resume_builder.templates import resolve_template_id

logger = logging.getLogger(__name__)

__all__ = [
    "activate_resume",
    "create_resume",
    "delete_resume",
    "get_current_resume",
    "get_resume",
    "get_resume_history",
    "regenerate_pdf",
    "restyle_resume",
    "update_resume",
]


def _load_json(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return {}
    return value if isinstance(value, dict) else {}


def _resume_to_dict(resume: Resume) -> dict[str, Any]:
    """Convert a Resume model to a dictionary.

    Args:
        resume: Resume model instance

    Returns:
        Dictionary with the decoded structured data and styles
    """
    return {
        "id": resume.id,
        "session_id": resume.session_id,
        "structured_data": ResumeData.coerce(_load_json(resume.structured_data)).to_wire(),
        "template": resume.template,
        "custom_styles": _load_json(resume.custom_styles),
        "pdf_url": resume.pdf_path,
        "version": resume.version,
        "is_active": resume.is_active,
        "created_at": resume.created_at,
        "updated_at": resume.updated_at,
    }


def _find(session: Session, session_id: str, resume_id: int) -> Resume | None:
    return (
        session.query(Resume)
        .filter(Resume.id == resume_id, Resume.session_id == session_id)
        .first()
    )


def _deactivate_all(session: Session, session_id: str, *, keep_id: int | None = None) -> None:
    query = session.query(Resume).filter(
        Resume.session_id == session_id, Resume.is_active.is_(True)
    )
    if keep_id is not None:
        query = query.filter(Resume.id != keep_id)
    query.update({Resume.is_active: False}, synchronize_session=False)


def create_resume(
    session_id: str,
    structured_data: ResumeData | dict[str, Any],
    template: str | None = None,
    custom_styles: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Render a new resume and store it as the session's active resume.

    Args:
        session_id: Owning client session
        structured_data: Resume content
        template: Template id; unknown ids fall back to the default template
        custom_styles: Optional ``primaryColor``/``accentColor``/``lineSpacing``

    Returns:
        The stored resume as a dictionary

    Raises:
        PdfGenerationError: If the PDF could not be produced
    """
    data = ResumeData.coerce(structured_data)
    template_id = resolve_template_id(template).value
    styles = StyleOverride.from_mapping(custom_styles).to_mapping()

    pdf = render_resume_pdf(data, template_id, styles)
    try:
        with get_session() as session:
            _deactivate_all(session, session_id)
            resume = Resume(
                session_id=session_id,
                structured_data=json.dumps(data.to_wire()),
                custom_styles=json.dumps(styles),
                template=template_id,
                pdf_path=pdf.url,
            )
            session.add(resume)
            session.flush()
            result = _resume_to_dict(resume)
    except Exception:
        remove_generated_pdf(pdf.url)
        raise

    logger.info("Created resume %s for session %s", result["id"], session_id)
    return result


def get_current_resume(session_id: str) -> dict[str, Any] | None:
    """Return the newest active resume of *session_id*, or None."""
    with get_session() as session:
        resume = (
            session.query(Resume)
            .filter(Resume.session_id == session_id, Resume.is_active.is_(True))
            .order_by(Resume.created_at.desc(), Resume.id.desc())
            .first()
        )
        return _resume_to_dict(resume) if resume else None


def get_resume_history(session_id: str) -> list[dict[str, Any]]:
    """Return every resume of *session_id*, newest first."""
    with get_session() as session:
        resumes = (
            session.query(Resume)
            .filter(Resume.session_id == session_id)
            .order_by(Resume.created_at.desc(), Resume.id.desc())
            .all()
        )
        return [_resume_to_dict(resume) for resume in resumes]


def get_resume(session_id: str, resume_id: int) -> dict[str, Any] | None:
    """Return a single resume, or None if it does not belong to *session_id*."""
    with get_session() as session:
        resume = _find(session, session_id, resume_id)
        return _resume_to_dict(resume) if resume else None


def _rerender(
    session_id: str,
    resume_id: int,
    *,
    structured_data: ResumeData | dict[str, Any] | None = None,
    template: str | None = None,
    custom_styles: dict[str, Any] | None = None,
    bump_version: bool = True,
) -> dict[str, Any] | None:
    """Re-render a stored resume with any of its inputs replaced.

    The previous PDF is removed only after the new one is committed; if
    anything fails after rendering, the new PDF is removed instead.
    """
    pdf = None
    try:
        with get_session() as session:
            resume = _find(session, session_id, resume_id)
            if resume is None:
                return None

            if structured_data is not None:
                data = ResumeData.coerce(structured_data)
            else:
                data = ResumeData.coerce(_load_json(resume.structured_data))
            template_id = resolve_template_id(template or resume.template).value
            styles = StyleOverride.from_mapping(
                {**_load_json(resume.custom_styles), **(custom_styles or {})}
            ).to_mapping()

            pdf = render_resume_pdf(data, template_id, styles)
            old_pdf = resume.pdf_path

            resume.structured_data = json.dumps(data.to_wire())
            resume.template = template_id
            resume.custom_styles = json.dumps(styles)
            resume.pdf_path = pdf.url
            if bump_version:
                resume.version += 1
            session.flush()
            result = _resume_to_dict(resume)
    except Exception:
        if pdf is not None:
            remove_generated_pdf(pdf.url)
        raise

    remove_generated_pdf(old_pdf)
    return result


def update_resume(
    session_id: str,
    resume_id: int,
    structured_data: ResumeData | dict[str, Any],
) -> dict[str, Any] | None:
    """Replace the content of a resume and re-render it with its current style.

    Returns:
        The updated resume, or None if it was not found
    """
    return _rerender(session_id, resume_id, structured_data=structured_data)


def restyle_resume(
    session_id: str,
    resume_id: int,
    template: str | None = None,
    custom_styles: dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Switch template and/or merge style overrides, then re-render.

    New ``custom_styles`` keys take precedence over the stored ones.

    Returns:
        The updated resume, or None if it was not found
    """
    return _rerender(session_id, resume_id, template=template, custom_styles=custom_styles)


def regenerate_pdf(session_id: str, resume_id: int) -> dict[str, Any] | None:
    """Render the stored resume again without changing its content or version."""
    return _rerender(session_id, resume_id, bump_version=False)


def activate_resume(session_id: str, resume_id: int) -> dict[str, Any] | None:
    """Make *resume_id* the only active resume of its session."""
    with get_session() as session:
        resume = _find(session, session_id, resume_id)
        if resume is None:
            return None
        _deactivate_all(session, session_id, keep_id=resume_id)
        resume.is_active = True
        session.flush()
        return _resume_to_dict(resume)


def delete_resume(session_id: str, resume_id: int) -> bool:
    """Delete a resume and its PDF.

    Returns:
        True if the resume existed and was deleted
    """
    with get_session() as session:
        resume = _find(session, session_id, resume_id)
        if resume is None:
            return False
        pdf_url = resume.pdf_path
        session.delete(resume)

    remove_generated_pdf(pdf_url)
    logger.info("Deleted resume %s for session %s", resume_id, session_id)
    return True
