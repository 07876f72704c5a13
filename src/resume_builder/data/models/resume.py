from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_builder.data.db import Base


class Resume(Base):
    """
    A structured resume, the template it is rendered with and its latest PDF.
    """

    __tablename__ = "resumes"
    __table_args__ = (Index("ix_resumes_session_active", "session_id", "is_active"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    # Stored as JSON strings
    structured_data: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    custom_styles: Mapped[str] = mapped_column(Text, nullable=False, default="{}")

    template: Mapped[str] = mapped_column(String(32), nullable=False, default="modern")
    pdf_path: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
