"""Route handlers for the API."""

from resume_builder.api.routes import files, health, render, resumes

__all__ = [
    "files",
    "health",
    "render",
    "resumes",
]
