"""ORM models package for database tables.

- Resume: a rendered resume owned by a client session
- ClientSession: the opaque client-generated session token and its activity

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume import Resume
from resume_builder.data.models.session import ClientSession

__all__ = ["Base", "ClientSession", "Resume"]
